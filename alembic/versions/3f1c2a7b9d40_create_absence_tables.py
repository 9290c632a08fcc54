"""Create absence registration, accrual history and holiday balance tables

Revision ID: 3f1c2a7b9d40
Revises:
Create Date: 2026-10-17 09:12:31.418203

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a7b9d40"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "absence_registrations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=300), nullable=False),
        sa.Column("employee_email", sa.String(length=255), nullable=False),
        sa.Column("employee_name", sa.String(length=200), nullable=False),
        sa.Column("approver_email", sa.String(length=255), nullable=True),
        sa.Column("approver_name", sa.String(length=200), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("number_of_days", sa.Float(), nullable=False),
        sa.Column("absence_type", sa.Integer(), nullable=False),
        sa.Column("status", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("approval_date", sa.DateTime(), nullable=True),
        sa.Column("approver_comments", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_absence_employee_start",
        "absence_registrations",
        ["employee_email", "start_date"],
        unique=False,
    )
    op.create_index(
        "idx_absence_approver_status",
        "absence_registrations",
        ["approver_email", "status"],
        unique=False,
    )

    op.create_table(
        "accrual_history",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=300), nullable=False),
        sa.Column("employee_email", sa.String(length=255), nullable=False),
        sa.Column("employee_name", sa.String(length=200), nullable=False),
        sa.Column("holiday_year", sa.String(length=9), nullable=False),
        sa.Column("accrual_date", sa.Date(), nullable=False),
        sa.Column("accrual_month", sa.Integer(), nullable=False),
        sa.Column("accrual_year", sa.Integer(), nullable=False),
        sa.Column("days_accrued", sa.Float(), nullable=False),
        sa.Column("feriefridage_accrued", sa.Float(), nullable=True),
        sa.Column("balance_after_accrual", sa.Float(), nullable=True),
        sa.Column("accrual_type", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_accrual_employee_year",
        "accrual_history",
        ["employee_email", "holiday_year"],
        unique=False,
    )

    op.create_table(
        "holiday_balances",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("employee_email", sa.String(length=255), nullable=False),
        sa.Column("employee_name", sa.String(length=200), nullable=False),
        sa.Column("holiday_year", sa.String(length=9), nullable=False),
        sa.Column("carried_over_days", sa.Float(), nullable=False),
        sa.Column("transferred_in_days", sa.Float(), nullable=False),
        sa.Column("transferred_out_days", sa.Float(), nullable=False),
        sa.Column("has_transfer_agreement", sa.Boolean(), nullable=False),
        sa.Column("transfer_agreement_date", sa.Date(), nullable=True),
        sa.Column("feriefridage_transferred_in", sa.Float(), nullable=False),
        sa.Column("feriefridage_transferred_out", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "employee_email", "holiday_year", name="uq_holiday_balance_employee_year"
        ),
    )


def downgrade() -> None:
    op.drop_table("holiday_balances")
    op.drop_index("idx_accrual_employee_year", table_name="accrual_history")
    op.drop_table("accrual_history")
    op.drop_index("idx_absence_approver_status", table_name="absence_registrations")
    op.drop_index("idx_absence_employee_start", table_name="absence_registrations")
    op.drop_table("absence_registrations")

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exception types raised by the services."""


class InvalidHolidayYearError(ValueError):
    """A holiday year key is not of the form ``"YYYY-YYYY+1"``."""

    def __init__(self, holiday_year: object) -> None:
        super().__init__(
            f"Invalid holiday year {holiday_year!r}: expected 'YYYY-YYYY' "
            "with consecutive years"
        )
        self.holiday_year = holiday_year


class RecordNotFoundError(LookupError):
    """A record requested by id does not exist in the record store."""

    def __init__(self, kind: str, record_id: object) -> None:
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class InvalidStatusTransitionError(ValueError):
    """An absence registration cannot move to the requested status."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Cannot change status from {current} to {target}")
        self.current = current
        self.target = target

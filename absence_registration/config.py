# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment or a .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime configuration.

    Statutory values from the Danish Holiday Act are not configurable and
    live next to the code that applies them.
    """

    PROJECT_NAME: str = "Absence Registration"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"

    DATABASE_URL: str = "sqlite:///./absence_registration.db"

    # Comma-separated list of allowed origins
    CORS_ORIGINS: str = "http://localhost:5173"

    LOG_LEVEL: str = "INFO"

    # Days before Dec 31 in which the year-end summary flags the deadline
    TRANSFER_REMINDER_DAYS: int = 30

    # Monthly accrual rates used when generating accrual records
    MONTHLY_ACCRUAL_RATE: float = 2.08
    MONTHLY_FERIEFRIDAGE_RATE: float = 0.42

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()

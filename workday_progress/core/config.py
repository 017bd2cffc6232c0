from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    # Assumed working hours in one business day
    hours_per_day: int = 8
    # Package-data file under workday_progress/data
    holidays_resource: str = "holidays.yaml"
    holidays_key: str = "holidays"


def get_settings() -> Settings:
    """Return the settings for this run.

    Everything the report depends on is fixed at build time, so there is no
    environment or file lookup here.
    """
    return Settings()

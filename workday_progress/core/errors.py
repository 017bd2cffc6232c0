"""Error types raised while loading holidays and counting business days."""


class WorkdayProgressError(Exception):
    """Base exception for workday-progress errors."""
    pass


class ConfigMissing(WorkdayProgressError):
    """Embedded holiday resource is absent or empty."""
    pass


class ConfigParseError(WorkdayProgressError):
    """Holiday document is malformed or holds an invalid date entry."""
    pass


class InvalidRangeError(WorkdayProgressError):
    """End date precedes start date."""
    pass

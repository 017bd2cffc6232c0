from __future__ import annotations

import re
from datetime import date, datetime
from importlib import resources

import yaml

from .config import get_settings
from .errors import ConfigMissing, ConfigParseError
from .logging_config import get_logger
from .models import HolidaySet

logger = get_logger(__name__)

DATA_PACKAGE = "workday_progress.data"

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_entry(entry: object) -> date:
    # safe_load already turns unquoted YYYY-MM-DD scalars into dates
    if isinstance(entry, datetime):
        raise ConfigParseError(f"Holiday entry has a time component: {entry.isoformat()}")
    if isinstance(entry, date):
        return entry
    if not isinstance(entry, str) or not _ISO_DATE.match(entry):
        raise ConfigParseError(f"Holiday entry is not a YYYY-MM-DD date: {entry!r}")
    try:
        return date.fromisoformat(entry)
    except ValueError as e:
        raise ConfigParseError(f"Invalid holiday date: {entry}") from e


def parse_holidays(text: str | bytes, key: str | None = None) -> HolidaySet:
    """Parse a YAML holiday document into a HolidaySet.

    The document must be a mapping whose ``holidays`` key (or ``key``) holds
    a sequence of ``YYYY-MM-DD`` dates. Order and duplicates are preserved.
    """
    key = key or get_settings().holidays_key

    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigParseError(f"Holiday configuration is not valid UTF-8: {e}") from e
    if not text or not text.strip():
        raise ConfigMissing("Holiday configuration is empty")

    try:
        data = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as e:
        # ValueError: implicit timestamps such as 2025-13-01 fail while constructing
        raise ConfigParseError(f"Malformed holiday configuration: {e}") from e

    if data is None:
        raise ConfigMissing("Holiday configuration is empty")
    if not isinstance(data, dict):
        raise ConfigParseError("Holiday configuration must be a mapping")
    if key not in data:
        raise ConfigParseError(f"Holiday configuration has no '{key}' key")

    entries = data[key]
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        raise ConfigParseError(f"'{key}' must be a list of YYYY-MM-DD dates")

    holidays = HolidaySet(tuple(_parse_entry(e) for e in entries))
    logger.debug("Parsed holidays", extra={"count": len(holidays)})
    return holidays


def load_holidays(resource: str | None = None) -> HolidaySet:
    """Load the holiday list bundled with the package."""
    settings = get_settings()
    name = resource or settings.holidays_resource
    try:
        raw = resources.files(DATA_PACKAGE).joinpath(name).read_bytes()
    except (FileNotFoundError, IsADirectoryError) as e:
        raise ConfigMissing(f"Bundled holiday resource '{name}' not found") from e
    return parse_holidays(raw, key=settings.holidays_key)

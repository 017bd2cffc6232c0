"""Tests for the holiday loader."""

from __future__ import annotations

from datetime import date

import pytest

from workday_progress.core.errors import ConfigMissing, ConfigParseError
from workday_progress.core.holidays import load_holidays, parse_holidays
from workday_progress.core.models import HolidaySet


def test_parse_quoted_dates_in_order() -> None:
    text = 'holidays:\n  - "2025-05-05"\n  - "2025-01-01"\n  - "2025-01-01"\n'
    holidays = parse_holidays(text)

    assert isinstance(holidays, HolidaySet)
    # Order and duplicates are kept
    assert list(holidays) == [date(2025, 5, 5), date(2025, 1, 1), date(2025, 1, 1)]


def test_parse_unquoted_dates() -> None:
    holidays = parse_holidays("holidays:\n  - 2025-01-01\n  - 2025-02-11\n")
    assert list(holidays) == [date(2025, 1, 1), date(2025, 2, 11)]


def test_parse_bytes() -> None:
    holidays = parse_holidays(b'holidays: ["2024-02-29"]\n')
    assert date(2024, 2, 29) in holidays


def test_empty_holiday_list_is_valid() -> None:
    assert len(parse_holidays("holidays: []\n")) == 0


@pytest.mark.parametrize("text", ["", "   \n", "# only a comment\n"])
def test_empty_configuration_raises_config_missing(text: str) -> None:
    with pytest.raises(ConfigMissing):
        parse_holidays(text)


def test_invalid_month_raises_parse_error() -> None:
    with pytest.raises(ConfigParseError, match="2025-13-01"):
        parse_holidays('holidays:\n  - "2025-13-01"\n')


def test_invalid_unquoted_month_raises_parse_error() -> None:
    with pytest.raises(ConfigParseError):
        parse_holidays("holidays:\n  - 2025-13-01\n")


@pytest.mark.parametrize(
    "entry",
    ['"2025/01/01"', '"2025-1-1"', '"20250101"', '"2025-02-30"', "true", "12", '"2025-01-01T09:00:00"'],
)
def test_bad_entries_raise_parse_error(entry: str) -> None:
    with pytest.raises(ConfigParseError):
        parse_holidays(f"holidays:\n  - {entry}\n")


def test_timestamp_entry_raises_parse_error() -> None:
    with pytest.raises(ConfigParseError, match="time component"):
        parse_holidays("holidays:\n  - 2025-01-01 09:00:00\n")


@pytest.mark.parametrize(
    "text",
    [
        "holidays: [unclosed\n",
        "- 2025-01-01\n",
        "dates:\n  - 2025-01-01\n",
        "holidays: 2025-01-01\n",
        "holidays: 0\n",
        "holidays: false\n",
        'holidays: ""\n',
        "holidays: {a: 1}\n",
    ],
)
def test_malformed_documents_raise_parse_error(text: str) -> None:
    with pytest.raises(ConfigParseError):
        parse_holidays(text)


def test_load_bundled_holidays() -> None:
    holidays = load_holidays()
    assert len(holidays) > 0
    assert date(2025, 1, 1) in holidays
    assert all(type(d) is date for d in holidays)


def test_load_missing_resource_raises_config_missing() -> None:
    with pytest.raises(ConfigMissing, match="not found"):
        load_holidays("no_such_file.yaml")


def test_null_holiday_list_is_empty() -> None:
    assert len(parse_holidays("holidays:\n")) == 0


def test_invalid_utf8_raises_parse_error() -> None:
    raw = b'holidays:\n  - "2025-01-01"\n  # \xff\xfe\n'
    with pytest.raises(ConfigParseError, match="UTF-8"):
        parse_holidays(raw)

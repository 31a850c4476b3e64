from datetime import date

import pytest

from app.utils.dates import format_calendar_date, invalid_date_message, parse_calendar_date


def test_format_calendar_date_matches_short_form():
    assert format_calendar_date(date(2024, 1, 1)) == "Mon Jan 01 2024"
    assert format_calendar_date(date(2023, 12, 31)) == "Sun Dec 31 2023"


def test_parse_calendar_date():
    assert parse_calendar_date("2024-02-29") == date(2024, 2, 29)
    assert parse_calendar_date(" 2024-01-05 ") == date(2024, 1, 5)


@pytest.mark.parametrize("value", ["not-a-date", "2023-02-29", "01/05/2024", ""])
def test_parse_calendar_date_rejects(value):
    with pytest.raises(ValueError):
        parse_calendar_date(value)


def test_invalid_date_message():
    assert invalid_date_message("from") == "from date format invalid, use yyyy-mm-dd"

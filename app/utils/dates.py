"""Calendar-date parsing and rendering shared by the exercise routes."""
from datetime import date, datetime

DATE_INPUT_FORMAT = "%Y-%m-%d"
# Same shape as JavaScript's Date.toDateString(): "Mon Jan 01 2024"
DATE_OUTPUT_FORMAT = "%a %b %d %Y"


def invalid_date_message(field: str) -> str:
    return f"{field} date format invalid, use yyyy-mm-dd"


def parse_calendar_date(value: str) -> date:
    """Parse a ``yyyy-mm-dd`` string. Raises ValueError on anything else."""
    return datetime.strptime(value.strip(), DATE_INPUT_FORMAT).date()


def format_calendar_date(value: date) -> str:
    return value.strftime(DATE_OUTPUT_FORMAT)

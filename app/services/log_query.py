"""Build the exercise-log query from the raw ``from``/``to``/``limit`` parameters."""
import logging
import re
from dataclasses import dataclass
from datetime import date

from sqlalchemy import Select, select

from app.models.exercise import Exercise
from app.utils.dates import invalid_date_message, parse_calendar_date
from app.utils.exceptions import AppException

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100
# largest value a 32-bit signed LIMIT bind accepts
MAX_LIMIT = 2**31 - 1

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


@dataclass(frozen=True)
class LogFilter:
    username: str
    date_from: date | None = None
    date_to: date | None = None
    limit: int = DEFAULT_LIMIT


def parse_date_bound(field: str, value: str | None) -> date | None:
    """Parse an optional inclusive date bound, raising a 400 when it is malformed."""
    if value is None or not value.strip():
        return None
    try:
        return parse_calendar_date(value)
    except ValueError:
        raise AppException(invalid_date_message(field), status_code=400) from None


def parse_limit(value: str | None, default: int = DEFAULT_LIMIT) -> int:
    """Positive integer cap, read from the leading digits like JavaScript's parseInt.

    Absent, non-numeric or < 1 falls back to the default; oversized values are
    clamped to what the store can bind.
    """
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    if match is None:
        return default
    sign, digits = _split_sign(match.group(0).strip())
    digits = digits.lstrip("0")
    if sign == "-" or not digits:
        return default
    # skip int() on huge digit runs, it refuses strings past 4300 digits
    if len(digits) > len(str(MAX_LIMIT)):
        return MAX_LIMIT
    return min(int(digits), MAX_LIMIT)


def _split_sign(text: str) -> tuple[str, str]:
    if text[0] in "+-":
        return text[0], text[1:]
    return "", text


def build_log_filter(
    username: str,
    date_from: str | None,
    date_to: str | None,
    limit: str | None,
    default_limit: int = DEFAULT_LIMIT,
) -> LogFilter:
    return LogFilter(
        username=username,
        date_from=parse_date_bound("from", date_from),
        date_to=parse_date_bound("to", date_to),
        limit=parse_limit(limit, default_limit),
    )


def build_log_query(log_filter: LogFilter) -> Select:
    stmt = select(Exercise).where(Exercise.username == log_filter.username)
    if log_filter.date_from is not None:
        stmt = stmt.where(Exercise.date >= log_filter.date_from)
    if log_filter.date_to is not None:
        stmt = stmt.where(Exercise.date <= log_filter.date_to)

    logger.debug("Exercise log filter: %s", log_filter)
    return stmt.order_by(Exercise.date.asc()).limit(log_filter.limit)

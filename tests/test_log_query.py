from datetime import date

import pytest
from sqlalchemy.dialects import sqlite

from app.services.log_query import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    LogFilter,
    build_log_filter,
    build_log_query,
    parse_date_bound,
    parse_limit,
)
from app.utils.exceptions import AppException


def _compile(stmt) -> str:
    return str(stmt.compile(dialect=sqlite.dialect(), compile_kwargs={"literal_binds": True}))


def test_parse_limit_defaults():
    assert parse_limit(None) == DEFAULT_LIMIT
    assert parse_limit("abc") == DEFAULT_LIMIT
    assert parse_limit("0") == DEFAULT_LIMIT
    assert parse_limit("-5") == DEFAULT_LIMIT
    assert parse_limit("7") == 7
    assert parse_limit("abc", default=25) == 25


def test_parse_date_bound_accepts_blank():
    assert parse_date_bound("from", None) is None
    assert parse_date_bound("from", "  ") is None
    assert parse_date_bound("from", "2024-01-31") == date(2024, 1, 31)


def test_parse_date_bound_rejects_garbage():
    with pytest.raises(AppException) as exc_info:
        parse_date_bound("to", "2024-13-01")
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "to date format invalid, use yyyy-mm-dd"


def test_build_log_filter():
    log_filter = build_log_filter("alice", "2024-01-01", None, "5")
    assert log_filter == LogFilter(username="alice", date_from=date(2024, 1, 1), limit=5)


def test_build_log_query_unbounded():
    sql = _compile(build_log_query(LogFilter(username="alice")))
    assert "exercises.username = 'alice'" in sql
    assert ">=" not in sql
    assert "<=" not in sql
    assert "ORDER BY exercises.date ASC" in sql
    assert f"LIMIT {DEFAULT_LIMIT}" in sql


def test_build_log_query_with_bounds():
    log_filter = LogFilter(
        username="alice", date_from=date(2024, 1, 1), date_to=date(2024, 1, 31), limit=3
    )
    sql = _compile(build_log_query(log_filter))
    assert "exercises.date >= '2024-01-01'" in sql
    assert "exercises.date <= '2024-01-31'" in sql
    assert "LIMIT 3" in sql


def test_parse_limit_reads_leading_integer():
    assert parse_limit("1.5") == 1
    assert parse_limit("5abc") == 5
    assert parse_limit(" 12 ") == 12
    assert parse_limit("+3") == 3
    assert parse_limit("007") == 7


def test_parse_limit_clamps_oversized_values():
    assert parse_limit("99999999999999999999") == MAX_LIMIT
    assert parse_limit(str(MAX_LIMIT + 1)) == MAX_LIMIT
    assert parse_limit("9" * 5000) == MAX_LIMIT
    assert parse_limit("-" + "9" * 5000) == DEFAULT_LIMIT

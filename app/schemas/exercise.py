from datetime import date as date_type

from pydantic import BaseModel, Field, field_validator

from app.utils.dates import invalid_date_message, parse_calendar_date


# INTEGER column range on both SQLite binds and Postgres
MAX_DURATION = 2**31 - 1


class ExerciseCreate(BaseModel):
    description: str
    duration: int = Field(ge=0, le=MAX_DURATION)
    date: date_type | None = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        if value is None or isinstance(value, date_type):
            return value
        if not isinstance(value, str):
            raise ValueError(invalid_date_message("date"))
        if not value.strip():
            return None
        try:
            return parse_calendar_date(value)
        except ValueError:
            raise ValueError(invalid_date_message("date")) from None


class ExerciseResponse(BaseModel):
    id: str
    username: str
    description: str
    duration: int
    date: str


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class LogResponse(BaseModel):
    id: str
    username: str
    count: int
    log: list[LogEntry]

"""
StudyPlanner Backend: Schedule Schemas
=======================================

What:  Weekday enum, schedule record, and create/update bodies.

Formats:
    weekday:          English day name, any case on input, upper-case on output
    start/end time:   'HH:MM' (seconds accepted on input, dropped on output)

Rule: start_time must be strictly before end_time. A slot of zero length is
rejected.
"""

from datetime import time
from enum import Enum
from typing import Any, Optional

from pydantic import ValidationInfo, field_serializer, field_validator, model_validator

from studyplanner.schemas.common import (
    CLOCK_OUTPUT_FORMAT,
    RecordModel,
    RequestModel,
    parse_clock,
    parse_id,
)

TIME_ORDER_MESSAGE = "start_time must be before end_time"


class Weekday(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def parse(cls, value: str) -> "Weekday":
        """Case-insensitive; raises ValueError for anything else."""
        return cls(value.strip().upper())


class ScheduleRecord(RecordModel):
    """{"scheduleId", "courseId", "weekday", "startTime", "endTime"}"""

    schedule_id: int
    course_id: int
    weekday: Weekday
    start_time: time
    end_time: time

    @field_serializer("start_time", "end_time")
    def format_clock(self, value: time) -> str:
        return value.strftime(CLOCK_OUTPUT_FORMAT)


class ScheduleCreate(RequestModel):
    """POST /schedules. Checks run in field order; the first failure wins."""

    course_id: Optional[int] = None
    weekday: Optional[Weekday] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    @model_validator(mode="before")
    @classmethod
    def require_course_id(cls, data: Any) -> Any:
        if isinstance(data, dict):
            value = data.get("course_id")
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValueError("course_id is required")
        return data

    @field_validator("course_id", mode="before")
    @classmethod
    def parse_course_id(cls, v: Any) -> Any:
        try:
            return parse_id(v)
        except (TypeError, ValueError):
            raise ValueError("Invalid course_id format") from None

    @field_validator("weekday", mode="before")
    @classmethod
    def parse_weekday(cls, v: Any) -> Any:
        if isinstance(v, Weekday):
            return v
        try:
            return Weekday.parse(str(v))
        except ValueError:
            raise ValueError("Invalid weekday value") from None

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def parse_time_of_day(cls, v: Any, info: ValidationInfo) -> Any:
        if isinstance(v, str):
            try:
                return parse_clock(v)
            except ValueError:
                raise ValueError(f"Invalid {info.field_name} format. Use HH:MM") from None
        return v

    @model_validator(mode="after")
    def require_all_and_order(self) -> "ScheduleCreate":
        if self.weekday is None or self.start_time is None or self.end_time is None:
            raise ValueError("course_id, weekday, start_time, and end_time are required")
        if self.start_time >= self.end_time:
            raise ValueError(TIME_ORDER_MESSAGE)
        return self


class ScheduleUpdate(RequestModel):
    """
    PUT /schedules/{id}

    Any subset of weekday/start_time/end_time. The ordering rule is checked by
    the handler after merging with the stored slot.
    """

    weekday: Optional[Weekday] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    @field_validator("weekday", "start_time", "end_time", mode="before")
    @classmethod
    def parse_slot_field(cls, v: Any, info: ValidationInfo) -> Any:
        if not isinstance(v, str):
            return v
        try:
            if info.field_name == "weekday":
                return Weekday.parse(v)
            return parse_clock(v)
        except ValueError:
            raise ValueError("Invalid time or weekday format") from None

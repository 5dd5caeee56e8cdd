"""
StudyPlanner Backend: Course Schemas
=====================================

Dates travel as 'YYYY-MM-DD' strings in both directions. The start <= end
rule is not checked here: CourseRepository enforces it and the handler
reports a refusal as a 500, as the API always has.
"""

from datetime import date
from typing import Any, Optional

from pydantic import field_validator, model_validator

from studyplanner.schemas.common import RecordModel, RequestModel, parse_date

INVALID_DATE = "Invalid date format. Use YYYY-MM-DD"


class CourseRecord(RecordModel):
    """{"courseId", "studentId", "courseName", "startDate", "endDate"}"""

    course_id: int
    student_id: int
    course_name: str
    start_date: date
    end_date: date


class _CourseFields(RequestModel):
    course_name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_calendar_date(cls, v: Any) -> Any:
        if isinstance(v, str):
            try:
                return parse_date(v)
            except ValueError:
                raise ValueError(INVALID_DATE) from None
        return v


class CourseCreate(_CourseFields):
    """POST /courses"""

    @model_validator(mode="after")
    def require_all(self) -> "CourseCreate":
        if self.course_name is None or self.start_date is None or self.end_date is None:
            raise ValueError("Course name, start date, and end date are required")
        return self


class CourseUpdate(_CourseFields):
    """PUT /courses/{id}: omitted fields keep their stored value."""

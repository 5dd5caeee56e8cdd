"""
StudyPlanner Backend: Assignment Schemas
=========================================

What:  Assignment record, the two-value Status enum, and create/update bodies.

Formats:
    deadline: 'YYYY-MM-DD HH:MM:SS' in and out
    status:   'pending' | 'completed' (case-insensitive on input)
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import field_serializer, field_validator, model_validator

from studyplanner.schemas.common import (
    DEADLINE_OUTPUT_FORMAT,
    RecordModel,
    RequestModel,
    parse_deadline,
    parse_id,
)

INVALID_DEADLINE = "Invalid date format. Use YYYY-MM-DD HH:MM:SS"
INVALID_COURSE_ID = "Invalid course_id"
INVALID_STATUS = "Invalid status value"


class Status(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: str) -> "Status":
        """Case-insensitive lookup by value; raises ValueError."""
        return cls(value.strip().lower())


class AssignmentRecord(RecordModel):
    """
    {"assignmentId", "studentId", "courseId", "title", "description",
     "deadline", "status"}
    """

    assignment_id: int
    student_id: int
    course_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    deadline: datetime
    status: Status = Status.PENDING

    @field_serializer("deadline")
    def format_deadline(self, value: datetime) -> str:
        return value.strftime(DEADLINE_OUTPUT_FORMAT)


class _AssignmentFields(RequestModel):
    # Declaration order is validation order: course_id, then deadline.
    course_id: Optional[int] = None
    deadline: Optional[datetime] = None
    title: Optional[str] = None
    description: Optional[str] = None

    @field_validator("deadline", mode="before")
    @classmethod
    def parse_deadline_text(cls, v: Any) -> Any:
        if isinstance(v, str):
            try:
                return parse_deadline(v)
            except ValueError:
                raise ValueError(INVALID_DEADLINE) from None
        return v

    @field_validator("course_id", mode="before")
    @classmethod
    def parse_course_id(cls, v: Any) -> Any:
        try:
            return parse_id(v)
        except (TypeError, ValueError):
            raise ValueError(INVALID_COURSE_ID) from None


class AssignmentCreate(_AssignmentFields):
    """POST /assignments. New assignments always start as pending."""

    @model_validator(mode="after")
    def require_fields(self) -> "AssignmentCreate":
        if self.course_id is None or self.title is None or self.deadline is None:
            raise ValueError("course_id, title, and deadline are required")
        return self


class AssignmentUpdate(_AssignmentFields):
    """
    PUT /assignments/{id}

    title/description/deadline/course_id are merged over the stored record;
    status is applied separately through `AssignmentRepository.set_status`.
    """

    status: Optional[Status] = None

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: Any) -> Any:
        if isinstance(v, Status):
            return v
        try:
            return Status.parse(str(v))
        except ValueError:
            raise ValueError(INVALID_STATUS) from None

    def has_field_changes(self) -> bool:
        return self.provided("title", "description", "deadline", "course_id")

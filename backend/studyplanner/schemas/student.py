"""
StudyPlanner Backend: Student and Login Schemas
================================================

What:  Request bodies for registration, profile update and login, and the
       response records returned for them.

The password travels inward only: StudentRecord has no password field, so a
serialized student can never echo it back.
"""

from typing import Optional

from pydantic import Field, model_validator

from studyplanner.schemas.common import RecordModel, RequestModel


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class StudentRecord(RecordModel):
    """Public view of a student: {"id", "name", "email", "role"}."""

    id: int = Field(description="Student id")
    name: str
    email: str
    role: str = Field(default="user", description="user or admin")


class LoginResponse(RecordModel):
    """Returned by POST /login: {"studentId", "name", "email", "role"}."""

    student_id: int
    name: str
    email: str
    role: str


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class StudentCreate(RequestModel):
    """POST /students"""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @model_validator(mode="after")
    def require_all(self) -> "StudentCreate":
        if self.name is None or self.email is None or self.password is None:
            raise ValueError("Name, email, and password are required")
        return self


class StudentUpdate(RequestModel):
    """PUT /students/{id}: any subset of name/email, at least one."""

    name: Optional[str] = None
    email: Optional[str] = None

    @model_validator(mode="after")
    def require_one(self) -> "StudentUpdate":
        if not self.provided("name", "email"):
            raise ValueError("At least one of name or email must be provided")
        return self


class LoginRequest(RequestModel):
    """POST /login"""

    email: Optional[str] = None
    password: Optional[str] = None

    @model_validator(mode="after")
    def require_credentials(self) -> "LoginRequest":
        if self.email is None or self.password is None:
            raise ValueError("Email and password are required")
        return self

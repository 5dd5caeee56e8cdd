"""
StudyPlanner Backend: Assignment SQLAlchemy Model
==================================================

What:  ORM model for the `assignments` table.

Columns:
    - course_id is nullable: an assignment may outlive the course link.
    - deadline is a naive timestamp, stored exactly as the client sent it
      ("YYYY-MM-DD HH:MM:SS").
    - status is 'pending' or 'completed' (see schemas.assignment.Status).
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from studyplanner.database import Base


class Assignment(Base):
    """A piece of work with a deadline, owned by a student."""

    __tablename__ = "assignments"

    assignment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.student_id"),
        nullable=False,
    )

    course_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("courses.course_id"),
        nullable=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    deadline: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        server_default=text("'pending'"),
    )

    __table_args__ = (
        Index("idx_assignments_student_id", "student_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Assignment(assignment_id={self.assignment_id}, "
            f"student_id={self.student_id}, status='{self.status}')>"
        )

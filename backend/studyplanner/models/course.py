"""
StudyPlanner Backend: Course SQLAlchemy Model
==============================================

What:  ORM model for the `courses` table.

Invariant:
    start_date <= end_date. CourseRepository refuses inserts and updates
    that break it; the column definitions do not carry a CHECK constraint.

Cascade:
    Deleting a course deletes its `schedule` rows. CourseRepository does this
    explicitly inside one transaction.
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from studyplanner.database import Base


class Course(Base):
    """A course owned by one student."""

    __tablename__ = "courses"

    course_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    student_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("students.student_id"),
        nullable=False,
    )

    course_name: Mapped[str] = mapped_column(String(255), nullable=False)

    start_date: Mapped[date] = mapped_column(Date, nullable=False)

    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        Index("idx_courses_student_id", "student_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Course(course_id={self.course_id}, student_id={self.student_id}, "
            f"course_name='{self.course_name}')>"
        )

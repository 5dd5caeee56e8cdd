"""
StudyPlanner Backend: Schedule SQLAlchemy Model
================================================

What:  ORM model for the `schedule` table: one weekly time slot of a course.

A schedule has no student column. Its owner is the owner of its course, so
listing by student joins through `courses`.
"""

from datetime import time

from sqlalchemy import ForeignKey, Index, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from studyplanner.database import Base


class Schedule(Base):
    """A recurring weekly slot (weekday + start/end time) for a course."""

    __tablename__ = "schedule"

    schedule_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    course_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("courses.course_id"),
        nullable=False,
    )

    # Upper-case English day name, e.g. 'MONDAY'
    weekday: Mapped[str] = mapped_column(String(10), nullable=False)

    start_time: Mapped[time] = mapped_column(Time, nullable=False)

    end_time: Mapped[time] = mapped_column(Time, nullable=False)

    __table_args__ = (
        Index("idx_schedule_course_id", "course_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Schedule(schedule_id={self.schedule_id}, course_id={self.course_id}, "
            f"weekday='{self.weekday}')>"
        )

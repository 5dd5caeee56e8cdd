"""
StudyPlanner Backend: Course Repository
========================================

What:  CRUD for `courses`.

Rules enforced here (not in the request schema):
    - course_name must be non-empty
    - start_date <= end_date
  A violating insert returns None and a violating update returns False;
  the handler reports either as a 500.

Delete: removes the course's schedule rows and detaches its assignments
(course_id set to NULL) in the same transaction.
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from studyplanner.models.assignment import Assignment
from studyplanner.models.course import Course
from studyplanner.models.schedule import Schedule
from studyplanner.repositories.base import Repository
from studyplanner.schemas.course import CourseRecord

logger = logging.getLogger(__name__)


def _valid_course(course_name: str, start_date: date, end_date: date) -> bool:
    if not course_name or not course_name.strip():
        logger.warning("Rejected course with empty name")
        return False
    if start_date > end_date:
        logger.warning("Rejected course: start_date %s is after end_date %s", start_date, end_date)
        return False
    return True


class CourseRepository(Repository):

    async def find_by_id(self, course_id: int) -> Optional[CourseRecord]:
        try:
            async with self._session_factory() as session:
                course = await session.get(Course, course_id)
                return CourseRecord.model_validate(course) if course else None
        except SQLAlchemyError as e:
            logger.error("Database error fetching course %s: %s", course_id, str(e))
            return None

    async def list_by_student(self, student_id: int) -> List[CourseRecord]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Course)
                    .where(Course.student_id == student_id)
                    .order_by(Course.course_id)
                )
                return [CourseRecord.model_validate(c) for c in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing courses of student %s: %s", student_id, str(e))
            return []

    async def insert(
        self,
        student_id: int,
        course_name: str,
        start_date: date,
        end_date: date,
    ) -> Optional[CourseRecord]:
        if not _valid_course(course_name, start_date, end_date):
            return None
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    course = Course(
                        student_id=student_id,
                        course_name=course_name,
                        start_date=start_date,
                        end_date=end_date,
                    )
                    session.add(course)
                    await session.flush()
                    record = CourseRecord.model_validate(course)
            logger.info("Course %s created for student %s", record.course_id, student_id)
            return record
        except SQLAlchemyError as e:
            logger.error("Database error creating course for student %s: %s", student_id, str(e))
            return None

    async def update(
        self,
        course_id: int,
        course_name: str,
        start_date: date,
        end_date: date,
    ) -> bool:
        """Overwrites all three fields. Callers merge partial input first."""
        if not _valid_course(course_name, start_date, end_date):
            return False
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        update(Course)
                        .where(Course.course_id == course_id)
                        .values(course_name=course_name, start_date=start_date, end_date=end_date)
                        .execution_options(synchronize_session=False)
                    )
            return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error("Database error updating course %s: %s", course_id, str(e))
            return False

    async def delete(self, course_id: int) -> bool:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.execute(
                        delete(Schedule)
                        .where(Schedule.course_id == course_id)
                        .execution_options(synchronize_session=False)
                    )
                    await session.execute(
                        update(Assignment)
                        .where(Assignment.course_id == course_id)
                        .values(course_id=None)
                        .execution_options(synchronize_session=False)
                    )
                    result = await session.execute(
                        delete(Course)
                        .where(Course.course_id == course_id)
                        .execution_options(synchronize_session=False)
                    )
                    deleted = result.rowcount > 0
            return deleted
        except SQLAlchemyError as e:
            logger.error("Database error deleting course %s: %s", course_id, str(e))
            return False

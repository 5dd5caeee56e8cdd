"""
StudyPlanner Backend: Schedule Repository
==========================================

What:  CRUD for `schedule`, plus listing a student's slots by joining
       through the courses they own.
"""

import logging
from datetime import time
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from studyplanner.models.course import Course
from studyplanner.models.schedule import Schedule
from studyplanner.repositories.base import Repository
from studyplanner.schemas.schedule import ScheduleRecord, Weekday

logger = logging.getLogger(__name__)


class ScheduleRepository(Repository):

    async def find_by_id(self, schedule_id: int) -> Optional[ScheduleRecord]:
        try:
            async with self._session_factory() as session:
                schedule = await session.get(Schedule, schedule_id)
                return ScheduleRecord.model_validate(schedule) if schedule else None
        except SQLAlchemyError as e:
            logger.error("Database error fetching schedule %s: %s", schedule_id, str(e))
            return None

    async def list_by_course(self, course_id: int) -> List[ScheduleRecord]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Schedule)
                    .where(Schedule.course_id == course_id)
                    .order_by(Schedule.schedule_id)
                )
                return [ScheduleRecord.model_validate(s) for s in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing schedules of course %s: %s", course_id, str(e))
            return []

    async def list_by_student(self, student_id: int) -> List[ScheduleRecord]:
        """All slots of all courses owned by `student_id`."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Schedule)
                    .join(Course, Course.course_id == Schedule.course_id)
                    .where(Course.student_id == student_id)
                    .order_by(Schedule.schedule_id)
                )
                return [ScheduleRecord.model_validate(s) for s in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(
                "Database error listing schedules of student %s: %s", student_id, str(e)
            )
            return []

    async def insert(
        self,
        course_id: int,
        weekday: Weekday,
        start_time: time,
        end_time: time,
    ) -> Optional[ScheduleRecord]:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    schedule = Schedule(
                        course_id=course_id,
                        weekday=weekday.value,
                        start_time=start_time,
                        end_time=end_time,
                    )
                    session.add(schedule)
                    await session.flush()
                    record = ScheduleRecord.model_validate(schedule)
            return record
        except SQLAlchemyError as e:
            logger.error("Database error creating schedule for course %s: %s", course_id, str(e))
            return None

    async def update(
        self,
        schedule_id: int,
        weekday: Weekday,
        start_time: time,
        end_time: time,
    ) -> bool:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        update(Schedule)
                        .where(Schedule.schedule_id == schedule_id)
                        .values(weekday=weekday.value, start_time=start_time, end_time=end_time)
                        .execution_options(synchronize_session=False)
                    )
            return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error("Database error updating schedule %s: %s", schedule_id, str(e))
            return False

    async def delete(self, schedule_id: int) -> bool:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        delete(Schedule)
                        .where(Schedule.schedule_id == schedule_id)
                        .execution_options(synchronize_session=False)
                    )
            return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error("Database error deleting schedule %s: %s", schedule_id, str(e))
            return False

"""
StudyPlanner Backend: Assignment Repository
============================================

What:  CRUD for `assignments`. Field updates and status changes are separate
       calls so the handler can apply either one independently.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from studyplanner.models.assignment import Assignment
from studyplanner.repositories.base import Repository
from studyplanner.schemas.assignment import AssignmentRecord, Status

logger = logging.getLogger(__name__)


class AssignmentRepository(Repository):

    async def find_by_id(self, assignment_id: int) -> Optional[AssignmentRecord]:
        try:
            async with self._session_factory() as session:
                assignment = await session.get(Assignment, assignment_id)
                return AssignmentRecord.model_validate(assignment) if assignment else None
        except SQLAlchemyError as e:
            logger.error("Database error fetching assignment %s: %s", assignment_id, str(e))
            return None

    async def list_by_student(self, student_id: int) -> List[AssignmentRecord]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Assignment)
                    .where(Assignment.student_id == student_id)
                    .order_by(Assignment.deadline, Assignment.assignment_id)
                )
                return [AssignmentRecord.model_validate(a) for a in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(
                "Database error listing assignments of student %s: %s", student_id, str(e)
            )
            return []

    async def insert(
        self,
        student_id: int,
        course_id: Optional[int],
        title: str,
        description: Optional[str],
        deadline: datetime,
    ) -> Optional[AssignmentRecord]:
        """New assignments always start in Status.PENDING."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    assignment = Assignment(
                        student_id=student_id,
                        course_id=course_id,
                        title=title,
                        description=description,
                        deadline=deadline,
                        status=Status.PENDING.value,
                    )
                    session.add(assignment)
                    await session.flush()
                    record = AssignmentRecord.model_validate(assignment)
            return record
        except SQLAlchemyError as e:
            logger.error(
                "Database error creating assignment for student %s: %s", student_id, str(e)
            )
            return None

    async def update(
        self,
        assignment_id: int,
        title: str,
        description: Optional[str],
        deadline: datetime,
        course_id: Optional[int],
    ) -> bool:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        update(Assignment)
                        .where(Assignment.assignment_id == assignment_id)
                        .values(
                            title=title,
                            description=description,
                            deadline=deadline,
                            course_id=course_id,
                        )
                        .execution_options(synchronize_session=False)
                    )
            return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error("Database error updating assignment %s: %s", assignment_id, str(e))
            return False

    async def set_status(self, assignment_id: int, status: Status) -> bool:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        update(Assignment)
                        .where(Assignment.assignment_id == assignment_id)
                        .values(status=status.value)
                        .execution_options(synchronize_session=False)
                    )
            return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error(
                "Database error setting status of assignment %s: %s", assignment_id, str(e)
            )
            return False

    async def delete(self, assignment_id: int) -> bool:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        delete(Assignment)
                        .where(Assignment.assignment_id == assignment_id)
                        .execution_options(synchronize_session=False)
                    )
            return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error("Database error deleting assignment %s: %s", assignment_id, str(e))
            return False

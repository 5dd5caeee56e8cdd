"""
StudyPlanner Backend: Student Repository
=========================================

What:  CRUD for `students`, plus the credential lookup used by login.

Delete cascade (one transaction):
    schedule rows of the student's courses → assignments → courses → student
"""

import logging
from typing import Optional, Tuple

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from studyplanner.exceptions import ConflictError
from studyplanner.models.assignment import Assignment
from studyplanner.models.course import Course
from studyplanner.models.schedule import Schedule
from studyplanner.models.student import Student
from studyplanner.repositories.base import Repository
from studyplanner.schemas.student import StudentRecord
from studyplanner.security import hash_password

logger = logging.getLogger(__name__)


class StudentRepository(Repository):

    async def find_by_id(self, student_id: int) -> Optional[StudentRecord]:
        try:
            async with self._session_factory() as session:
                student = await session.get(Student, student_id)
                return StudentRecord.model_validate(student) if student else None
        except SQLAlchemyError as e:
            logger.error("Database error fetching student %s: %s", student_id, str(e))
            return None

    async def find_by_email(self, email: str) -> Optional[StudentRecord]:
        found = await self.find_credentials(email)
        return found[0] if found else None

    async def find_credentials(self, email: str) -> Optional[Tuple[StudentRecord, str]]:
        """The student with `email` and their stored password hash, or None."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(Student).where(Student.email == email))
                student = result.scalar_one_or_none()
                if student is None:
                    return None
                return StudentRecord.model_validate(student), student.password_hash
        except SQLAlchemyError as e:
            logger.error("Database error looking up student by email: %s", str(e))
            return None

    async def insert(self, name: str, email: str, password: str) -> Optional[StudentRecord]:
        """
        Creates a student with role 'user'; the password is stored as a bcrypt hash.

        Raises ConflictError when the email is already registered, including
        when a concurrent registration claimed it after the caller's check.
        """
        password_hash = await run_in_threadpool(hash_password, password)
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    student = Student(
                        name=name,
                        email=email,
                        password_hash=password_hash,
                        role="user",
                    )
                    session.add(student)
                    await session.flush()
                    record = StudentRecord.model_validate(student)
            logger.info("Student %s registered", record.id)
            return record
        except IntegrityError as e:
            logger.warning("Registration refused, email already in use: %s", str(e.orig))
            raise ConflictError("Email already in use") from e
        except SQLAlchemyError as e:
            logger.error("Database error creating student: %s", str(e))
            return None

    async def update_profile(
        self,
        student_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> bool:
        """
        Updates whichever of name/email is given. False if no row matched;
        ConflictError if the new email belongs to another student.
        """
        changes = {}
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = email
        if not changes:
            return False
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        update(Student)
                        .where(Student.id == student_id)
                        .values(**changes)
                        .execution_options(synchronize_session=False)
                    )
            return result.rowcount > 0
        except IntegrityError as e:
            logger.warning("Email change for student %s refused: %s", student_id, str(e.orig))
            raise ConflictError("Email already in use by another student") from e
        except SQLAlchemyError as e:
            logger.error("Database error updating student %s: %s", student_id, str(e))
            return False

    async def delete(self, student_id: int) -> bool:
        """Deletes the student and everything they own. False if no such student."""
        owned_courses = select(Course.course_id).where(Course.student_id == student_id)
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.execute(
                        delete(Schedule)
                        .where(Schedule.course_id.in_(owned_courses))
                        .execution_options(synchronize_session=False)
                    )
                    await session.execute(
                        delete(Assignment)
                        .where(Assignment.student_id == student_id)
                        .execution_options(synchronize_session=False)
                    )
                    await session.execute(
                        delete(Course)
                        .where(Course.student_id == student_id)
                        .execution_options(synchronize_session=False)
                    )
                    result = await session.execute(
                        delete(Student)
                        .where(Student.id == student_id)
                        .execution_options(synchronize_session=False)
                    )
                    deleted = result.rowcount > 0
            if deleted:
                logger.info("Student %s deleted with owned records", student_id)
            return deleted
        except SQLAlchemyError as e:
            logger.error("Database error deleting student %s: %s", student_id, str(e))
            return False

"""
StudyPlanner Backend: Authentication Service
=============================================

What:  Verifies an email/password pair and returns the login payload.
How:   Looks up the stored hash through StudentRepository and checks it
       with passlib (see `studyplanner.security`). bcrypt runs in Starlette's
       threadpool, off the event loop.

An unknown email and a wrong password produce the same result (None), so
the login endpoint cannot be used to probe which emails are registered.
"""

import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from studyplanner.repositories.student_repository import StudentRepository
from studyplanner.schemas.student import LoginResponse
from studyplanner.security import verify_password

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, students: StudentRepository):
        self.students = students

    async def authenticate(self, email: str, password: str) -> Optional[LoginResponse]:
        found = await self.students.find_credentials(email)
        if found is None:
            logger.info("Login rejected: unknown email")
            return None

        student, password_hash = found
        if not await run_in_threadpool(verify_password, password, password_hash):
            logger.info("Login rejected: bad password for student %s", student.id)
            return None

        logger.info("Student %s logged in", student.id)
        return LoginResponse(
            student_id=student.id,
            name=student.name,
            email=student.email,
            role=student.role,
        )

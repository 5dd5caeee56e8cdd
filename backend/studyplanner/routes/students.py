"""
StudyPlanner Backend: Student Handler
======================================

Endpoints:
    GET    /students/{id}   → 200 student            (self or admin)
    POST   /students        → 201 student            (registration, no auth)
    PUT    /students/{id}   → 200 updated student    (self or admin)
    DELETE /students/{id}   → 200 {"message": ...}   (self or admin, cascades)

The password is accepted on POST only and never appears in a response.
"""

import logging

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import Response

from studyplanner.auth import authorize
from studyplanner.exceptions import ConflictError, InternalError, NotFoundError
from studyplanner.repositories.student_repository import StudentRepository
from studyplanner.request_context import auth_context, integer_from_path, read_body
from studyplanner.responses import json_response, message_response
from studyplanner.routes.base import BaseHandler, mount
from studyplanner.schemas.common import parse_body
from studyplanner.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


class StudentHandler(BaseHandler):

    def __init__(self, students: StudentRepository):
        super().__init__()
        self.students = students

    async def handle_get(self, request: Request) -> Response:
        student_id = integer_from_path(request, 2)
        authorize(auth_context(request), student_id)
        student = await self.students.find_by_id(student_id)
        if student is None:
            raise NotFoundError("Student not found", resource_id=student_id)
        return json_response(200, student)

    async def handle_post(self, request: Request) -> Response:
        body = parse_body(StudentCreate, await read_body(request))
        if await self.students.find_by_email(body.email) is not None:
            raise ConflictError("Email already in use")
        student = await self.students.insert(body.name, body.email, body.password)
        if student is None:
            raise InternalError("Failed to create student")
        return json_response(201, student)

    async def handle_put(self, request: Request) -> Response:
        student_id = integer_from_path(request, 2)
        authorize(auth_context(request), student_id)
        body = parse_body(StudentUpdate, await read_body(request))

        if body.email is not None:
            holder = await self.students.find_by_email(body.email)
            if holder is not None and holder.id != student_id:
                raise ConflictError("Email already in use by another student")

        updated = await self.students.update_profile(student_id, name=body.name, email=body.email)
        if not updated:
            raise NotFoundError("Student not found or no changes made", resource_id=student_id)

        student = await self.students.find_by_id(student_id)
        if student is None:
            raise NotFoundError("Student not found", resource_id=student_id)
        return json_response(200, student)

    async def handle_delete(self, request: Request) -> Response:
        student_id = integer_from_path(request, 2)
        authorize(auth_context(request), student_id)
        if not await self.students.delete(student_id):
            raise NotFoundError("Student not found", resource_id=student_id)
        logger.info("Student %s deleted", student_id)
        return message_response("Student deleted successfully")


def create_router(students: StudentRepository) -> APIRouter:
    router = APIRouter(tags=["Students"])
    mount(router, "/students", StudentHandler(students))
    return router

"""
StudyPlanner Backend: Course Handler
=====================================

Endpoints:
    GET    /courses/students/{id}  → 200 [course]   authorize against {id}
    GET    /courses/{id}           → 200 course     404 first, then authorize
    POST   /courses                → 201 course     owner = student_id header
    PUT    /courses/{id}           → 200 course     partial update
    DELETE /courses/{id}           → 200 message    owner only, cascades schedules

Status notes:
    - An empty listing is a 404, not an empty array.
    - start_date > end_date is refused by CourseRepository and reported as
      500 "Failed to add course" / "Failed to update course".
    - Deletion compares the student_id header with the owner directly; the
      admin role does not bypass it.
"""

import logging

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import Response

from studyplanner.auth import authorize, authorize_owner_only
from studyplanner.exceptions import InternalError, NotFoundError
from studyplanner.repositories.course_repository import CourseRepository
from studyplanner.request_context import (
    auth_context,
    integer_from_path,
    read_body,
    subject_id_from_header,
)
from studyplanner.responses import json_response, message_response
from studyplanner.routes.base import BaseHandler, mount
from studyplanner.schemas.common import parse_body
from studyplanner.schemas.course import CourseCreate, CourseRecord, CourseUpdate

logger = logging.getLogger(__name__)


class CourseHandler(BaseHandler):

    def __init__(self, courses: CourseRepository):
        super().__init__()
        self.courses = courses

    async def _require_course(self, course_id: int) -> CourseRecord:
        course = await self.courses.find_by_id(course_id)
        if course is None:
            raise NotFoundError("Course not found", resource_id=course_id)
        return course

    async def handle_get(self, request: Request) -> Response:
        if self.is_listing(request, "students"):
            student_id = integer_from_path(request, 3)
            authorize(auth_context(request), student_id)
            courses = await self.courses.list_by_student(student_id)
            if not courses:
                raise NotFoundError("No courses found for this student")
            return json_response(200, courses)

        course = await self._require_course(integer_from_path(request, 2))
        authorize(auth_context(request), course.student_id)
        return json_response(200, course)

    async def handle_post(self, request: Request) -> Response:
        raw = await read_body(request)
        owner_id = subject_id_from_header(request)
        body = parse_body(CourseCreate, raw)

        course = await self.courses.insert(owner_id, body.course_name, body.start_date, body.end_date)
        if course is None:
            raise InternalError("Failed to add course")
        logger.info("Course %s added for student %s", course.course_id, owner_id)
        return json_response(201, course)

    async def handle_put(self, request: Request) -> Response:
        course_id = integer_from_path(request, 2)
        raw = await read_body(request)
        existing = await self._require_course(course_id)
        authorize(auth_context(request), existing.student_id)
        body = parse_body(CourseUpdate, raw)

        updated = await self.courses.update(
            course_id,
            course_name=body.course_name if body.course_name is not None else existing.course_name,
            start_date=body.start_date if body.start_date is not None else existing.start_date,
            end_date=body.end_date if body.end_date is not None else existing.end_date,
        )
        if not updated:
            raise InternalError("Failed to update course")
        return json_response(200, await self._require_course(course_id))

    async def handle_delete(self, request: Request) -> Response:
        subject_id = subject_id_from_header(request)
        course_id = integer_from_path(request, 2)
        course = await self._require_course(course_id)
        authorize_owner_only(
            subject_id,
            course.student_id,
            "Forbidden: You can only delete your own courses",
        )
        if not await self.courses.delete(course_id):
            raise InternalError("Failed to delete course")
        return message_response("Course deleted successfully")


def create_router(courses: CourseRepository) -> APIRouter:
    router = APIRouter(tags=["Courses"])
    mount(router, "/courses", CourseHandler(courses))
    return router

"""
StudyPlanner Backend: Schedule Handler
=======================================

Endpoints:
    GET    /schedules/courses/{id}   → 200 [schedule]   no ownership check
    GET    /schedules/students/{id}  → 200 [schedule]   authorize against {id}
    GET    /schedules/{id}           → 200 schedule     no ownership check
    POST   /schedules                → 201 schedule
    PUT    /schedules/{id}           → 200 schedule     authorize against course owner
    DELETE /schedules/{id}           → 200 message      authorize against course owner

A schedule's owner is the student who owns its course, so updates and
deletes resolve the course first (404 "Course not found" if it is gone).
"""

import logging

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import Response

from studyplanner.auth import authorize
from studyplanner.exceptions import BadRequestError, InternalError, NotFoundError
from studyplanner.repositories.course_repository import CourseRepository
from studyplanner.repositories.schedule_repository import ScheduleRepository
from studyplanner.request_context import auth_context, integer_from_path, read_body
from studyplanner.responses import json_response, message_response
from studyplanner.routes.base import BaseHandler, mount
from studyplanner.schemas.common import parse_body
from studyplanner.schemas.course import CourseRecord
from studyplanner.schemas.schedule import (
    TIME_ORDER_MESSAGE,
    ScheduleCreate,
    ScheduleRecord,
    ScheduleUpdate,
)

logger = logging.getLogger(__name__)


class ScheduleHandler(BaseHandler):

    def __init__(self, schedules: ScheduleRepository, courses: CourseRepository):
        super().__init__()
        self.schedules = schedules
        self.courses = courses

    async def _require_schedule(self, schedule_id: int) -> ScheduleRecord:
        schedule = await self.schedules.find_by_id(schedule_id)
        if schedule is None:
            raise NotFoundError("Schedule not found", resource_id=schedule_id)
        return schedule

    async def _require_course(self, course_id: int) -> CourseRecord:
        course = await self.courses.find_by_id(course_id)
        if course is None:
            raise NotFoundError("Course not found", resource_id=course_id)
        return course

    async def handle_get(self, request: Request) -> Response:
        if self.is_listing(request, "courses"):
            course_id = integer_from_path(request, 3)
            schedules = await self.schedules.list_by_course(course_id)
            if not schedules:
                raise NotFoundError("No schedules found for this course")
            return json_response(200, schedules)

        if self.is_listing(request, "students"):
            student_id = integer_from_path(request, 3)
            authorize(auth_context(request), student_id)
            schedules = await self.schedules.list_by_student(student_id)
            if not schedules:
                raise NotFoundError("No schedules found for this student")
            return json_response(200, schedules)

        schedule = await self._require_schedule(integer_from_path(request, 2))
        return json_response(200, schedule)

    async def handle_post(self, request: Request) -> Response:
        body = parse_body(ScheduleCreate, await read_body(request))
        await self._require_course(body.course_id)

        schedule = await self.schedules.insert(
            body.course_id, body.weekday, body.start_time, body.end_time
        )
        if schedule is None:
            raise InternalError("Failed to add schedule")
        return json_response(201, schedule)

    async def handle_put(self, request: Request) -> Response:
        schedule_id = integer_from_path(request, 2)
        existing = await self._require_schedule(schedule_id)
        course = await self._require_course(existing.course_id)
        authorize(auth_context(request), course.student_id)
        raw = await read_body(request)
        if not raw:
            raise BadRequestError("Invalid JSON")
        body = parse_body(ScheduleUpdate, raw)

        weekday = body.weekday if body.weekday is not None else existing.weekday
        start_time = body.start_time if body.start_time is not None else existing.start_time
        end_time = body.end_time if body.end_time is not None else existing.end_time
        if start_time >= end_time:
            raise BadRequestError(TIME_ORDER_MESSAGE)

        if not await self.schedules.update(schedule_id, weekday, start_time, end_time):
            raise InternalError("Failed to update schedule")
        return json_response(200, await self._require_schedule(schedule_id))

    async def handle_delete(self, request: Request) -> Response:
        schedule_id = integer_from_path(request, 2)
        schedule = await self._require_schedule(schedule_id)
        course = await self._require_course(schedule.course_id)
        authorize(auth_context(request), course.student_id)
        if not await self.schedules.delete(schedule_id):
            raise InternalError("Failed to delete schedule")
        logger.info("Schedule %s removed from course %s", schedule_id, course.course_id)
        return message_response("Schedule deleted successfully")


def create_router(schedules: ScheduleRepository, courses: CourseRepository) -> APIRouter:
    router = APIRouter(tags=["Schedules"])
    mount(router, "/schedules", ScheduleHandler(schedules, courses))
    return router

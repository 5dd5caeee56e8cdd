"""
StudyPlanner Backend: Assignment Handler
=========================================

Endpoints:
    GET    /assignments/students/{id}  → 200 [assignment]
    GET    /assignments/{id}           → 200 assignment
    POST   /assignments                → 201 assignment (status starts as pending)
    PUT    /assignments/{id}           → 200 assignment
    DELETE /assignments/{id}           → 200 message

Update semantics:
    Field changes (title, description, deadline, course_id) and a status
    change are two separate repository calls. The request succeeds if either
    one does; if neither applies, the answer is 400 "No fields were updated".
"""

import logging

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import Response

from studyplanner.auth import authorize
from studyplanner.exceptions import BadRequestError, InternalError, NotFoundError
from studyplanner.repositories.assignment_repository import AssignmentRepository
from studyplanner.request_context import (
    auth_context,
    integer_from_path,
    read_body,
    subject_id_from_header,
)
from studyplanner.responses import json_response, message_response
from studyplanner.routes.base import BaseHandler, mount
from studyplanner.schemas.assignment import (
    AssignmentCreate,
    AssignmentRecord,
    AssignmentUpdate,
)
from studyplanner.schemas.common import parse_body

logger = logging.getLogger(__name__)


class AssignmentHandler(BaseHandler):

    def __init__(self, assignments: AssignmentRepository):
        super().__init__()
        self.assignments = assignments

    async def _require_assignment(self, assignment_id: int) -> AssignmentRecord:
        assignment = await self.assignments.find_by_id(assignment_id)
        if assignment is None:
            raise NotFoundError("Assignment not found", resource_id=assignment_id)
        return assignment

    async def handle_get(self, request: Request) -> Response:
        if self.is_listing(request, "students"):
            student_id = integer_from_path(request, 3)
            authorize(auth_context(request), student_id)
            assignments = await self.assignments.list_by_student(student_id)
            if not assignments:
                raise NotFoundError("No assignments found")
            return json_response(200, assignments)

        assignment = await self._require_assignment(integer_from_path(request, 2))
        authorize(auth_context(request), assignment.student_id)
        return json_response(200, assignment)

    async def handle_post(self, request: Request) -> Response:
        raw = await read_body(request)
        owner_id = subject_id_from_header(request)
        body = parse_body(AssignmentCreate, raw)

        assignment = await self.assignments.insert(
            student_id=owner_id,
            course_id=body.course_id,
            title=body.title,
            description=body.description,
            deadline=body.deadline,
        )
        if assignment is None:
            raise InternalError("Failed to create assignment")
        return json_response(201, assignment)

    async def handle_put(self, request: Request) -> Response:
        assignment_id = integer_from_path(request, 2)
        raw = await read_body(request)
        existing = await self._require_assignment(assignment_id)
        authorize(auth_context(request), existing.student_id)
        body = parse_body(AssignmentUpdate, raw)

        status_updated = False
        if body.status is not None:
            status_updated = await self.assignments.set_status(assignment_id, body.status)

        fields_updated = False
        if body.has_field_changes():
            fields_updated = await self.assignments.update(
                assignment_id,
                title=body.title if body.title is not None else existing.title,
                description=(
                    body.description if body.description is not None else existing.description
                ),
                deadline=body.deadline if body.deadline is not None else existing.deadline,
                course_id=body.course_id if body.course_id is not None else existing.course_id,
            )

        if not (status_updated or fields_updated):
            raise BadRequestError("No fields were updated")
        return json_response(200, await self._require_assignment(assignment_id))

    async def handle_delete(self, request: Request) -> Response:
        assignment_id = integer_from_path(request, 2)
        assignment = await self._require_assignment(assignment_id)
        authorize(auth_context(request), assignment.student_id)
        if not await self.assignments.delete(assignment_id):
            raise InternalError("Failed to delete assignment")
        return message_response("Assignment deleted successfully")


def create_router(assignments: AssignmentRepository) -> APIRouter:
    router = APIRouter(tags=["Assignments"])
    mount(router, "/assignments", AssignmentHandler(assignments))
    return router

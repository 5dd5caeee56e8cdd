"""
StudyPlanner Backend: Login Handler
====================================

    POST /login {"email", "password"}
        → 200 {"studentId", "name", "email", "role"}
        → 400 "Email and password are required"
        → 401 "Invalid email or password"

Only POST is implemented; every other method gets the dispatcher's 405.
"""

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import Response

from studyplanner.exceptions import UnauthorizedError
from studyplanner.request_context import read_body
from studyplanner.responses import json_response
from studyplanner.routes.base import BaseHandler, mount
from studyplanner.schemas.common import parse_body
from studyplanner.schemas.student import LoginRequest
from studyplanner.services.auth_service import AuthService


class LoginHandler(BaseHandler):

    def __init__(self, auth_service: AuthService):
        super().__init__()
        self.auth_service = auth_service

    async def handle_post(self, request: Request) -> Response:
        body = parse_body(LoginRequest, await read_body(request))
        result = await self.auth_service.authenticate(body.email, body.password)
        if result is None:
            raise UnauthorizedError("Invalid email or password")
        return json_response(200, result)


def create_router(auth_service: AuthService) -> APIRouter:
    router = APIRouter(tags=["Login"])
    mount(router, "/login", LoginHandler(auth_service))
    return router

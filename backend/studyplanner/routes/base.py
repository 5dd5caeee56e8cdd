"""
StudyPlanner Backend: Base Handler (Method Dispatcher)
=======================================================

What:  The dispatcher every resource handler extends.
How:   `dispatch()` is mounted as the endpoint for a resource prefix and
       everything beneath it. It selects one of four hooks by HTTP method:

           GET    → handle_get      (read one / list)
           POST   → handle_post     (create)
           PUT    → handle_put      (update)
           DELETE → handle_delete   (delete)

       A hook that is not overridden, and any other method, answers 405
       {"error": "Method Not Allowed"}. Any StudyPlannerError raised inside a
       hook ends the request and is written exactly once by `dispatch()`.

Mounting:
    mount(router, "/courses", handler) registers "/courses" and
    "/courses/{subpath:path}" for all dispatchable methods, so path shape is
    decided by the handler from `path_segments()`, not by FastAPI.
"""

import logging
from typing import Awaitable, Callable, Dict

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import Response

from studyplanner.exceptions import MethodNotAllowedError, StudyPlannerError
from studyplanner.request_context import path_segments
from studyplanner.responses import error_response

logger = logging.getLogger(__name__)

# Everything reaches dispatch() so unsupported methods still get a JSON 405.
# OPTIONS arrives here only when it is not a CORS preflight (CORSMiddleware
# answers those); HEAD gets the 405 status with its body dropped by the server.
DISPATCH_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]

Hook = Callable[[Request], Awaitable[Response]]


class BaseHandler:
    """Routes a request to the hook for its method."""

    def __init__(self) -> None:
        self._hooks: Dict[str, Hook] = {
            "GET": self.handle_get,
            "POST": self.handle_post,
            "PUT": self.handle_put,
            "DELETE": self.handle_delete,
        }

    async def dispatch(self, request: Request) -> Response:
        method = request.method.upper()
        try:
            hook = self._hooks.get(method)
            if hook is None:
                raise MethodNotAllowedError(method)
            return await hook(request)
        except StudyPlannerError as exc:
            logger.debug("%s %s -> %d %s", method, request.url.path, exc.status_code, exc.message)
            return error_response(exc)

    # ── Hooks (override in subclasses) ────────────────────────────────────

    async def handle_get(self, request: Request) -> Response:
        raise MethodNotAllowedError("GET")

    async def handle_post(self, request: Request) -> Response:
        raise MethodNotAllowedError("POST")

    async def handle_put(self, request: Request) -> Response:
        raise MethodNotAllowedError("PUT")

    async def handle_delete(self, request: Request) -> Response:
        raise MethodNotAllowedError("DELETE")

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def is_listing(request: Request, parent: str) -> bool:
        """True for exactly /<resource>/<parent>/<id>, e.g. /courses/students/3."""
        segments = path_segments(request)
        return len(segments) == 4 and segments[2] == parent


def mount(router: APIRouter, prefix: str, handler: BaseHandler) -> None:
    """Registers `handler.dispatch` for `prefix` and every path below it."""
    name = prefix.strip("/") or "root"
    for path in (prefix, prefix + "/{subpath:path}"):
        router.add_api_route(
            path,
            handler.dispatch,
            methods=DISPATCH_METHODS,
            include_in_schema=False,
            response_model=None,
            name=f"{name}_dispatch",
        )

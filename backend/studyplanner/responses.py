"""
StudyPlanner Backend: Response Writer
======================================

What:  Turns handler results and errors into JSON responses.
How:   Pydantic records are dumped with their camelCase aliases; lists are
       dumped element-wise; dicts pass through. Every response is a
       JSONResponse, so Content-Type is always application/json.
"""

import logging
from typing import Any

from pydantic import BaseModel
from starlette.responses import JSONResponse

from studyplanner.exceptions import StudyPlannerError

logger = logging.getLogger(__name__)


def render(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [render(item) for item in value]
    if isinstance(value, dict):
        return {key: render(item) for key, item in value.items()}
    return value


def json_response(status_code: int, value: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=render(value))


def message_response(message: str, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def error_response(error: StudyPlannerError) -> JSONResponse:
    """{"error": message} with the error's status code."""
    if error.status_code >= 500:
        logger.error("%s (%d) %s", type(error).__name__, error.status_code, error.message)
    elif error.context:
        logger.debug("%s: %s | Context: %s", type(error).__name__, error.message, error.context)
    return JSONResponse(status_code=error.status_code, content=error.to_body())

"""
StudyPlanner Backend: Request Context Extractor and Body Decoder
=================================================================

What:  Pulls the pieces a handler needs out of a Starlette Request:
       path segments, integer ids from fixed path positions, the caller's
       subject id and role headers, and the JSON body.
How:   Plain functions. Each failure raises one error-model exception; the
       dispatcher writes it, so nothing here touches the response.

Path positions:
    "/courses/5".split("/")            → ["", "courses", "5"]           id at 2
    "/courses/students/3".split("/")   → ["", "courses", "students", "3"] id at 3
"""

import json
from typing import Any, Dict, List

from starlette.requests import Request

from studyplanner.auth import AuthContext
from studyplanner.config import settings
from studyplanner.exceptions import BadRequestError, UnauthorizedError


# ══════════════════════════════════════════════════════════════════════════
# Path
# ══════════════════════════════════════════════════════════════════════════


def path_segments(request: Request) -> List[str]:
    """Splits the URL path on '/', keeping empty segments at their index."""
    return request.url.path.split("/")


def integer_from_path(request: Request, index: int) -> int:
    segments = path_segments(request)
    if index >= len(segments) or not segments[index]:
        raise BadRequestError("Bad Request: Missing ID in path", field="path")
    try:
        return int(segments[index])
    except ValueError:
        raise BadRequestError("Bad Request: Invalid ID format", field="path") from None


# ══════════════════════════════════════════════════════════════════════════
# Headers
# ══════════════════════════════════════════════════════════════════════════


def subject_id_from_header(request: Request) -> int:
    raw = request.headers.get(settings.subject_header)
    if raw is None:
        raise UnauthorizedError("Unauthorized: Missing Student ID header")
    try:
        return int(raw.strip())
    except ValueError:
        raise BadRequestError(
            "Bad Request: Invalid Student ID format", field=settings.subject_header
        ) from None


def role_from_header(request: Request) -> str:
    role = request.headers.get(settings.role_header)
    if role is None:
        raise UnauthorizedError("Unauthorized: Missing role header")
    return role.strip()


def auth_context(request: Request) -> AuthContext:
    """Role first, then subject id; the first missing header is reported."""
    role = role_from_header(request)
    subject_id = subject_id_from_header(request)
    return AuthContext(subject_id=subject_id, role=role)


# ══════════════════════════════════════════════════════════════════════════
# Body
# ══════════════════════════════════════════════════════════════════════════


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def decode_body(raw: bytes) -> Dict[str, str]:
    """
    Parses a JSON object into a flat str → str mapping.

    Malformed JSON, an empty body, or a top-level value that is not an
    object raise BadRequestError("Invalid JSON"). null values are dropped;
    other non-string values become their JSON text (1 → "1").
    """
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        raise BadRequestError("Invalid JSON") from None
    if not isinstance(data, dict):
        raise BadRequestError("Invalid JSON")
    return {str(key): _as_text(value) for key, value in data.items() if value is not None}


async def read_body(request: Request) -> Dict[str, str]:
    return decode_body(await request.body())

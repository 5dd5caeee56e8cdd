"""
StudyPlanner Backend: Shared Schema Building Blocks
====================================================

What:  Base classes, wire formats and the body-to-schema bridge used by every
       resource's request and response models.
Why:   Request bodies arrive as flat string mappings (see
       `request_context.decode_body`). Each endpoint validates that mapping
       with one pydantic model, and the first failing check becomes the
       400 message the client sees.
How:   - `RecordModel`: response records, built from ORM rows via
         `from_attributes`, serialized with camelCase keys.
       - `RequestModel`: request bodies; unknown keys are ignored and blank
         strings count as absent.
       - `parse_body()`: runs a RequestModel and converts pydantic's
         ValidationError into our BadRequestError.
"""

from datetime import date, datetime, time
from typing import Any, Dict, Type, TypeVar

from pydantic import (
    AliasGenerator,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

from studyplanner.exceptions import BadRequestError


# ══════════════════════════════════════════════════════════════════════════
# Wire formats
# ══════════════════════════════════════════════════════════════════════════

DATE_FORMAT = "%Y-%m-%d"
CLOCK_FORMATS = ("%H:%M", "%H:%M:%S")
CLOCK_OUTPUT_FORMAT = "%H:%M"
DEADLINE_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M:%S.%f")
DEADLINE_OUTPUT_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_date(value: str) -> date:
    """'YYYY-MM-DD' → date. Raises ValueError."""
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def parse_clock(value: str) -> time:
    """'HH:MM' (or 'HH:MM:SS') → time. Raises ValueError."""
    text = value.strip()
    for fmt in CLOCK_FORMATS:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"not a clock time: {value!r}")


def parse_deadline(value: str) -> datetime:
    """'YYYY-MM-DD HH:MM:SS' (optionally with fractional seconds) → datetime."""
    text = value.strip()
    for fmt in DEADLINE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"not a deadline timestamp: {value!r}")


def parse_int(value: Any) -> int:
    """Strict decimal integer parse; rejects '1.0', '', and booleans."""
    if isinstance(value, bool):
        raise ValueError("booleans are not integers")
    if isinstance(value, int):
        return value
    return int(str(value).strip())


def parse_id(value: Any) -> int:
    """parse_int for row ids: must be 1 or greater."""
    number = parse_int(value)
    if number <= 0:
        raise ValueError(f"not a valid id: {number}")
    return number


# ══════════════════════════════════════════════════════════════════════════
# Base models
# ══════════════════════════════════════════════════════════════════════════


class RecordModel(BaseModel):
    """
    Base for response records.

    Field names stay snake_case in Python; only the serialized JSON uses
    camelCase (`course_id` → `courseId`).
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class RequestModel(BaseModel):
    """
    Base for request bodies.

    Every field is Optional at the type level; required-ness is checked by
    each model's `model_validator(mode="after")` so field format errors are
    reported before missing-field errors.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_blank_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: value for key, value in data.items()
                if not (isinstance(value, str) and not value.strip())
            }
        return data

    def provided(self, *names: str) -> bool:
        """True if any of `names` was present (and non-blank) in the body."""
        return any(getattr(self, name) is not None for name in names)


SchemaT = TypeVar("SchemaT", bound=RequestModel)


def first_error_message(exc: ValidationError) -> str:
    """
    The client-facing message for the first failed check.

    Our validators raise ValueError with the exact text to return; pydantic
    keeps the original exception under ctx["error"]. Anything else falls back
    to pydantic's own message.
    """
    errors = exc.errors()
    if not errors:
        return "Bad Request"
    ctx = errors[0].get("ctx") or {}
    if "error" in ctx:
        return str(ctx["error"])
    return errors[0].get("msg", "Bad Request")


def parse_body(schema: Type[SchemaT], data: Dict[str, str]) -> SchemaT:
    """Validates a decoded body against `schema`; raises BadRequestError."""
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise BadRequestError(first_error_message(exc)) from exc


# ══════════════════════════════════════════════════════════════════════════
# Generic responses
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Body of successful deletes, e.g. {"message": "Course deleted successfully"}."""

    message: str


class ErrorResponse(BaseModel):
    """
    The one error shape every failure uses.

    Example:
        {"error": "Forbidden: Insufficient permissions"}
    """

    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""

    status: str = Field(description="healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="connected or disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

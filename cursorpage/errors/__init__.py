"""Error handling module for cursorpage."""

from .problem_details import (
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    create_problem_response
)
from .decode_errors import (
    ParseFailure,
    InvalidDirection,
    DecodeErrors,
    CursorDecodeError
)
from .handlers import register_exception_handlers

__all__ = [
    "ProblemDetail",
    "ProblemDetailException",
    "BadRequestError",
    "create_problem_response",
    "ParseFailure",
    "InvalidDirection",
    "DecodeErrors",
    "CursorDecodeError",
    "register_exception_handlers"
]

"""Cursor decode failures.

Decoding a cursor never stops at the first malformed parameter. Every failure
is collected into a ``DecodeErrors`` aggregate that is returned next to the
best-effort cursor, so the caller can choose between rejecting the request
(``raise_for_errors``) or continuing with the defaulted fields.
"""

from typing import Any, Dict, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .problem_details import BadRequestError


class ParseFailure(BaseModel):
    """A query parameter that could not be parsed as a non-negative integer."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(description="Name of the cursor query parameter")
    raw_value: str = Field(description="Value as received on the wire")
    cause: str = Field(description="Why parsing failed")

    def message(self) -> str:
        return f"{self.field}: cannot parse {self.raw_value!r} ({self.cause})"


class InvalidDirection(BaseModel):
    """A direction that parsed as an integer but is neither 1 nor -1."""

    model_config = ConfigDict(frozen=True)

    field: Literal["direction"] = "direction"
    raw_value: str = Field(description="Value as received on the wire")

    def message(self) -> str:
        return f"direction: {self.raw_value!r} is not a supported direction, use 1 (asc) or -1 (desc)"


Failure = Union[ParseFailure, InvalidDirection]


class CursorDecodeError(BadRequestError):
    """400 Bad Request raised for a cursor with one or more malformed fields."""

    def __init__(self, failures: List[Failure]):
        self.failures = list(failures)
        detail = "Invalid cursor: " + "; ".join(f.message() for f in self.failures)
        super().__init__(
            detail,
            errors=[f.model_dump() for f in self.failures]
        )


class DecodeErrors:
    """Ordered collection of every failure found while decoding one cursor."""

    def __init__(self, failures: Optional[List[Failure]] = None):
        self._failures: List[Failure] = list(failures or [])

    def add(self, failure: Failure) -> None:
        self._failures.append(failure)

    @property
    def failures(self) -> List[Failure]:
        return list(self._failures)

    def fields(self) -> List[str]:
        """Names of the parameters that failed, in the order they were checked."""
        return [f.field for f in self._failures]

    def messages(self) -> List[str]:
        return [f.message() for f in self._failures]

    def to_list(self) -> List[Dict[str, Any]]:
        return [f.model_dump() for f in self._failures]

    def raise_for_errors(self) -> None:
        """Raise CursorDecodeError if any failure was recorded."""
        if self._failures:
            raise CursorDecodeError(self._failures)

    def __iter__(self) -> Iterator[Failure]:
        return iter(self._failures)

    def __len__(self) -> int:
        return len(self._failures)

    def __bool__(self) -> bool:
        return bool(self._failures)

    def __repr__(self) -> str:
        return f"DecodeErrors({self._failures!r})"

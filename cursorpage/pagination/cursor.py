"""Cursor value types."""

from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_PAGE_SIZE = 10


class Direction(IntEnum):
    """Sort direction, serialized on the wire as its integer value."""

    ASC = 1
    DESC = -1

    def invert(self) -> "Direction":
        return Direction.DESC if self is Direction.ASC else Direction.ASC

    @property
    def sql(self) -> str:
        """Keyword for an ORDER BY clause."""
        return "ASC" if self is Direction.ASC else "DESC"


class Cursor(BaseModel):
    """Resumable position in an ordered sequence.

    ``value`` is the ordering token of the first record to fetch and
    ``offset`` is how many records sharing that token to skip. Both are
    opaque to this package: the caller's query turns them into a predicate
    such as ``WHERE created_at >= :value ORDER BY created_at LIMIT :offset, :count + 1``.

    Cursors are immutable; the pagination functions always return a new one.
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(default="", description="Ordering token of the boundary record")
    offset: int = Field(default=0, ge=0, description="Records sharing value to skip")
    count: int = Field(default=DEFAULT_PAGE_SIZE, gt=0, description="Page size")
    order: str = Field(default="", description="Ordering key passed to value_for")
    direction: Direction = Field(default=Direction.ASC, description="Sort direction")


class CursorDefaults(BaseModel):
    """Fallback values for fields a decoded cursor leaves unset.

    Zero values (empty string, 0, no direction) mean "not provided".
    """

    model_config = ConfigDict(frozen=True)

    value: str = ""
    offset: int = Field(default=0, ge=0)
    count: int = Field(default=0, ge=0)
    order: str = ""
    direction: Optional[Direction] = None
    prefetch: bool = True

    @classmethod
    def from_settings(cls, settings) -> "CursorDefaults":
        return cls(
            count=settings.default_page_size,
            order=settings.default_order,
            direction=Direction(settings.default_direction),
            prefetch=settings.prefetch,
        )

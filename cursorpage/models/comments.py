"""Pydantic models for comments."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    """Comment record, orderable by creation or update time."""

    id: int = Field(description="Comment ID")
    text: str = Field(description="Comment text")
    created_at: int = Field(description="Creation time as a Unix timestamp")
    updated_at: int = Field(description="Last update time as a Unix timestamp")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "text": "First!",
                "created_at": 1704110400,
                "updated_at": 1704112200
            }
        }
    )

    def value_for(self, order: str) -> str:
        """Ordering token for order, or "" for keys comments are not sorted by."""
        if order == "created_at":
            return str(self.created_at)
        if order == "updated_at":
            return str(self.updated_at)
        if order == "id":
            return str(self.id)
        return ""


class CommentListResponse(BaseModel):
    """Response model for listing comments."""

    comments: list[Comment] = Field(description="Comments on this page")
    next: Optional[str] = Field(default=None, description="URL of the next page")
    prev: Optional[str] = Field(default=None, description="URL of the previous page")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "comments": [
                    {"id": 2, "text": "Second", "created_at": 1704110460, "updated_at": 1704110460},
                    {"id": 1, "text": "First!", "created_at": 1704110400, "updated_at": 1704112200}
                ],
                "next": "http://localhost:8000/comments?value=1704110340&offset=0&count=2&order=created_at&direction=-1",
                "prev": "http://localhost:8000/comments?value=1704110460&offset=1&count=2&order=created_at&direction=1"
            }
        }
    )

# =============================================================================
# core/models/comment.py - Comment Schema
# =============================================================================
# A comment is an immutable value record owned by exactly one session.
#
# The text field is called "comment" on the wire:
#   {"date": "2024-01-15T10:30:00.123000Z", "comment": "Hello"}
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    """
    A single stored comment.

    The date is always assigned by the server when the comment is created;
    clients only ever supply the text.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "date": "2024-01-15T10:30:00.123000Z",
                "comment": "Nice article!",
            }
        },
    )

    # Server-assigned creation timestamp (UTC)
    date: datetime = Field(
        ...,
        description="When the comment was created"
    )

    # The comment body, stored exactly as submitted
    text: str = Field(
        ...,
        min_length=1,
        alias="comment",
        description="Comment text"
    )

    def to_wire(self) -> dict:
        """Serialize to the JSON shape returned by the API."""
        return self.model_dump(mode="json", by_alias=True)

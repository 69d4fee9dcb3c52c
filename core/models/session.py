# =============================================================================
# core/models/session.py - Session Payload Schema
# =============================================================================
# SessionData is the per-client key-value state persisted by a session
# backend. Only "comments" is interpreted by this application; any other
# keys found in a stored payload are kept as-is.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field

from .comment import Comment


class SessionData(BaseModel):
    """
    State attached to one client session.

    `comments` is None until something initializes it, which lets callers
    tell "never touched" apart from "touched but empty".
    """

    model_config = ConfigDict(extra="allow")

    comments: list[Comment] | None = Field(
        default=None,
        description="Comments in insertion order"
    )

    def dump(self) -> str:
        """Serialize for storage."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def load(cls, raw: str | bytes) -> "SessionData":
        """Rebuild from a payload produced by dump()."""
        return cls.model_validate_json(raw)

# =============================================================================
# app/routers/comments.py - Comment API Endpoints
# =============================================================================
# JSON endpoints over the session-scoped comment store:
#   GET  /api/comments  -> list the caller's comments
#   POST /api/comments  -> append {"comment": "..."}
# =============================================================================

import json
import logging
from typing import Any

from fastapi import APIRouter, Request, status

from app.dependencies import CommentStoreDep, SessionDep
from app.exceptions import BadRequestError
from core.models.comment import Comment

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_comment_field(request: Request) -> Any:
    """
    Read the `comment` field from a JSON or form body.

    Returns None when the field is absent. Validation of the value itself is
    left to the comment store.

    Raises:
        BadRequestError: If a JSON body is malformed or isn't an object
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return form.get("comment")

    raw = await request.body()
    if not raw.strip():
        return None

    try:
        body = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BadRequestError(f"Invalid JSON body: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise BadRequestError("Request body is not valid UTF-8") from e

    if not isinstance(body, dict):
        raise BadRequestError("Request body must be a JSON object")

    return body.get("comment")


@router.get("/comments", response_model=list[Comment])
async def list_comments(session: SessionDep, store: CommentStoreDep):
    """
    List the caller's comments, oldest first.

    Initializes an empty comment list in the session if there is none yet.
    """
    return store.ensure(session)


@router.post(
    "/comments",
    status_code=status.HTTP_201_CREATED,
    response_model=Comment,
)
async def create_comment(request: Request, session: SessionDep, store: CommentStoreDep):
    """
    Append a comment to the caller's session.

    Request body: {"comment": "text"} as JSON, or a form with a `comment` field.

    Returns the created comment with its server-assigned date.
    """
    text = await read_comment_field(request)
    comment = store.append(session, text)

    logger.info(f"Comment created ({len(comment.text)} chars)")
    return comment

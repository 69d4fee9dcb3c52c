# =============================================================================
# tests/test_comment_service.py - Comment Store Tests
# =============================================================================
# Unit tests for the session-scoped comment store:
# - Listing an untouched session
# - Appending preserves order and assigns a server-side date
# - Blank input is rejected without mutating the session
#
# Run with: pytest tests/test_comment_service.py -v
# =============================================================================

from datetime import datetime, timedelta, timezone

import pytest

from app.exceptions import ValidationError
from core.models import Comment, SessionData
from core.services import CommentStore, EMPTY_COMMENT_MESSAGE, INVALID_TEXT_MESSAGE


@pytest.fixture
def store():
    return CommentStore()


@pytest.fixture
def session():
    return SessionData()


# =============================================================================
# list / ensure
# =============================================================================

class TestList:
    """Tests for CommentStore.list and CommentStore.ensure."""

    def test_empty_before_any_append(self, store, session):
        assert store.list(session) == []

    def test_list_does_not_initialize_session(self, store, session):
        store.list(session)
        assert session.comments is None

    def test_ensure_initializes_empty_sequence(self, store, session):
        assert store.ensure(session) == []
        assert session.comments == []

    def test_ensure_keeps_existing_comments(self, store, session):
        store.append(session, "first")
        assert [c.text for c in store.ensure(session)] == ["first"]

    def test_list_returns_a_copy(self, store, session):
        store.append(session, "first")

        listed = store.list(session)
        listed.clear()

        assert len(store.list(session)) == 1


# =============================================================================
# append
# =============================================================================

class TestAppend:
    """Tests for CommentStore.append."""

    def test_append_then_list(self, store, session):
        before = datetime.now(timezone.utc)

        created = store.append(session, "hello")
        comments = store.list(session)

        assert comments[-1].text == "hello"
        assert comments[-1].date is not None
        assert comments[-1].date >= before
        assert comments[-1] == created

    def test_append_preserves_order(self, store, session):
        a = store.append(session, "a")
        b = store.append(session, "b")

        assert store.list(session) == [a, b]

    def test_text_is_stored_as_given(self, store, session):
        created = store.append(session, "  padded <b>html</b>  ")
        assert created.text == "  padded <b>html</b>  "

    def test_uses_injected_clock(self, session):
        fixed = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        store = CommentStore(clock=lambda: fixed)

        assert store.append(session, "hi").date == fixed

    def test_dates_never_go_backwards(self, session):
        start = datetime(2024, 1, 15, tzinfo=timezone.utc)
        ticks = iter(start + timedelta(seconds=n) for n in range(3))
        store = CommentStore(clock=lambda: next(ticks))

        for text in ("one", "two", "three"):
            store.append(session, text)

        dates = [c.date for c in store.list(session)]
        assert dates == sorted(dates)

    def test_returns_comment_instance(self, store, session):
        assert isinstance(store.append(session, "x"), Comment)

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None, 42, ["list"]])
    def test_rejects_invalid_text(self, store, session, text):
        with pytest.raises(ValidationError) as exc_info:
            store.append(session, text)

        assert exc_info.value.status_code == 422
        assert exc_info.value.message == EMPTY_COMMENT_MESSAGE

    def test_rejected_append_does_not_mutate(self, store, session):
        store.append(session, "keep me")

        with pytest.raises(ValidationError):
            store.append(session, "   ")

        assert [c.text for c in store.list(session)] == ["keep me"]

    def test_rejected_append_on_fresh_session_leaves_it_untouched(self, store, session):
        with pytest.raises(ValidationError):
            store.append(session, "")

        assert session.comments is None

    def test_rejects_unencodable_text(self, store, session):
        store.append(session, "keep me")

        with pytest.raises(ValidationError) as exc_info:
            store.append(session, "broken \ud800 text")

        assert exc_info.value.message == INVALID_TEXT_MESSAGE
        assert [c.text for c in store.list(session)] == ["keep me"]

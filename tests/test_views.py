# =============================================================================
# tests/test_views.py - Server-rendered Page Tests
# =============================================================================
# Tests for the human-facing routes and the Renderer they use.
# =============================================================================

import pytest

from app.exceptions import UnknownScreenError
from app.rendering import Renderer


class TestHomePage:
    """Tests for GET /."""

    def test_renders_home(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Hi there!" in response.text
        assert 'href="/comments"' in response.text

    def test_links_theme_stylesheet(self, client):
        response = client.get("/")

        assert "/static/css/theme.css" in response.text

    def test_does_not_create_session(self, client, cookie_name):
        assert cookie_name not in client.get("/").cookies


class TestCommentsPage:
    """Tests for GET /comments."""

    def test_renders_empty_list(self, client):
        response = client.get("/comments")

        assert response.status_code == 200
        assert "<title>Comments | CommentBoard</title>" in response.text
        assert "<li" not in response.text

    def test_shows_session_comments(self, client):
        client.post("/api/comments", json={"comment": "first comment"})
        client.post("/api/comments", json={"comment": "second comment"})

        text = client.get("/comments").text

        assert text.index("first comment") < text.index("second comment")

    def test_escapes_comment_html(self, client):
        client.post("/api/comments", json={"comment": "<script>alert(1)</script>"})

        text = client.get("/comments").text

        assert "<script>alert(1)</script>" not in text
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in text

    def test_ships_client_script(self, client):
        assert "/static/js/comments.js" in client.get("/comments").text

    def test_does_not_show_other_sessions_comments(self, client, other_client):
        other_client.post("/api/comments", json={"comment": "not yours"})

        assert "not yours" not in client.get("/comments").text

    def test_reading_does_not_create_session(self, client, cookie_name):
        assert cookie_name not in client.get("/comments").cookies


class TestStaticAssets:
    """Tests for the asset mount."""

    def test_serves_stylesheet(self, client):
        response = client.get("/static/css/theme.css")

        assert response.status_code == 200
        assert "text/css" in response.headers["content-type"]

    def test_missing_asset_is_404(self, client):
        assert client.get("/static/nope.js").status_code == 404


class TestRenderer:
    """Tests for Renderer screen lookup."""

    def test_known_screens(self):
        renderer = Renderer()

        assert renderer.template_for("Home") == "home.html"
        assert renderer.template_for("errors/500") == "errors/500.html"

    def test_unknown_screen_raises(self):
        with pytest.raises(UnknownScreenError) as exc_info:
            Renderer().template_for("Missing")

        assert exc_info.value.status_code == 500

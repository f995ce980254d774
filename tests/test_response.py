"""Tests for verroute.http.response — immutable Response transformations."""

from datetime import date

from verroute.http.response import Response


class TestResponse:
    def test_defaults(self) -> None:
        response = Response()
        assert response.status == 200
        assert response.content_type == "text/plain; charset=utf-8"
        assert response.headers == ()

    def test_json(self) -> None:
        response = Response.json({"id": 1}, status=201)
        assert response.status == 201
        assert response.content_type == "application/json"
        assert response.json_body() == {"id": 1}

    def test_json_falls_back_to_str(self) -> None:
        assert Response.json({"day": date(2024, 1, 2)}).json_body() == {"day": "2024-01-02"}

    def test_with_status_returns_copy(self) -> None:
        original = Response("x")
        changed = original.with_status(404)
        assert changed.status == 404
        assert original.status == 200

    def test_with_header_appends(self) -> None:
        response = Response().with_header("X-A", "1").with_header("X-B", "2")
        assert response.headers == (("X-A", "1"), ("X-B", "2"))
        assert response.header("x-b") == "2"
        assert response.header("x-c") is None

    def test_body_conversions(self) -> None:
        assert Response("é").body_bytes == "é".encode()
        assert Response(b"raw").text == "raw"

"""Tests for shared.responses - response building and host translation."""

import datetime
import json
import uuid

from shared.responses import (
    INTERNAL_ERROR_BODY,
    Response,
    SerializationError,
    build_response,
    error_response,
    internal_error_response,
    json_serialize,
    method_not_allowed_response,
    not_found_response,
    to_http_response,
)

import pytest


def _nested(depth: int) -> list:
    data: list = []
    for _ in range(depth):
        data = [data]
    return data


class TestBuildResponse:
    def test_string_body_passes_through(self) -> None:
        response = build_response(200, "hi")
        assert response.status == 200
        assert response.body == "hi"
        assert response.headers == {}

    def test_none_body_is_empty(self) -> None:
        response = build_response(204)
        assert response.body == ""
        assert response.header("Content-Type") is None

    def test_structured_body_is_json(self) -> None:
        response = build_response(200, {"a": 1, "b": [1, 2]})
        assert json.loads(response.body) == {"a": 1, "b": [1, 2]}
        assert response.header("Content-Type") == "application/json"

    def test_existing_content_type_kept(self) -> None:
        response = build_response(
            200, {"a": 1}, headers={"content-type": "application/vnd.api+json"}
        )
        assert response.header("Content-Type") == "application/vnd.api+json"
        assert len(response.headers) == 1

    def test_caller_headers_not_mutated(self) -> None:
        headers = {"X-Trace": "abc"}
        response = build_response(200, {"a": 1}, headers=headers)
        assert headers == {"X-Trace": "abc"}
        assert response.header("x-trace") == "abc"

    def test_unserializable_body_falls_back_to_500(self) -> None:
        response = build_response(200, {"value": object()})
        assert response.status == 500
        assert json.loads(response.body) == {"error": "internal error"}
        assert response.header("Content-Type") == "application/json"

    @pytest.mark.parametrize("status", [99, 600, "200", True])
    def test_invalid_status_falls_back_to_500(self, status) -> None:
        response = build_response(status, "x")
        assert response.status == 500
        assert response.body == INTERNAL_ERROR_BODY

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_falls_back_to_500(self, value) -> None:
        response = build_response(200, {"v": value})
        assert response.status == 500
        assert json.loads(response.body) == {"error": "internal error"}

    def test_deeply_nested_body_falls_back_to_500(self) -> None:
        response = build_response(200, _nested(100000))
        assert response.status == 500
        assert response.body == INTERNAL_ERROR_BODY

    def test_field_order_preserved(self) -> None:
        response = build_response(200, {"z": 1, "a": 2, "m": 3})
        assert list(json.loads(response.body)) == ["z", "a", "m"]


class TestJsonSerialize:
    def test_datetime_and_uuid(self) -> None:
        moment = datetime.datetime(2024, 1, 1, 0, 0, 0)
        ident = uuid.UUID("12345678-1234-5678-1234-567812345678")
        data = json.loads(json_serialize({"at": moment, "id": ident}))
        assert data == {"at": "2024-01-01T00:00:00", "id": str(ident)}

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(SerializationError):
            json_serialize({"s": {1, 2}})

    def test_nan_raises(self) -> None:
        with pytest.raises(SerializationError):
            json_serialize({"v": float("nan")})

    def test_deep_nesting_raises(self) -> None:
        with pytest.raises(SerializationError):
            json_serialize(_nested(100000))

    def test_circular_reference_raises(self) -> None:
        data: dict = {}
        data["self"] = data
        with pytest.raises(SerializationError):
            json_serialize(data)


class TestErrorHelpers:
    def test_error_response(self) -> None:
        response = error_response("bad input")
        assert response.status == 400
        assert json.loads(response.body) == {"error": "bad input"}

    def test_not_found(self) -> None:
        response = not_found_response()
        assert response.status == 404
        assert json.loads(response.body) == {"error": "not found"}

    def test_method_not_allowed(self) -> None:
        response = method_not_allowed_response(["POST", "GET"])
        assert response.status == 405
        assert response.header("Allow") == "GET, POST"

    def test_internal_error(self) -> None:
        response = internal_error_response()
        assert response.status == 500
        assert json.loads(response.body) == {"error": "internal error"}


class TestToHttpResponse:
    def test_plain_text_default(self) -> None:
        http = to_http_response(Response(status=200, body="hello"))
        assert http.status_code == 200
        assert http.get_body() == b"hello"
        assert http.mimetype == "text/plain"

    def test_json_mimetype_and_headers(self) -> None:
        http = to_http_response(
            Response(status=201, body="{}", headers={"Content-Type": "application/json; charset=utf-8"})
        )
        assert http.status_code == 201
        assert http.mimetype == "application/json"
        assert http.headers["Content-Type"] == "application/json; charset=utf-8"

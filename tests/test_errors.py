"""Tests for error normalization into the typed hierarchy."""

from __future__ import annotations

import httpx
import pytest

from gptzator.client import (
    ApiError,
    AuthError,
    GenerationFailedError,
    RequestTimeoutError,
    TransportError,
    raise_api_error,
)
from gptzator.client.exceptions import DEFAULT_ERROR_MESSAGE


def _status_error(status_code: int, **kwargs) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://api.example.test/api/projects")
    response = httpx.Response(status_code, request=request, **kwargs)
    return httpx.HTTPStatusError(f"HTTP {status_code}", request=request, response=response)


def _normalize(error: object, context: str | None = None) -> ApiError:
    with pytest.raises(ApiError) as exc_info:
        raise_api_error(error, context)
    return exc_info.value


def test_status_error_uses_body_message_and_keeps_payload() -> None:
    error = _normalize(_status_error(404, json={"message": "not found", "code": 7}))

    assert type(error) is TransportError
    assert error.message == "not found"
    assert error.status == 404
    assert error.data == {"message": "not found", "code": 7}


def test_status_error_falls_back_to_first_errors_entry() -> None:
    error = _normalize(_status_error(400, json={"errors": [{"message": "bad field"}, {"message": "other"}]}))

    assert error.message == "bad field"
    assert error.status == 400


def test_status_error_with_text_body_uses_transport_message() -> None:
    error = _normalize(_status_error(502, text="Bad Gateway"))

    assert error.message == "HTTP 502"
    assert error.data == "Bad Gateway"


def test_unauthorized_maps_to_auth_error() -> None:
    error = _normalize(_status_error(401, json={"message": "expired"}))

    assert isinstance(error, AuthError)
    assert error.category == "AUTH"


def test_timeout_and_network_errors_have_no_status() -> None:
    request = httpx.Request("GET", "https://api.example.test/")

    timeout = _normalize(httpx.ReadTimeout("timed out", request=request))
    network = _normalize(httpx.ConnectError("refused", request=request))

    assert isinstance(timeout, RequestTimeoutError)
    assert timeout.status is None
    assert type(network) is TransportError
    assert network.message == "refused"


def test_typed_error_keeps_class_and_fields_with_context_prefix() -> None:
    original = GenerationFailedError("generation failed: boom", data="boom")

    error = _normalize(original, "ProjectsApi.call_app")

    assert type(error) is GenerationFailedError
    assert error.message == "[ProjectsApi.call_app] generation failed: boom"
    assert error.data == "boom"


def test_typed_error_without_context_is_raised_unchanged() -> None:
    original = TransportError("down", 503)

    assert _normalize(original) is original


def test_plain_exception_is_chained() -> None:
    cause = ValueError("login failed: token not returned")

    error = _normalize(cause, "UserApi.login_user")

    assert error.message == "[UserApi.login_user] login failed: token not returned"
    assert error.status is None
    assert error.__cause__ is cause


def test_mapping_with_nested_response_message() -> None:
    error = _normalize({"response": {"status": 422, "data": {"message": "invalid"}}})

    assert error.message == "invalid"
    assert error.status == 422
    assert error.data == {"message": "invalid"}


def test_mapping_with_message_key() -> None:
    assert _normalize({"message": "plain"}).message == "plain"


def test_other_mapping_is_serialized() -> None:
    assert _normalize({"code": 1}).message == '{"code": 1}'


def test_unserializable_mapping_falls_back_to_default_message() -> None:
    assert _normalize({"value": object()}).message == DEFAULT_ERROR_MESSAGE


@pytest.mark.parametrize("value", [None, "", "   ", Exception(""), {}])
def test_message_is_never_empty(value: object) -> None:
    error = _normalize(value)

    assert error.message.strip()


def test_string_is_used_verbatim_and_prefixed() -> None:
    assert _normalize("boom", "ctx").message == "[ctx] boom"


def test_to_dict_reports_category_and_optional_fields() -> None:
    assert TransportError("down", 503, {"a": 1}).to_dict() == {
        "error": "down",
        "category": "TRANSPORT",
        "status": 503,
        "data": {"a": 1},
    }
    assert ApiError("local").to_dict() == {"error": "local", "category": "API_ERROR"}

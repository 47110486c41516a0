from __future__ import annotations

import types

import httpx
import pytest

from groqwire.base.errors import (
    APIStatusError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DecodeError,
    ErrorCode,
    GroqError,
    InternalServerError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    RequestTimeoutError,
    TransportError,
    UnprocessableEntityError,
    classify_exception,
    from_httpx_error,
    make_status_error,
    status_error_class,
)


@pytest.mark.parametrize(
    "status,cls",
    [
        (400, BadRequestError),
        (401, AuthenticationError),
        (403, PermissionDeniedError),
        (404, NotFoundError),
        (409, ConflictError),
        (422, UnprocessableEntityError),
        (429, RateLimitError),
        (500, InternalServerError),
        (503, InternalServerError),
        (599, InternalServerError),
        (418, APIStatusError),
    ],
)
def test_status_error_class_mapping(status, cls):
    assert status_error_class(status) is cls  # nosec B101 - assert is appropriate in unit tests


def test_make_status_error_keeps_body_and_message():
    request = httpx.Request("POST", "https://api.test/openai/v1/chat/completions")
    response = httpx.Response(429, json={"error": {"message": "slow down"}}, request=request)
    err = make_status_error(response, body=response.json(), raw_text=response.text)

    assert isinstance(err, RateLimitError)  # nosec B101 - assert is appropriate in unit tests
    assert err.status_code == 429 and err.request is request  # nosec B101 - assert is appropriate in unit tests
    assert err.error == {"message": "slow down"}  # nosec B101 - assert is appropriate in unit tests
    assert str(err).startswith("Error code: 429 - ")  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(err) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests


def test_make_status_error_without_request():
    response = httpx.Response(502, text="bad gateway")
    err = make_status_error(response, body=None, raw_text="bad gateway")
    assert err.request is None and err.error is None  # nosec B101 - assert is appropriate in unit tests
    assert str(err) == "Error code: 502 - bad gateway"  # nosec B101 - assert is appropriate in unit tests


def test_classify_library_error_passthrough():
    assert classify_exception(GroqError("x", code=ErrorCode.UNSUPPORTED)) is ErrorCode.UNSUPPORTED  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(RequestTimeoutError("slow")) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(TransportError("reset")) is ErrorCode.TRANSPORT  # nosec B101 - assert is appropriate in unit tests


def test_classify_httpx_exceptions():
    assert classify_exception(httpx.ReadTimeout("t")) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(httpx.ConnectError("c")) is ErrorCode.TRANSPORT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(httpx.DecodingError("bad gzip")) is ErrorCode.DECODE  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(httpx.TooManyRedirects("loop")) is ErrorCode.TRANSPORT  # nosec B101 - assert is appropriate in unit tests


def test_from_httpx_error_covers_every_httpx_failure():
    assert isinstance(from_httpx_error(httpx.ReadTimeout("t")), RequestTimeoutError)  # nosec B101 - assert is appropriate in unit tests
    assert isinstance(from_httpx_error(httpx.DecodingError("bad gzip")), DecodeError)  # nosec B101 - assert is appropriate in unit tests
    assert isinstance(from_httpx_error(httpx.TooManyRedirects("loop")), TransportError)  # nosec B101 - assert is appropriate in unit tests
    assert isinstance(from_httpx_error(httpx.StreamClosed()), TransportError)  # nosec B101 - assert is appropriate in unit tests
    other = ValueError("x")
    assert from_httpx_error(other) is other  # nosec B101 - non-httpx errors pass through


def test_classify_http_status_mapping():
    # Direct attr
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    # response.status_code
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests
    e3 = types.SimpleNamespace(status_code=507)
    assert classify_exception(e3) is ErrorCode.SERVER_ERROR  # nosec B101 - assert is appropriate in unit tests


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("feature not supported")) is ErrorCode.UNSUPPORTED  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests

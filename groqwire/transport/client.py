"""Transport core shared by every resource.

``BaseClient`` is the single choke point turning a logical call into HTTP:
it builds the URL and headers, encodes the body, runs the attempt loop of
``do_with_retry``, maps ``httpx`` failures onto the library taxonomy, and
classifies and decodes the response.

Operations
----------
``post``, ``get``, ``delete`` and ``post_form`` return a decoded result
(``cast_to`` instance, plain JSON when ``cast_to`` is ``None``, or ``None``
for 204). ``post_stream`` and ``get_stream`` return the still-open
``httpx.Response`` after the same classification; on any error they close
it before raising. Passing ``binary=True`` (audio, file downloads) skips
the strict content-type check for those raw payloads.

Every operation accepts ``options`` (``RequestOptions``) and ``token``
(``CancellationToken``). The token is checked before each attempt, after
each attempt, during backoff waits, and while a response body is read.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Iterable, Mapping, Optional, Tuple, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from ..base.cancellation import CancellationToken, CancelledError
from ..base.encoding.form import encode_form
from ..base.errors import GroqError, TransportError, classify_exception, from_httpx_error
from ..base.logging import LogContext, log_event, normalized_log_event
from ..base.options.request_options import DEFAULT_REQUEST_OPTIONS, RequestOptions
from ..base.resilience.retry import RetryConfig, do_with_retry
from ..base.timeouts import TimeoutConfig
from ..base.tracing import start_span
from ..config import ClientConfig
from .request_builder import build_headers, build_url, merge_query
from .response_handling import check_content_type, decode_response, raise_for_status

M = TypeVar("M", bound=BaseModel)

Body = Union[BaseModel, Mapping[str, Any], None]
FormFields = Union[Iterable[Tuple[str, Any]], Any]


def _encode_json(body: Body) -> Optional[bytes]:
    if body is None:
        return None
    if isinstance(body, BaseModel):
        to_wire = getattr(body, "to_wire", None)
        payload = to_wire() if callable(to_wire) else body.model_dump(mode="json", exclude_none=True)
    else:
        payload = dict(body)
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def _form_pairs(fields: FormFields) -> Iterable[Tuple[str, Any]]:
    to_form_fields = getattr(fields, "to_form_fields", None)
    if callable(to_form_fields):
        return to_form_fields()
    if isinstance(fields, Mapping):
        return list(fields.items())
    return fields


class BaseClient:
    """HTTP transport bound to one :class:`ClientConfig` and ``httpx.Client``.

    ``close`` only closes the ``httpx.Client`` when ``owns_client`` is set;
    pooled clients are shared between transports and live until
    ``close_all_clients`` (or interpreter exit).
    """

    def __init__(self, config: ClientConfig, http_client: httpx.Client, *, owns_client: bool = False) -> None:
        self._config = config
        self._http = http_client
        self._owns_client = owns_client
        self._logger = config.logger

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    # ------------------------------------------------------------ public ops
    def post(
        self,
        path: str,
        body: Body = None,
        *,
        cast_to: Optional[Type[M]] = None,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Any:
        response = self._request("POST", path, content=_encode_json(body), options=options, token=token)
        return self._finish(response, cast_to)

    def get(
        self,
        path: str,
        *,
        cast_to: Optional[Type[M]] = None,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Any:
        response = self._request("GET", path, options=options, token=token)
        return self._finish(response, cast_to)

    def delete(
        self,
        path: str,
        *,
        cast_to: Optional[Type[M]] = None,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Any:
        response = self._request("DELETE", path, options=options, token=token)
        return self._finish(response, cast_to)

    def post_form(
        self,
        path: str,
        fields: FormFields,
        *,
        cast_to: Optional[Type[M]] = None,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Any:
        files = encode_form(_form_pairs(fields))
        response = self._request("POST", path, files=files, options=options, token=token)
        return self._finish(response, cast_to)

    def post_stream(
        self,
        path: str,
        body: Body = None,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
        binary: bool = False,
    ) -> httpx.Response:
        """Send and return the open response (event stream, or raw bytes when ``binary``)."""
        return self._request(
            "POST",
            path,
            content=_encode_json(body),
            options=options,
            token=token,
            stream=True,
            binary=binary,
        )

    def get_stream(
        self,
        path: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
        binary: bool = False,
    ) -> httpx.Response:
        return self._request("GET", path, options=options, token=token, stream=True, binary=binary)

    # ------------------------------------------------------------- internals
    def _finish(self, response: httpx.Response, cast_to: Optional[Type[M]]) -> Any:
        try:
            return decode_response(response, cast_to)
        finally:
            response.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        content: Optional[bytes] = None,
        files: Optional[list] = None,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
        stream: bool = False,
        binary: bool = False,
    ) -> httpx.Response:
        """Send with retries and classify; the returned response is open only when ``stream``."""
        opts = options or DEFAULT_REQUEST_OPTIONS
        cfg = self._config
        url = build_url(cfg.base_url, path, merge_query(cfg.default_query, opts.query))
        headers = build_headers(cfg, opts, form=files is not None)
        timeout = TimeoutConfig(cfg.timeout, cfg.connect_timeout).with_overall(opts.timeout).to_httpx()
        ctx = LogContext(method=method, path=path, idempotency_key=opts.idempotency_key)
        retry_config = RetryConfig(
            max_retries=opts.max_retries if opts.max_retries is not None else cfg.max_retries,
            attempt_logger=self._attempt_logger(ctx),
        )
        attempts = 0

        def send_once() -> httpx.Response:
            nonlocal attempts
            attempts += 1
            request = self._http.build_request(
                method, url, headers=headers, content=content, files=files, timeout=timeout
            )
            log_event(self._logger, "request.start", ctx, level=logging.DEBUG, url=url, attempt=attempts)
            try:
                response = self._http.send(request, stream=True)
            except (httpx.HTTPError, httpx.StreamError) as exc:
                raise from_httpx_error(exc) from exc
            except RuntimeError as exc:
                if not self._http.is_closed:
                    raise
                raise TransportError("HTTP client is closed") from exc
            if not stream:
                self._read_body(response, token)
            return response

        started = time.monotonic()
        with start_span("groqwire.request") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("http.url", url)
            try:
                response = do_with_retry(send_once, retry_config, token)
                span.set_attribute("http.status_code", response.status_code)
                self._classify(response, ctx, stream=stream, binary=binary)
            except GroqError as exc:
                normalized_log_event(
                    self._logger,
                    "request.error",
                    ctx,
                    phase="request",
                    attempt=attempts,
                    error_code=classify_exception(exc).value,
                    level=logging.WARNING if not isinstance(exc, CancelledError) else logging.DEBUG,
                    status_code=getattr(exc, "status_code", None),
                    error=str(exc),
                )
                raise
        normalized_log_event(
            self._logger,
            "request.end",
            ctx,
            phase="request",
            attempt=attempts,
            level=logging.DEBUG,
            status_code=response.status_code,
            elapsed_ms=round((time.monotonic() - started) * 1000, 2),
        )
        return response

    def _classify(
        self, response: httpx.Response, ctx: LogContext, *, stream: bool, binary: bool = False
    ) -> None:
        try:
            raise_for_status(response, self._logger, ctx)
            if self._config.strict_validation and not binary:
                check_content_type(response, stream=stream)
        except BaseException:
            response.close()
            raise

    def _read_body(self, response: httpx.Response, token: Optional[CancellationToken]) -> None:
        unregister = token.register(response.close) if token is not None else None
        try:
            response.read()
        except Exception as exc:
            response.close()
            if token is not None and token.cancelled:
                raise CancelledError(token.reason or "request cancelled") from exc
            mapped = from_httpx_error(exc)
            if mapped is exc:
                raise
            raise mapped from exc
        finally:
            if unregister is not None:
                unregister()

    def _attempt_logger(self, ctx: LogContext):
        logger = self._logger

        def _log(*, attempt: int, max_attempts: int, delay: float | None, status_code: int | None) -> None:
            if delay is None:
                return
            normalized_log_event(
                logger,
                "request.retry",
                ctx,
                phase="retry",
                attempt=attempt + 1,
                level=logging.INFO,
                max_attempts=max_attempts,
                delay_seconds=round(delay, 3),
                status_code=status_code,
            )

        return _log

    def close(self) -> None:
        """Close the ``httpx.Client`` if this transport owns it; otherwise a no-op."""
        if self._owns_client:
            self._http.close()


__all__ = ["BaseClient"]

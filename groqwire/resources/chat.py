"""Chat completions resource (``/openai/v1/chat/completions``)."""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

from ..base.cancellation import CancellationToken
from ..base.options.optional import Opt
from ..base.options.request_options import RequestOptions
from ..base.streaming.stream import Stream
from ..transport.client import BaseClient
from ..types.chat import ChatCompletion, ChatCompletionChunk, ChatCompletionCreateParams
from .base import APIResource

ChatParams = Union[ChatCompletionCreateParams, Dict[str, Any]]


def _coerce(params: ChatParams) -> ChatCompletionCreateParams:
    if isinstance(params, ChatCompletionCreateParams):
        return params
    return ChatCompletionCreateParams.model_validate(params)


class Completions(APIResource):
    def create(
        self,
        params: ChatParams,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> ChatCompletion:
        """Create a (non-streaming) chat completion.

        Raises:
            ValueError: when ``params.stream`` is true; use ``create_stream``.
        """
        request = _coerce(params)
        if request.stream.get(False):
            raise ValueError("stream=True is not supported by create(); use create_stream()")
        return self._client.post(
            self._path("chat/completions"),
            request,
            cast_to=ChatCompletion,
            options=options,
            token=token,
        )

    def create_stream(
        self,
        params: ChatParams,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Stream[ChatCompletionChunk]:
        """Create a streaming chat completion.

        ``stream`` is forced to true. The returned :class:`Stream` yields
        :class:`ChatCompletionChunk` values and should be closed (or used as a
        context manager). ``token`` also becomes the stream's default token.
        """
        request = _coerce(params).model_copy(update={"stream": Opt.of(True)})
        response = self._client.post_stream(
            self._path("chat/completions"),
            request,
            options=options,
            token=token,
        )
        return Stream(response, ChatCompletionChunk, token=token, logger=self._client.logger)


class Chat(APIResource):
    def __init__(self, client: BaseClient) -> None:
        super().__init__(client)
        self.completions = Completions(client)


__all__ = ["Chat", "Completions"]

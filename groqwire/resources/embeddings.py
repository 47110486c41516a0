"""Embeddings resource (``/openai/v1/embeddings``)."""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

from ..base.cancellation import CancellationToken
from ..base.options.request_options import RequestOptions
from ..types.embeddings import CreateEmbeddingResponse, EmbeddingCreateParams
from .base import APIResource


class Embeddings(APIResource):
    def create(
        self,
        params: Union[EmbeddingCreateParams, Dict[str, Any]],
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> CreateEmbeddingResponse:
        request = EmbeddingCreateParams.model_validate(params)
        return self._client.post(
            self._path("embeddings"),
            request,
            cast_to=CreateEmbeddingResponse,
            options=options,
            token=token,
        )


__all__ = ["Embeddings"]

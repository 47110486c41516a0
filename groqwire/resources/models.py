"""Models resource (``/openai/v1/models``)."""
from __future__ import annotations

from typing import Optional

from ..base.cancellation import CancellationToken
from ..base.options.request_options import RequestOptions
from ..types.models import Model, ModelDeleted, ModelList
from .base import APIResource


class Models(APIResource):
    def list(
        self,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> ModelList:
        return self._client.get(self._path("models"), cast_to=ModelList, options=options, token=token)

    def retrieve(
        self,
        model_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Model:
        return self._client.get(
            self._path("models", model_id), cast_to=Model, options=options, token=token
        )

    def delete(
        self,
        model_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> ModelDeleted:
        return self._client.delete(
            self._path("models", model_id), cast_to=ModelDeleted, options=options, token=token
        )


__all__ = ["Models"]

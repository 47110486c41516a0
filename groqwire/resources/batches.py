"""Batches resource (``/openai/v1/batches``)."""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Union

from ..base.cancellation import CancellationToken
from ..base.options.request_options import RequestOptions
from ..types.batches import Batch, BatchCreateParams, BatchList, BatchListParams
from .base import APIResource


class Batches(APIResource):
    def create(
        self,
        params: Union[BatchCreateParams, Dict[str, Any]],
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Batch:
        request = BatchCreateParams.model_validate(params)
        return self._client.post(
            self._path("batches"), request, cast_to=Batch, options=options, token=token
        )

    def retrieve(
        self,
        batch_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Batch:
        return self._client.get(
            self._path("batches", batch_id), cast_to=Batch, options=options, token=token
        )

    def cancel(
        self,
        batch_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Batch:
        return self._client.post(
            self._path("batches", batch_id, "cancel"), cast_to=Batch, options=options, token=token
        )

    def list(
        self,
        params: Union[BatchListParams, Dict[str, Any], None] = None,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> BatchList:
        """List batches; ``after`` / ``limit`` are sent as query parameters.

        Request-level ``options.query`` still wins over these values.
        """
        opts = options or RequestOptions()
        if params is not None:
            query = BatchListParams.model_validate(params).to_wire()
            opts = replace(opts, query={**query, **opts.query})
        return self._client.get(
            self._path("batches"), cast_to=BatchList, options=opts, token=token
        )


__all__ = ["Batches"]

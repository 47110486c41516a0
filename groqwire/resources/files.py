"""Files resource (``/openai/v1/files``)."""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

import httpx

from ..base.cancellation import CancellationToken
from ..base.options.request_options import RequestOptions
from ..types.files import FileCreateParams, FileDeleted, FileList, FileObject
from .base import APIResource


class Files(APIResource):
    def create(
        self,
        params: Union[FileCreateParams, Dict[str, Any]],
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> FileObject:
        request = FileCreateParams.model_validate(params)
        return self._client.post_form(
            self._path("files"), request, cast_to=FileObject, options=options, token=token
        )

    def list(
        self,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> FileList:
        return self._client.get(self._path("files"), cast_to=FileList, options=options, token=token)

    def retrieve(
        self,
        file_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> FileObject:
        return self._client.get(
            self._path("files", file_id), cast_to=FileObject, options=options, token=token
        )

    def delete(
        self,
        file_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> FileDeleted:
        return self._client.delete(
            self._path("files", file_id), cast_to=FileDeleted, options=options, token=token
        )

    def content(
        self,
        file_id: str,
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> httpx.Response:
        """Return the open response for the file's bytes; the caller closes it."""
        return self._client.get_stream(
            self._path("files", file_id, "content"), options=options, token=token, binary=True
        )


__all__ = ["Files"]

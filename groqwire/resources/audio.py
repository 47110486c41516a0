"""Audio resources: speech synthesis, transcription and translation.

``speech.create`` returns the open binary ``httpx.Response`` (the caller
reads ``iter_bytes()`` / ``read()`` and must close it). Transcription and
translation upload the audio as ``multipart/form-data``.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

import httpx

from ..base.cancellation import CancellationToken
from ..base.options.request_options import RequestOptions
from ..transport.client import BaseClient
from ..types.audio import (
    SpeechCreateParams,
    Transcription,
    TranscriptionCreateParams,
    Translation,
    TranslationCreateParams,
)
from .base import APIResource


class Speech(APIResource):
    def create(
        self,
        params: Union[SpeechCreateParams, Dict[str, Any]],
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> httpx.Response:
        request = SpeechCreateParams.model_validate(params)
        return self._client.post_stream(
            self._path("audio/speech"), request, options=options, token=token, binary=True
        )


class Transcriptions(APIResource):
    def create(
        self,
        params: Union[TranscriptionCreateParams, Dict[str, Any]],
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Transcription:
        request = TranscriptionCreateParams.model_validate(params)
        if request.file is None and not request.url.is_set:
            raise ValueError("either file or url is required")
        return self._client.post_form(
            self._path("audio/transcriptions"),
            request,
            cast_to=Transcription,
            options=options,
            token=token,
        )


class Translations(APIResource):
    def create(
        self,
        params: Union[TranslationCreateParams, Dict[str, Any]],
        *,
        options: Optional[RequestOptions] = None,
        token: Optional[CancellationToken] = None,
    ) -> Translation:
        request = TranslationCreateParams.model_validate(params)
        if request.file is None and not request.url.is_set:
            raise ValueError("either file or url is required")
        return self._client.post_form(
            self._path("audio/translations"),
            request,
            cast_to=Translation,
            options=options,
            token=token,
        )


class Audio(APIResource):
    def __init__(self, client: BaseClient) -> None:
        super().__init__(client)
        self.speech = Speech(client)
        self.transcriptions = Transcriptions(client)
        self.translations = Translations(client)


__all__ = ["Audio", "Speech", "Transcriptions", "Translations"]

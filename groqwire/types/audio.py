"""Audio payloads (speech synthesis, transcription, translation).

Transcription and translation are multipart uploads: their params expose
``to_form_fields()`` returning the ordered ``(name, value)`` pairs for
``groqwire.base.encoding.form.encode_form``. ``file`` accepts a
``FileUpload``, ``pathlib.Path``, ``bytes`` or a binary file object.
"""
from __future__ import annotations

from typing import Any, List, Literal, Optional, Tuple

from ..base.options.optional import Opt
from .base import RequestModel, ResponseModel


class SpeechCreateParams(RequestModel):
    model: str
    input: str
    voice: str
    response_format: Opt[Literal["flac", "mp3", "mulaw", "ogg", "wav"]] = Opt.absent()
    sample_rate: Opt[int] = Opt.absent()
    speed: Opt[float] = Opt.absent()


class TranscriptionCreateParams(RequestModel):
    model: str
    file: Any = None
    url: Opt[str] = Opt.absent()
    language: Opt[str] = Opt.absent()
    prompt: Opt[str] = Opt.absent()
    response_format: Opt[Literal["json", "text", "verbose_json"]] = Opt.absent()
    temperature: Opt[float] = Opt.absent()
    timestamp_granularities: Optional[List[Literal["word", "segment"]]] = None

    def to_form_fields(self) -> List[Tuple[str, Any]]:
        return [
            ("file", self.file),
            ("model", self.model),
            ("url", self.url),
            ("language", self.language),
            ("prompt", self.prompt),
            ("response_format", self.response_format),
            ("temperature", self.temperature),
            ("timestamp_granularities[]", self.timestamp_granularities),
        ]


class TranslationCreateParams(RequestModel):
    model: str
    file: Any = None
    url: Opt[str] = Opt.absent()
    prompt: Opt[str] = Opt.absent()
    response_format: Opt[Literal["json", "text", "verbose_json"]] = Opt.absent()
    temperature: Opt[float] = Opt.absent()

    def to_form_fields(self) -> List[Tuple[str, Any]]:
        return [
            ("file", self.file),
            ("model", self.model),
            ("url", self.url),
            ("prompt", self.prompt),
            ("response_format", self.response_format),
            ("temperature", self.temperature),
        ]


class Transcription(ResponseModel):
    text: str = ""


class Translation(ResponseModel):
    text: str = ""


__all__ = [
    "SpeechCreateParams",
    "TranscriptionCreateParams",
    "TranslationCreateParams",
    "Transcription",
    "Translation",
]

"""Multipart form encoding.

Converts explicit ``(name, value)`` pairs, as produced by request types'
``to_form_fields()``, into the ``files=`` argument accepted by
``httpx.Client.build_request``. Every field (text included) is emitted as a
multipart part so the request is always ``multipart/form-data``.

Value handling
--------------
- ``Opt``: unwrapped; absent and null are skipped.
- ``None``: skipped.
- ``list`` / ``tuple`` (not ``FileUpload``): the field repeats per element.
- ``bool``: ``true`` / ``false``; other scalars via ``str``.
- Files: :class:`FileUpload`, ``pathlib.Path``, ``bytes`` and binary
  file-like objects. Contents are read eagerly so a retried request resends
  the same body.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, IO, Iterable, List, Optional, Tuple, Union

from ..options.optional import Opt

DEFAULT_UPLOAD_FILENAME = "file.bin"

FormPart = Tuple[str, Tuple[Optional[str], Union[str, bytes], Optional[str]]]


@dataclass(frozen=True)
class FileUpload:
    """An in-memory file part: name, bytes and optional content type."""

    filename: str
    content: bytes
    content_type: Optional[str] = None

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike], content_type: Optional[str] = None) -> "FileUpload":
        p = Path(path)
        return cls(filename=p.name, content=p.read_bytes(), content_type=content_type)


FileInput = Union[FileUpload, Path, bytes, IO[bytes]]


def is_file_input(value: Any) -> bool:
    return isinstance(value, (FileUpload, Path, bytes, bytearray)) or hasattr(value, "read")


def to_file_upload(value: Any) -> FileUpload:
    """Normalize any accepted file input into a :class:`FileUpload`."""
    if isinstance(value, FileUpload):
        return value
    if isinstance(value, Path):
        return FileUpload.from_path(value)
    if isinstance(value, (bytes, bytearray)):
        return FileUpload(filename=DEFAULT_UPLOAD_FILENAME, content=bytes(value))
    if hasattr(value, "read"):
        content = value.read()
        if isinstance(content, str):
            content = content.encode("utf-8")
        name = getattr(value, "name", None)
        filename = os.path.basename(name) if isinstance(name, str) and name else DEFAULT_UPLOAD_FILENAME
        return FileUpload(filename=filename, content=content)
    raise TypeError(f"unsupported file input: {type(value).__name__}")


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parts(name: str, value: Any) -> List[FormPart]:
    if isinstance(value, Opt):
        if not value.is_set:
            return []
        value = value.value
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        out: List[FormPart] = []
        for item in value:
            out.extend(_parts(name, item))
        return out
    if is_file_input(value):
        upload = to_file_upload(value)
        return [(name, (upload.filename, upload.content, upload.content_type))]
    return [(name, (None, _text(value), None))]


def encode_form(fields: Iterable[Tuple[str, Any]]) -> List[FormPart]:
    """Return the httpx ``files=`` list for ``fields`` (order preserved)."""
    parts: List[FormPart] = []
    for name, value in fields:
        parts.extend(_parts(name, value))
    return parts


__all__ = [
    "FileUpload",
    "FileInput",
    "DEFAULT_UPLOAD_FILENAME",
    "is_file_input",
    "to_file_upload",
    "encode_form",
]

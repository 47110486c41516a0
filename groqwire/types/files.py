"""File upload and listing payloads."""
from __future__ import annotations

from typing import Any, List, Tuple

from pydantic import Field

from .base import RequestModel, ResponseModel


class FileCreateParams(RequestModel):
    file: Any
    purpose: str = "batch"

    def to_form_fields(self) -> List[Tuple[str, Any]]:
        return [("purpose", self.purpose), ("file", self.file)]


class FileObject(ResponseModel):
    id: str
    object: str = "file"
    bytes: int = 0
    created_at: int = 0
    filename: str = ""
    purpose: str = ""


class FileList(ResponseModel):
    object: str = "list"
    data: List[FileObject] = Field(default_factory=list)


class FileDeleted(ResponseModel):
    id: str
    object: str = "file"
    deleted: bool = False


__all__ = ["FileCreateParams", "FileObject", "FileList", "FileDeleted"]

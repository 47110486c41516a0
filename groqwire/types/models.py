"""Model listing payloads."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import ResponseModel


class Model(ResponseModel):
    id: str
    object: str = "model"
    created: int = 0
    owned_by: str = ""
    active: Optional[bool] = None
    context_window: Optional[int] = None


class ModelList(ResponseModel):
    object: str = "list"
    data: List[Model] = Field(default_factory=list)


class ModelDeleted(ResponseModel):
    id: str
    object: str = "model"
    deleted: bool = False


__all__ = ["Model", "ModelList", "ModelDeleted"]

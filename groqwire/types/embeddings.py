"""Embeddings payloads."""
from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import Field

from ..base.options.optional import Opt
from .base import RequestModel, ResponseModel
from .shared import CompletionUsage


class EmbeddingCreateParams(RequestModel):
    input: Union[str, List[str]]
    model: str
    encoding_format: Opt[Literal["float", "base64"]] = Opt.absent()
    user: Opt[str] = Opt.absent()


class Embedding(ResponseModel):
    index: int = 0
    object: str = "embedding"
    embedding: Union[List[float], str] = Field(default_factory=list)


class CreateEmbeddingResponse(ResponseModel):
    object: str = "list"
    data: List[Embedding] = Field(default_factory=list)
    model: str = ""
    usage: Optional[CompletionUsage] = None


__all__ = ["EmbeddingCreateParams", "Embedding", "CreateEmbeddingResponse"]

"""Batch job payloads."""
from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import Field

from ..base.options.optional import Opt
from .base import RequestModel, ResponseModel
from .shared import ErrorObject

BatchStatus = Literal[
    "validating",
    "failed",
    "in_progress",
    "finalizing",
    "completed",
    "expired",
    "cancelling",
    "cancelled",
]


class BatchCreateParams(RequestModel):
    input_file_id: str
    endpoint: str
    completion_window: str
    metadata: Optional[Dict[str, str]] = None


class BatchListParams(RequestModel):
    """Pagination controls, sent as query parameters."""

    after: Opt[str] = Opt.absent()
    limit: Opt[int] = Opt.absent()


class BatchErrors(ResponseModel):
    object: str = "list"
    data: List[ErrorObject] = Field(default_factory=list)


class BatchRequestCounts(ResponseModel):
    total: int = 0
    completed: int = 0
    failed: int = 0


class Batch(ResponseModel):
    id: str
    object: str = "batch"
    endpoint: str = ""
    input_file_id: str = ""
    completion_window: str = ""
    status: str = ""
    errors: Optional[BatchErrors] = None
    output_file_id: Optional[str] = None
    error_file_id: Optional[str] = None
    created_at: int = 0
    in_progress_at: Optional[int] = None
    expires_at: Optional[int] = None
    finalizing_at: Optional[int] = None
    completed_at: Optional[int] = None
    failed_at: Optional[int] = None
    expired_at: Optional[int] = None
    cancelling_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    request_counts: Optional[BatchRequestCounts] = None
    metadata: Optional[Dict[str, str]] = None


class BatchList(ResponseModel):
    object: str = "list"
    data: List[Batch] = Field(default_factory=list)
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False


__all__ = [
    "BatchStatus",
    "BatchCreateParams",
    "BatchListParams",
    "BatchErrors",
    "BatchRequestCounts",
    "Batch",
    "BatchList",
]

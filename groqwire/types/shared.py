"""Payload pieces shared across resources (usage, function calls, errors)."""
from __future__ import annotations

from typing import Any, Dict, Optional

from .base import RequestModel, ResponseModel


class ErrorObject(ResponseModel):
    message: str = ""
    type: str = ""
    param: Any = None
    code: Any = None


class FunctionDefinition(RequestModel):
    name: str
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None


class FunctionCall(ResponseModel):
    name: str = ""
    arguments: str = ""


class CompletionTokensDetails(ResponseModel):
    reasoning_tokens: int = 0


class PromptTokensDetails(ResponseModel):
    cached_tokens: int = 0


class CompletionUsage(ResponseModel):
    """Token counts and Groq timing statistics for one completion."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_time: Optional[float] = None
    completion_time: Optional[float] = None
    total_time: Optional[float] = None
    queue_time: Optional[float] = None
    completion_tokens_details: Optional[CompletionTokensDetails] = None
    prompt_tokens_details: Optional[PromptTokensDetails] = None


__all__ = [
    "ErrorObject",
    "FunctionDefinition",
    "FunctionCall",
    "CompletionTokensDetails",
    "PromptTokensDetails",
    "CompletionUsage",
]

"""String enumerations shared by request and response types."""
from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    FUNCTION = "function"


class FinishReason(str, Enum):
    STOP = "stop"
    LENGTH = "length"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"
    FUNCTION_CALL = "function_call"


class ModelID(str, Enum):
    """Well-known model identifiers (any string is accepted by the API)."""

    COMPOUND_BETA = "compound-beta"
    COMPOUND_BETA_MINI = "compound-beta-mini"
    LLAMA_3_1_8B_INSTANT = "llama-3.1-8b-instant"
    LLAMA_3_3_70B_VERSATILE = "llama-3.3-70b-versatile"
    LLAMA_4_MAVERICK_17B_128E = "meta-llama/llama-4-maverick-17b-128e-instruct"
    LLAMA_4_SCOUT_17B_16E = "meta-llama/llama-4-scout-17b-16e-instruct"
    LLAMA_GUARD_4_12B = "meta-llama/llama-guard-4-12b"
    KIMI_K2_INSTRUCT = "moonshotai/kimi-k2-instruct"
    GPT_OSS_120B = "openai/gpt-oss-120b"
    GPT_OSS_20B = "openai/gpt-oss-20b"
    QWEN3_32B = "qwen/qwen3-32b"


__all__ = ["Role", "FinishReason", "ModelID"]

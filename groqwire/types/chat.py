"""Chat completion request and response payloads.

Requests are :class:`RequestModel` subclasses: optional scalars use ``Opt``
(absent fields are omitted from the body, ``None`` is sent as ``null``);
optional objects use plain ``None`` defaults and are omitted when unset.
Message lists accept either typed params or plain dicts.

Responses are lenient :class:`ResponseModel` subclasses mirroring the API's
``chat.completion`` and ``chat.completion.chunk`` objects, including the
Groq-specific ``x_groq`` metadata and compound-AI tool results.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import ConfigDict, Field

from ..base.options.optional import Opt
from .base import RequestModel, ResponseModel
from .shared import CompletionUsage, FunctionCall, FunctionDefinition

# --------------------------------------------------------------------------
# Request side
# --------------------------------------------------------------------------


class ContentPartText(RequestModel):
    type: Literal["text"] = "text"
    text: str


class ImageURL(RequestModel):
    url: str
    detail: Opt[Literal["auto", "low", "high"]] = Opt.absent()


class ContentPartImage(RequestModel):
    type: Literal["image_url"] = "image_url"
    image_url: ImageURL


class DocumentContent(RequestModel):
    data: Dict[str, Any]
    id: Opt[str] = Opt.absent()


class ContentPartDocument(RequestModel):
    type: Literal["document"] = "document"
    document: DocumentContent


ContentPart = Annotated[
    Union[ContentPartText, ContentPartImage, ContentPartDocument],
    Field(discriminator="type"),
]


class ToolCallFunction(RequestModel):
    name: str
    arguments: str


class ToolCallParam(RequestModel):
    id: str
    type: Literal["function"] = "function"
    function: ToolCallFunction


class ChatCompletionMessageParam(RequestModel):
    """One input message.

    ``content`` is text or a list of content parts (text, image, document).
    Pass ``content=None`` to send an explicit ``null`` (assistant messages
    that only carry tool calls).
    """

    role: Literal["system", "user", "assistant", "tool", "function"]
    content: Opt[Union[str, List[ContentPart]]] = Opt.absent()
    name: Opt[str] = Opt.absent()
    tool_calls: Optional[List[ToolCallParam]] = None
    tool_call_id: Opt[str] = Opt.absent()
    reasoning: Opt[str] = Opt.absent()


class ResponseFormatJSONSchema(RequestModel):
    name: str
    description: Opt[str] = Opt.absent()
    model_config = ConfigDict(populate_by_name=True)

    schema_: Optional[Dict[str, Any]] = Field(default=None, alias="schema")
    strict: Opt[bool] = Opt.absent()


class ResponseFormat(RequestModel):
    type: Literal["text", "json_object", "json_schema"]
    json_schema: Optional[ResponseFormatJSONSchema] = None


class ChatCompletionTool(RequestModel):
    type: Literal["function"] = "function"
    function: FunctionDefinition


class ToolChoiceFunction(RequestModel):
    name: str


class ToolChoice(RequestModel):
    type: Literal["function"] = "function"
    function: ToolChoiceFunction


class SearchSettings(RequestModel):
    country: Opt[str] = Opt.absent()
    include_domains: Optional[List[str]] = None
    exclude_domains: Optional[List[str]] = None
    include_images: Opt[bool] = Opt.absent()


class DocumentSource(RequestModel):
    type: Literal["text", "json"]
    text: Opt[str] = Opt.absent()
    data: Optional[Dict[str, Any]] = None


class Document(RequestModel):
    source: DocumentSource
    id: Opt[str] = Opt.absent()


class CompoundCustomModels(RequestModel):
    answering_model: Opt[str] = Opt.absent()
    reasoning_model: Opt[str] = Opt.absent()


class WolframSettings(RequestModel):
    authorization: Opt[str] = Opt.absent()


class CompoundCustomTools(RequestModel):
    enabled_tools: Optional[List[str]] = None
    wolfram_settings: Optional[WolframSettings] = None


class CompoundCustom(RequestModel):
    models: Optional[CompoundCustomModels] = None
    tools: Optional[CompoundCustomTools] = None


class StreamOptions(RequestModel):
    include_usage: Opt[bool] = Opt.absent()


class ChatCompletionCreateParams(RequestModel):
    """Body of ``POST /openai/v1/chat/completions``."""

    messages: List[Union[ChatCompletionMessageParam, Dict[str, Any]]]
    model: str
    frequency_penalty: Opt[float] = Opt.absent()
    logit_bias: Optional[Dict[str, int]] = None
    logprobs: Opt[bool] = Opt.absent()
    top_logprobs: Opt[int] = Opt.absent()
    max_tokens: Opt[int] = Opt.absent()
    max_completion_tokens: Opt[int] = Opt.absent()
    n: Opt[int] = Opt.absent()
    presence_penalty: Opt[float] = Opt.absent()
    response_format: Optional[ResponseFormat] = None
    seed: Opt[int] = Opt.absent()
    stop: Opt[Union[str, List[str]]] = Opt.absent()
    stream: Opt[bool] = Opt.absent()
    stream_options: Optional[StreamOptions] = None
    temperature: Opt[float] = Opt.absent()
    top_p: Opt[float] = Opt.absent()
    tools: Optional[List[ChatCompletionTool]] = None
    tool_choice: Opt[Union[Literal["none", "auto", "required"], ToolChoice]] = Opt.absent()
    parallel_tool_calls: Opt[bool] = Opt.absent()
    disable_tool_validation: Opt[bool] = Opt.absent()
    user: Opt[str] = Opt.absent()
    compound_custom: Optional[CompoundCustom] = None
    documents: Optional[List[Document]] = None
    citation_options: Opt[Literal["enabled", "disabled"]] = Opt.absent()
    reasoning_effort: Opt[str] = Opt.absent()
    reasoning_format: Opt[Literal["hidden", "raw", "parsed"]] = Opt.absent()
    include_reasoning: Opt[bool] = Opt.absent()
    search_settings: Optional[SearchSettings] = None
    service_tier: Opt[str] = Opt.absent()
    metadata: Optional[Dict[str, str]] = None
    store: Opt[bool] = Opt.absent()


# --------------------------------------------------------------------------
# Response side
# --------------------------------------------------------------------------


class ToolCallFunctionDelta(ResponseModel):
    name: Optional[str] = None
    arguments: Optional[str] = None


class ToolCall(ResponseModel):
    id: Optional[str] = None
    type: Optional[str] = None
    index: Optional[int] = None
    function: Optional[ToolCallFunctionDelta] = None


class TopLogprob(ResponseModel):
    token: str
    logprob: float
    bytes: Optional[List[int]] = None


class TokenLogprob(ResponseModel):
    token: str
    logprob: float
    bytes: Optional[List[int]] = None
    top_logprobs: List[TopLogprob] = Field(default_factory=list)


class ChoiceLogprobs(ResponseModel):
    content: Optional[List[TokenLogprob]] = None


class AnnotationDocumentCitation(ResponseModel):
    document_id: str
    start_index: int
    end_index: int


class AnnotationFunctionCitation(ResponseModel):
    tool_call_id: str
    start_index: int
    end_index: int


class Annotation(ResponseModel):
    type: str
    document_citation: Optional[AnnotationDocumentCitation] = None
    function_citation: Optional[AnnotationFunctionCitation] = None


class ExecutedTool(ResponseModel):
    """A server-side tool run (search, browser, code) reported by compound models.

    Result payloads (``search_results``, ``code_results``, ``browser_results``)
    are kept as received.
    """

    arguments: str = ""
    index: int = 0
    type: str = ""
    output: Optional[str] = None
    search_results: Optional[Dict[str, Any]] = None
    code_results: Optional[List[Dict[str, Any]]] = None
    browser_results: Optional[List[Dict[str, Any]]] = None


class ChatCompletionMessage(ResponseModel):
    role: str = "assistant"
    content: Optional[str] = None
    refusal: Optional[str] = None
    reasoning: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    function_call: Optional[FunctionCall] = None
    annotations: Optional[List[Annotation]] = None
    executed_tools: Optional[List[ExecutedTool]] = None


class Choice(ResponseModel):
    index: int = 0
    finish_reason: Optional[str] = None
    message: ChatCompletionMessage
    logprobs: Optional[ChoiceLogprobs] = None


class XGroqUsage(ResponseModel):
    dram_cached_tokens: Optional[int] = None
    sram_cached_tokens: Optional[int] = None


class XGroqDebug(ResponseModel):
    input_token_ids: Optional[List[int]] = None
    input_tokens: Optional[List[str]] = None
    output_token_ids: Optional[List[int]] = None
    output_tokens: Optional[List[str]] = None


class UsageBreakdownModel(ResponseModel):
    model: str
    usage: CompletionUsage


class UsageBreakdown(ResponseModel):
    models: List[UsageBreakdownModel] = Field(default_factory=list)


class XGroq(ResponseModel):
    """Groq metadata attached to completions (``x_groq``).

    In streams it appears on the first chunk (``id``) and the final chunk
    (``usage``, ``seed``, or ``error`` when generation stopped early).
    """

    id: Optional[str] = None
    seed: Optional[int] = None
    debug: Optional[XGroqDebug] = None
    usage: Optional[Union[CompletionUsage, XGroqUsage]] = None
    usage_breakdown: Optional[UsageBreakdown] = None
    error: Optional[str] = None


class ChatCompletion(ResponseModel):
    id: str
    object: str = "chat.completion"
    created: int = 0
    model: str = ""
    choices: List[Choice] = Field(default_factory=list)
    system_fingerprint: Optional[str] = None
    service_tier: Optional[str] = None
    usage: Optional[CompletionUsage] = None
    usage_breakdown: Optional[UsageBreakdown] = None
    x_groq: Optional[XGroq] = None


class ChoiceDelta(ResponseModel):
    role: Optional[str] = None
    content: Optional[str] = None
    refusal: Optional[str] = None
    reasoning: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    function_call: Optional[ToolCallFunctionDelta] = None
    annotations: Optional[List[Annotation]] = None
    executed_tools: Optional[List[ExecutedTool]] = None


class ChunkChoice(ResponseModel):
    index: int = 0
    delta: ChoiceDelta = Field(default_factory=ChoiceDelta)
    finish_reason: Optional[str] = None
    logprobs: Optional[ChoiceLogprobs] = None


class ChatCompletionChunk(ResponseModel):
    id: str
    object: str = "chat.completion.chunk"
    created: int = 0
    model: str = ""
    choices: List[ChunkChoice] = Field(default_factory=list)
    system_fingerprint: Optional[str] = None
    usage: Optional[CompletionUsage] = None
    x_groq: Optional[XGroq] = None


__all__ = [
    "ContentPartText",
    "ImageURL",
    "ContentPartImage",
    "DocumentContent",
    "ContentPartDocument",
    "ContentPart",
    "ToolCallFunction",
    "ToolCallParam",
    "ChatCompletionMessageParam",
    "ResponseFormatJSONSchema",
    "ResponseFormat",
    "ChatCompletionTool",
    "ToolChoiceFunction",
    "ToolChoice",
    "SearchSettings",
    "DocumentSource",
    "Document",
    "CompoundCustomModels",
    "WolframSettings",
    "CompoundCustomTools",
    "CompoundCustom",
    "StreamOptions",
    "ChatCompletionCreateParams",
    "ToolCallFunctionDelta",
    "ToolCall",
    "TopLogprob",
    "TokenLogprob",
    "ChoiceLogprobs",
    "AnnotationDocumentCitation",
    "AnnotationFunctionCitation",
    "Annotation",
    "ExecutedTool",
    "ChatCompletionMessage",
    "Choice",
    "XGroqUsage",
    "XGroqDebug",
    "UsageBreakdownModel",
    "UsageBreakdown",
    "XGroq",
    "ChatCompletion",
    "ChoiceDelta",
    "ChunkChoice",
    "ChatCompletionChunk",
]

"""Request and response payload types."""

from .base import RequestModel, ResponseModel
from .enums import Role, FinishReason, ModelID
from .shared import (
    ErrorObject,
    FunctionDefinition,
    FunctionCall,
    CompletionTokensDetails,
    PromptTokensDetails,
    CompletionUsage,
)
from .chat import (
    ContentPartText,
    ImageURL,
    ContentPartImage,
    DocumentContent,
    ContentPartDocument,
    ContentPart,
    ToolCallFunction,
    ToolCallParam,
    ChatCompletionMessageParam,
    ResponseFormatJSONSchema,
    ResponseFormat,
    ChatCompletionTool,
    ToolChoiceFunction,
    ToolChoice,
    SearchSettings,
    DocumentSource,
    Document,
    CompoundCustomModels,
    WolframSettings,
    CompoundCustomTools,
    CompoundCustom,
    StreamOptions,
    ChatCompletionCreateParams,
    ToolCallFunctionDelta,
    ToolCall,
    TopLogprob,
    TokenLogprob,
    ChoiceLogprobs,
    Annotation,
    ExecutedTool,
    ChatCompletionMessage,
    Choice,
    XGroq,
    ChatCompletion,
    ChoiceDelta,
    ChunkChoice,
    ChatCompletionChunk,
)
from .embeddings import EmbeddingCreateParams, Embedding, CreateEmbeddingResponse
from .audio import (
    SpeechCreateParams,
    TranscriptionCreateParams,
    TranslationCreateParams,
    Transcription,
    Translation,
)
from .batches import BatchCreateParams, BatchListParams, Batch, BatchList
from .files import FileCreateParams, FileObject, FileList, FileDeleted
from .models import Model, ModelList, ModelDeleted

__all__ = [
    "RequestModel",
    "ResponseModel",
    "Role",
    "FinishReason",
    "ModelID",
    "ErrorObject",
    "FunctionDefinition",
    "FunctionCall",
    "CompletionTokensDetails",
    "PromptTokensDetails",
    "CompletionUsage",
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
    "Annotation",
    "ExecutedTool",
    "ChatCompletionMessage",
    "Choice",
    "XGroq",
    "ChatCompletion",
    "ChoiceDelta",
    "ChunkChoice",
    "ChatCompletionChunk",
    "EmbeddingCreateParams",
    "Embedding",
    "CreateEmbeddingResponse",
    "SpeechCreateParams",
    "TranscriptionCreateParams",
    "TranslationCreateParams",
    "Transcription",
    "Translation",
    "BatchCreateParams",
    "BatchListParams",
    "Batch",
    "BatchList",
    "FileCreateParams",
    "FileObject",
    "FileList",
    "FileDeleted",
    "Model",
    "ModelList",
    "ModelDeleted",
]

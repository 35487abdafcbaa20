"""
Core
====

Enums, constants, data models, errors and JSON helpers shared by every
layer of content-bridge.
"""

from .constants import (
    ApiBaseUrl,
    Default,
    EnvVar,
    HttpHeader,
    ObjectType,
    ResponseKey,
)
from .enums import AuthType, ErrorSeverity, MessageRole, RequestShape
from .errors import (
    ConfigurationError,
    ContentBridgeError,
    InvalidConfigurationError,
    MissingAPIKeyError,
    UnsupportedAuthTypeError,
)
from .json_utils import dumps, get_json_library, loads
from .types import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ChunkChoice,
    ChunkDelta,
    CompletionChoice,
    CompletionMessage,
    CountTokensRequest,
    CountTokensResponse,
    EmbedContentRequest,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
    LegacyChoice,
    LegacyMessage,
    StreamChunk,
    Usage,
)

__all__ = [
    # Constants
    "ApiBaseUrl",
    "Default",
    "EnvVar",
    "HttpHeader",
    "ObjectType",
    "ResponseKey",
    # Enums
    "AuthType",
    "ErrorSeverity",
    "MessageRole",
    "RequestShape",
    # Errors
    "ContentBridgeError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingAPIKeyError",
    "UnsupportedAuthTypeError",
    # JSON
    "dumps",
    "loads",
    "get_json_library",
    # Models
    "ChatMessage",
    "GenerateContentParameters",
    "GenerateContentResponse",
    "LegacyChoice",
    "LegacyMessage",
    "CountTokensRequest",
    "CountTokensResponse",
    "EmbedContentRequest",
    "EmbedContentResponse",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "CompletionChoice",
    "CompletionMessage",
    "StreamChunk",
    "ChunkChoice",
    "ChunkDelta",
    "Usage",
]

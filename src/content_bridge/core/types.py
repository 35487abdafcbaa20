"""
Core Data Models
================

Pydantic models for both sides of the bridge:

- Legacy contract: ``GenerateContentParameters`` in,
  ``GenerateContentResponse`` out, plus token counting and embedding shapes.
- Chat-completions service: ``ChatCompletionRequest`` out,
  ``ChatCompletionResponse`` / ``StreamChunk`` in.

Service-side models are lenient: every field the protocol may omit has a
default, and unknown fields are preserved.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import ObjectType
from .enums import MessageRole, RequestShape

# ================================================================
# Messages
# ================================================================


class ChatMessage(BaseModel):
    """
    Role-tagged message accepted by the chat-completions service.

    Roles outside ``MessageRole`` (``tool``, vendor roles) are kept as plain
    strings.
    """

    role: MessageRole | str = Field(union_mode="left_to_right")
    content: str = ""

    model_config = ConfigDict(extra="allow")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


# ================================================================
# Legacy contract
# ================================================================


class GenerateContentParameters(BaseModel):
    """
    Legacy ``generateContent`` request.

    Carries either explicit ``messages``, a generic ``contents`` list of
    alternating turns, or neither.
    """

    # Explicit messages are taken as given; the normalizer coerces each one
    messages: list[Any] | None = None
    contents: list[Any] | None = None
    model: str | None = None
    # Limits pass through to the service unchanged
    max_tokens: Any = None
    temperature: Any = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("messages", "contents", mode="before")
    @classmethod
    def _single_item_to_list(cls, v: Any) -> Any:
        if v is None or isinstance(v, list):
            return v
        if isinstance(v, tuple):
            return list(v)
        return [v]

    @property
    def shape(self) -> RequestShape:
        if self.messages is not None:
            return RequestShape.MESSAGES
        if self.contents is not None:
            return RequestShape.CONTENTS
        return RequestShape.EMPTY


class LegacyMessage(BaseModel):
    content: str = ""
    role: str = MessageRole.ASSISTANT.value


class LegacyChoice(BaseModel):
    message: LegacyMessage = Field(default_factory=LegacyMessage)
    finish_reason: str | None = None


class GenerateContentResponse(BaseModel):
    """
    Legacy ``generateContent`` response.

    ``text`` mirrors the first choice's content. ``data`` keeps the raw
    service response. Function calls and code execution have no
    chat-completions counterpart and are always empty.
    """

    text: str = ""
    choices: list[LegacyChoice] = Field(default_factory=list)
    data: Any = None
    function_calls: list[Any] = Field(default_factory=list, alias="functionCalls")
    executable_code: Any = Field(default=None, alias="executableCode")
    code_execution_result: Any = Field(default=None, alias="codeExecutionResult")

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)


class CountTokensRequest(BaseModel):
    model: str | None = None
    contents: list[Any] = Field(default_factory=list)

    @field_validator("contents", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class CountTokensResponse(BaseModel):
    total_tokens: int = Field(alias="totalTokens")

    model_config = ConfigDict(populate_by_name=True)


class EmbedContentRequest(BaseModel):
    model: str | None = None
    content: Any = None


class EmbedContentResponse(BaseModel):
    embedding: list[float]


# ================================================================
# Chat-completions service
# ================================================================


class ChatCompletionRequest(BaseModel):
    """Outbound request for ``chat.completions.create``."""

    messages: list[ChatMessage]
    model: str
    max_tokens: Any = None
    temperature: Any = None

    def to_params(self, stream: bool) -> dict[str, Any]:
        """Keyword arguments for the transport; absent optionals are dropped."""
        params = self.model_dump(mode="json", exclude_none=True)
        params["stream"] = stream
        return params


class _WireModel(BaseModel):
    """Base for service payloads that may arrive as SDK objects or dicts."""

    model_config = ConfigDict(extra="allow")

    @classmethod
    def coerce(cls, raw: Any):  # type: ignore[no-untyped-def]
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, dict):
            return cls.model_validate(raw)
        if isinstance(raw, BaseModel):
            return cls.model_validate(raw.model_dump())
        # Plain objects exposing the protocol fields as attributes
        return cls.model_validate(raw, from_attributes=True)


class Usage(_WireModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @field_validator("prompt_tokens", "completion_tokens", "total_tokens", mode="before")
    @classmethod
    def _none_to_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class CompletionMessage(_WireModel):
    role: str | None = None
    content: str | None = None


class CompletionChoice(_WireModel):
    index: int = 0
    message: CompletionMessage | None = None
    finish_reason: str | None = None


class ChatCompletionResponse(_WireModel):
    """Complete (non-streaming) chat-completions response."""

    id: str | None = None
    object: str = ObjectType.CHAT_COMPLETION.value
    created: int | None = None
    model: str | None = None
    choices: list[CompletionChoice] = Field(default_factory=list)
    usage: Usage | None = None

    @field_validator("choices", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class ChunkDelta(_WireModel):
    role: str | None = None
    content: str | None = None


class ChunkChoice(_WireModel):
    index: int = 0
    delta: ChunkDelta | None = None
    finish_reason: str | None = None


class StreamChunk(_WireModel):
    """Partial streaming delta from the chat-completions service."""

    id: str | None = None
    object: str = ObjectType.CHAT_COMPLETION_CHUNK.value
    created: int | None = None
    model: str | None = None
    choices: list[ChunkChoice] = Field(default_factory=list)
    usage: Usage | None = None

    @field_validator("choices", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v

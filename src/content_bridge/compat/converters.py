"""
Type Converters
===============

Convert between the legacy content-generation contract and the
chat-completions protocol.

Handles:
- Legacy request -> role-tagged message list (inbound)
- Complete chat-completions response -> legacy response (outbound)
- Plain-text rendering of message lists for prompts and logs
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from content_bridge.core import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    Default,
    GenerateContentParameters,
    GenerateContentResponse,
    LegacyChoice,
    LegacyMessage,
    MessageRole,
    RequestShape,
    ResponseKey,
    dumps,
)

logger = logging.getLogger(__name__)


def to_json_text(value: Any) -> str:
    """Compact JSON for ``value``, or ``str(value)`` when JSON cannot represent it."""
    try:
        return dumps(value)
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning(
            f"Value of type {type(value).__name__} is not JSON serializable "
            f"({e}); using str()"
        )
        return str(value)


def stringify_content(content: Any) -> str:
    """Render one legacy content item as text: strings pass through, the rest is JSON."""
    if isinstance(content, str):
        return content
    return to_json_text(content)


# ================================================================
# Inbound Converters (legacy request -> chat-completions request)
# ================================================================


def coerce_message(message: Any) -> ChatMessage:
    """
    Accept one explicit message as given.

    Any role string is kept, ``None`` content becomes ``""`` and structured
    content becomes its JSON text. Values that are not messages at all become
    a user turn holding their JSON text.
    """
    if isinstance(message, ChatMessage):
        return message
    if isinstance(message, BaseModel):
        message = message.model_dump(exclude_none=True)
    if not isinstance(message, Mapping):
        return ChatMessage(role=MessageRole.USER, content=stringify_content(message))

    role, content = _message_parts(message)
    fields = {str(key): value for key, value in message.items()}
    fields[ResponseKey.ROLE.value] = str(role) if role else MessageRole.USER.value
    fields[ResponseKey.CONTENT.value] = (
        "" if content is None else stringify_content(content)
    )
    return ChatMessage.model_validate(fields)


def contents_to_messages(contents: Sequence[Any]) -> list[ChatMessage]:
    """
    Map generic contents to messages by position.

    Even positions are user turns, odd positions assistant turns.
    """
    return [
        ChatMessage(
            role=MessageRole.USER if index % 2 == 0 else MessageRole.ASSISTANT,
            content=stringify_content(content),
        )
        for index, content in enumerate(contents)
    ]


def normalize_request(
    request: GenerateContentParameters | Mapping[str, Any],
    default_model: str,
) -> ChatCompletionRequest:
    """
    Convert a legacy request to a chat-completions request.

    Args:
        request: Legacy request (model or equivalent dict)
        default_model: Model used when the request does not name one

    Returns:
        Request with explicit messages, effective model and limits
    """
    if not isinstance(request, GenerateContentParameters):
        request = GenerateContentParameters.model_validate(request)

    shape = request.shape
    if shape is RequestShape.MESSAGES:
        messages = [coerce_message(message) for message in request.messages or []]
    elif shape is RequestShape.CONTENTS:
        messages = contents_to_messages(request.contents or [])
    else:
        messages = [ChatMessage(role=MessageRole.USER, content=Default.GREETING)]

    logger.debug(f"Normalized {shape.value} request into {len(messages)} messages")

    return ChatCompletionRequest(
        messages=messages,
        model=request.model or default_model,
        max_tokens=request.max_tokens,
        temperature=request.temperature,
    )


# ================================================================
# Outbound Converters (chat-completions response -> legacy response)
# ================================================================


def to_legacy_response(response: Any) -> GenerateContentResponse:
    """
    Project a complete chat-completions response onto the legacy shape.

    Args:
        response: SDK ``ChatCompletion``, equivalent dict, or
            ``ChatCompletionResponse``

    Returns:
        Legacy response; ``data`` holds ``response`` unchanged
    """
    completion = ChatCompletionResponse.coerce(response)

    choices: list[LegacyChoice] = []
    for choice in completion.choices:
        message = choice.message
        choices.append(
            LegacyChoice(
                message=LegacyMessage(
                    content=(message.content if message else None) or "",
                    role=(message.role if message else None)
                    or MessageRole.ASSISTANT.value,
                ),
                finish_reason=choice.finish_reason,
            )
        )

    return GenerateContentResponse(
        text=choices[0].message.content if choices else "",
        choices=choices,
        data=response,
        function_calls=[],
        executable_code=None,
        code_execution_result=None,
    )


# ================================================================
# Text rendering
# ================================================================


def _message_parts(message: ChatMessage | Mapping[str, Any]) -> tuple[str, Any]:
    if isinstance(message, ChatMessage):
        role, content = message.role, message.content
    else:
        role = message.get(ResponseKey.ROLE.value, "")
        content = message.get(ResponseKey.CONTENT.value)
    if isinstance(role, MessageRole):
        role = role.value
    return role, content


def messages_to_string(messages: Sequence[ChatMessage | Mapping[str, Any]]) -> str:
    """Render messages as ``role: content`` lines."""
    lines = []
    for message in messages:
        role, content = _message_parts(message)
        lines.append(f"{role}: {stringify_content(content)}")
    return "\n".join(lines)


def part_list_to_string(value: Any) -> str:
    """Render a legacy part list as text: message lists line by line, anything else as JSON."""
    if isinstance(value, list) and all(
        isinstance(item, (ChatMessage, Mapping)) for item in value
    ):
        return messages_to_string(value)
    return to_json_text(value)

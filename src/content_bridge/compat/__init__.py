"""
Compatibility Layer
===================

Two-way translation between the legacy content-generation contract and the
chat-completions protocol.

- **Inbound**: legacy requests become role-tagged chat messages
- **Outbound**: chat-completions responses and stream chunks become legacy
  responses with identical shapes
- **Estimation**: approximate token counts for ``countTokens``

Usage:
    # Normalize a legacy request
    request = normalize_request({"contents": ["Hi", "Hello!", "How are you?"]},
                                default_model="deepseek-chat")

    # Convert a complete response
    legacy = to_legacy_response(completion)

    # Convert a stream
    async for fragment in reassemble_stream(sdk_stream):
        print(fragment.text, end="")
"""

from .converters import (
    coerce_message,
    contents_to_messages,
    messages_to_string,
    normalize_request,
    part_list_to_string,
    stringify_content,
    to_json_text,
    to_legacy_response,
)
from .streaming import chunk_to_completion, reassemble_stream
from .tokens import count_tokens, estimate_tokens

__all__ = [
    # Inbound
    "coerce_message",
    "contents_to_messages",
    "normalize_request",
    "stringify_content",
    # Outbound
    "to_legacy_response",
    "chunk_to_completion",
    "reassemble_stream",
    # Estimation
    "count_tokens",
    "estimate_tokens",
    # Text rendering
    "messages_to_string",
    "part_list_to_string",
    "to_json_text",
]

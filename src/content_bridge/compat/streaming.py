"""
Stream Reassembly
=================

Turn chat-completions stream chunks into legacy responses.

Each chunk is dressed up as a complete ``chat.completion`` envelope (delta
fields moved into ``message``, usage zeroed when missing) and sent through
the same projection as non-streaming responses, so streamed fragments and
full responses share one shape.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterable, AsyncIterator
from typing import Any

from content_bridge.core import (
    ChatCompletionResponse,
    CompletionChoice,
    CompletionMessage,
    GenerateContentResponse,
    MessageRole,
    ObjectType,
    StreamChunk,
    Usage,
)

from .converters import to_legacy_response

logger = logging.getLogger(__name__)


def chunk_to_completion(chunk: Any) -> ChatCompletionResponse:
    """
    Build a complete-response envelope from one stream chunk.

    Args:
        chunk: SDK ``ChatCompletionChunk``, equivalent dict, or ``StreamChunk``

    Returns:
        Envelope with ``message`` populated from each choice's ``delta``
    """
    parsed = StreamChunk.coerce(chunk)

    choices = []
    for choice in parsed.choices:
        delta = choice.delta
        choices.append(
            CompletionChoice(
                index=choice.index,
                message=CompletionMessage(
                    role=(delta.role if delta else None) or MessageRole.ASSISTANT.value,
                    content=(delta.content if delta else None) or "",
                ),
                finish_reason=choice.finish_reason,
            )
        )

    return ChatCompletionResponse(
        id=parsed.id,
        object=ObjectType.CHAT_COMPLETION.value,
        created=parsed.created,
        model=parsed.model,
        choices=choices,
        usage=parsed.usage or Usage(),
    )


async def _close_upstream(stream: Any) -> None:
    """Release the transport's stream handle if it exposes one."""
    closer = getattr(stream, "aclose", None) or getattr(stream, "close", None)
    if not callable(closer):
        return
    result = closer()
    if inspect.isawaitable(result):
        await result


async def reassemble_stream(
    chunks: AsyncIterable[Any],
) -> AsyncIterator[GenerateContentResponse]:
    """
    Yield one legacy response per stream chunk, in arrival order.

    Nothing is buffered beyond the current chunk and no terminator is
    added; the sequence ends when the transport stream ends. Stopping
    iteration early closes the upstream stream.

    Args:
        chunks: Async stream of chat-completions chunks

    Yields:
        Legacy responses shaped like non-streaming ones
    """
    chunk_count = 0
    try:
        async for chunk in chunks:
            chunk_count += 1
            yield to_legacy_response(chunk_to_completion(chunk))
    finally:
        await _close_upstream(chunks)
        logger.debug(f"Stream finished after {chunk_count} chunks")

"""
Content Generator Interface
===========================

The capability surface legacy callers are written against.

Embedding is a separate, optional capability: a generator either is an
``Embedder`` or it is not, and callers ask with ``supports_embedding()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Mapping
from typing import Any

from content_bridge.core import (
    CountTokensRequest,
    CountTokensResponse,
    EmbedContentRequest,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
)


class ContentGenerator(ABC):
    """Generate, stream and count tokens for legacy content requests."""

    @abstractmethod
    async def generate_content(
        self,
        request: GenerateContentParameters | Mapping[str, Any],
        user_prompt_id: str,
    ) -> GenerateContentResponse:
        """
        Create a complete response.

        Args:
            request: Legacy request
            user_prompt_id: Caller's prompt identifier

        Returns:
            Legacy response
        """
        ...

    @abstractmethod
    async def generate_content_stream(
        self,
        request: GenerateContentParameters | Mapping[str, Any],
        user_prompt_id: str,
    ) -> AsyncIterator[GenerateContentResponse]:
        """
        Start a streaming response.

        Awaiting opens the stream; iterating the result yields one legacy
        response per service chunk.
        """
        ...

    @abstractmethod
    async def count_tokens(
        self, request: CountTokensRequest | Mapping[str, Any]
    ) -> CountTokensResponse:
        """Count (or estimate) tokens in ``request.contents``."""
        ...


class Embedder(ABC):
    """Optional embedding capability."""

    @abstractmethod
    async def embed_content(
        self, request: EmbedContentRequest | Mapping[str, Any]
    ) -> EmbedContentResponse:
        ...


def supports_embedding(generator: ContentGenerator) -> bool:
    """Whether ``generator`` offers ``embed_content``."""
    return isinstance(generator, Embedder)

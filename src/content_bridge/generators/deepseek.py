"""
DeepSeek Content Generator
==========================

Serves the legacy content-generation contract from the DeepSeek
chat-completions API through the official ``openai`` SDK.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any

import openai

from content_bridge.compat import (
    count_tokens,
    normalize_request,
    reassemble_stream,
    to_legacy_response,
)
from content_bridge.config import GeneratorConfig
from content_bridge.core import (
    CountTokensRequest,
    CountTokensResponse,
    Default,
    EmbedContentRequest,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
)

from .base import ContentGenerator, Embedder

logger = logging.getLogger(__name__)


class DeepSeekContentGenerator(ContentGenerator, Embedder):
    """
    Legacy contract on top of ``AsyncOpenAI.chat.completions``.

    Transport errors raised by the SDK propagate unchanged.
    """

    def __init__(self, client: openai.AsyncOpenAI, config: GeneratorConfig):
        """
        Args:
            client: Configured async SDK client
            config: Generator configuration (default model)
        """
        self.client = client
        self.config = config
        self.model = config.model

    async def generate_content(
        self,
        request: GenerateContentParameters | Mapping[str, Any],
        user_prompt_id: str,
    ) -> GenerateContentResponse:
        chat_request = normalize_request(request, self.model)

        logger.debug(
            f"Creating completion: prompt_id={user_prompt_id}, "
            f"model={chat_request.model}, messages={len(chat_request.messages)}"
        )

        response = await self.client.chat.completions.create(
            **chat_request.to_params(stream=False)
        )
        return to_legacy_response(response)

    async def generate_content_stream(
        self,
        request: GenerateContentParameters | Mapping[str, Any],
        user_prompt_id: str,
    ) -> AsyncIterator[GenerateContentResponse]:
        chat_request = normalize_request(request, self.model)

        logger.debug(
            f"Starting stream: prompt_id={user_prompt_id}, "
            f"model={chat_request.model}, messages={len(chat_request.messages)}"
        )

        stream = await self.client.chat.completions.create(
            **chat_request.to_params(stream=True)
        )
        return reassemble_stream(stream)

    async def count_tokens(
        self, request: CountTokensRequest | Mapping[str, Any]
    ) -> CountTokensResponse:
        # No counting endpoint; character-based estimate
        return count_tokens(request)

    async def embed_content(
        self, request: EmbedContentRequest | Mapping[str, Any]
    ) -> EmbedContentResponse:
        # No embeddings endpoint; zero vector of the standard dimension
        return EmbedContentResponse(embedding=[0.0] * Default.EMBEDDING_DIMENSION)

    async def close(self) -> None:
        """Close the underlying SDK client."""
        await self.client.close()

    async def __aenter__(self) -> DeepSeekContentGenerator:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

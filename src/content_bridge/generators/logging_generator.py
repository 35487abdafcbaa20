"""
Logging Decorator
=================

Wraps any content generator and logs each call, its duration and failures.
Errors are re-raised unchanged.
"""

from __future__ import annotations

import inspect
import logging
import time
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

from .base import ContentGenerator, Embedder


class LoggingContentGenerator(ContentGenerator):
    """Delegating generator that logs requests, responses and errors."""

    def __init__(
        self,
        wrapped: ContentGenerator,
        logger: logging.Logger | None = None,
        log_level: int = logging.INFO,
    ):
        self.wrapped = wrapped
        self.logger = logger or logging.getLogger(__name__)
        self.log_level = log_level

    def _log_error(self, operation: str, error: Exception, started: float) -> None:
        self.logger.error(
            f"{operation} failed after {time.time() - started:.2f}s: "
            f"{type(error).__name__}: {error}"
        )

    async def generate_content(
        self,
        request: GenerateContentParameters | Mapping[str, Any],
        user_prompt_id: str,
    ) -> GenerateContentResponse:
        self.logger.log(self.log_level, f"generate_content: prompt_id={user_prompt_id}")
        started = time.time()
        try:
            response = await self.wrapped.generate_content(request, user_prompt_id)
        except Exception as e:
            self._log_error("generate_content", e, started)
            raise

        self.logger.log(
            self.log_level,
            f"generate_content completed in {time.time() - started:.2f}s: "
            f"{len(response.choices)} choices, {len(response.text)} chars",
        )
        return response

    async def generate_content_stream(
        self,
        request: GenerateContentParameters | Mapping[str, Any],
        user_prompt_id: str,
    ) -> AsyncIterator[GenerateContentResponse]:
        self.logger.log(
            self.log_level, f"generate_content_stream: prompt_id={user_prompt_id}"
        )
        started = time.time()
        try:
            stream = await self.wrapped.generate_content_stream(request, user_prompt_id)
        except Exception as e:
            self._log_error("generate_content_stream", e, started)
            raise

        return self._log_stream(stream, started)

    async def _log_stream(
        self, stream: AsyncIterator[GenerateContentResponse], started: float
    ) -> AsyncIterator[GenerateContentResponse]:
        fragments = 0
        characters = 0
        try:
            async for fragment in stream:
                fragments += 1
                characters += len(fragment.text)
                yield fragment
        except Exception as e:
            self._log_error("generate_content_stream", e, started)
            raise
        finally:
            aclose = getattr(stream, "aclose", None)
            if aclose is not None:
                await aclose()

        self.logger.log(
            self.log_level,
            f"generate_content_stream completed in {time.time() - started:.2f}s: "
            f"{fragments} fragments, {characters} chars",
        )

    async def count_tokens(
        self, request: CountTokensRequest | Mapping[str, Any]
    ) -> CountTokensResponse:
        response = await self.wrapped.count_tokens(request)
        self.logger.debug(f"count_tokens: {response.total_tokens}")
        return response

    async def close(self) -> None:
        """Close the wrapped generator if it holds a transport."""
        close = getattr(self.wrapped, "close", None)
        if close is None:
            return
        result = close()
        if inspect.isawaitable(result):
            await result

    async def __aenter__(self) -> LoggingContentGenerator:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


class LoggingEmbeddingContentGenerator(LoggingContentGenerator, Embedder):
    """Logging decorator for generators that also embed."""

    async def embed_content(
        self, request: EmbedContentRequest | Mapping[str, Any]
    ) -> EmbedContentResponse:
        started = time.time()
        try:
            response = await self.wrapped.embed_content(request)  # type: ignore[attr-defined]
        except Exception as e:
            self._log_error("embed_content", e, started)
            raise
        self.logger.debug(f"embed_content: dimension={len(response.embedding)}")
        return response


def with_logging(
    generator: ContentGenerator,
    logger: logging.Logger | None = None,
    log_level: int = logging.INFO,
) -> LoggingContentGenerator:
    """Wrap ``generator``, keeping its embedding capability if it has one."""
    if isinstance(generator, Embedder):
        return LoggingEmbeddingContentGenerator(generator, logger, log_level)
    return LoggingContentGenerator(generator, logger, log_level)

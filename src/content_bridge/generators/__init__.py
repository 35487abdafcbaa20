"""
Content Generators
==================

Implementations of the legacy content-generation surface and the factory
that picks one by auth mode.
"""

from .base import ContentGenerator, Embedder, supports_embedding
from .deepseek import DeepSeekContentGenerator
from .factory import (
    GeneratorFactory,
    build_user_agent,
    create_content_generator,
    register_generator_factory,
)
from .logging_generator import (
    LoggingContentGenerator,
    LoggingEmbeddingContentGenerator,
    with_logging,
)

__all__ = [
    "ContentGenerator",
    "Embedder",
    "supports_embedding",
    "DeepSeekContentGenerator",
    "LoggingContentGenerator",
    "LoggingEmbeddingContentGenerator",
    "with_logging",
    "GeneratorFactory",
    "build_user_agent",
    "create_content_generator",
    "register_generator_factory",
]

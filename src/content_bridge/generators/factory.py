"""
Content Generator Factory
=========================

Selects a generator implementation by declared auth mode and builds its
transport.
"""

from __future__ import annotations

import logging
import platform
import sys
from collections.abc import Callable

import httpx
import openai

from content_bridge.config import GeneratorConfig, SessionSettings
from content_bridge.core import (
    AuthType,
    Default,
    EnvVar,
    HttpHeader,
    MissingAPIKeyError,
    UnsupportedAuthTypeError,
)

from .base import ContentGenerator
from .deepseek import DeepSeekContentGenerator
from .logging_generator import with_logging

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[GeneratorConfig, SessionSettings], ContentGenerator]


def build_user_agent(version: str | None = None) -> str:
    """``DeepSeekCLI/<version> (<platform>; <arch>)``; version defaults to Python's."""
    version = version or platform.python_version()
    return f"{Default.USER_AGENT_PRODUCT}/{version} ({sys.platform}; {platform.machine()})"


def _build_http_client(proxy: str) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        proxy=proxy,
        timeout=openai.DEFAULT_TIMEOUT,
        limits=openai.DEFAULT_CONNECTION_LIMITS,
        follow_redirects=True,
    )


def _create_deepseek_generator(
    config: GeneratorConfig, settings: SessionSettings
) -> ContentGenerator:
    if not config.api_key:
        raise MissingAPIKeyError(EnvVar.DEEPSEEK_API_KEY.value, model=config.model)

    client = openai.AsyncOpenAI(
        api_key=config.api_key,
        base_url=config.base_url,
        default_headers={
            HttpHeader.USER_AGENT.value: build_user_agent(settings.cli_version)
        },
        http_client=_build_http_client(config.proxy) if config.proxy else None,
    )

    logger.info(
        f"Initialized DeepSeek generator: model={config.model}, "
        f"base_url={config.base_url}, proxy={'set' if config.proxy else 'none'}"
    )
    return DeepSeekContentGenerator(client, config)


_GENERATOR_FACTORIES: dict[AuthType, GeneratorFactory] = {
    AuthType.USE_DEEPSEEK: _create_deepseek_generator,
}


def register_generator_factory(
    auth_type: AuthType | str, factory: GeneratorFactory
) -> None:
    """
    Register the generator factory for an auth mode.

    Args:
        auth_type: Auth mode the factory serves (must be an ``AuthType`` value)
        factory: Callable building a generator from config and settings
    """
    _GENERATOR_FACTORIES[AuthType(auth_type)] = factory


def create_content_generator(
    config: GeneratorConfig,
    settings: SessionSettings | None = None,
    *,
    enable_logging: bool = False,
) -> ContentGenerator:
    """
    Build the content generator for ``config.auth_type``.

    Args:
        config: Generator configuration
        settings: Session settings (CLI version for the User-Agent)
        enable_logging: Wrap the generator in the logging decorator

    Returns:
        Content generator

    Raises:
        UnsupportedAuthTypeError: No generator for the auth mode
        MissingAPIKeyError: The auth mode needs an API key and none is set
    """
    auth_type = config.auth_type
    factory = (
        _GENERATOR_FACTORIES.get(auth_type) if isinstance(auth_type, AuthType) else None
    )
    if factory is None:
        raise UnsupportedAuthTypeError(auth_type, model=config.model)

    generator = factory(config, settings or SessionSettings())
    if enable_logging:
        generator = with_logging(generator)
    return generator

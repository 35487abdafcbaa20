"""
Configuration Models
====================

Type-safe, immutable configuration for content generators.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from content_bridge.core import ApiBaseUrl, AuthType, EnvVar

DEFAULT_DEEPSEEK_MODEL = "deepseek-chat"
DEFAULT_DEEPSEEK_REASONER_MODEL = "deepseek-reasoner"

# Legacy model names resolve to the DeepSeek default
DEFAULT_GEMINI_MODEL = DEFAULT_DEEPSEEK_MODEL
DEFAULT_GEMINI_FLASH_MODEL = DEFAULT_DEEPSEEK_MODEL
DEFAULT_GEMINI_FLASH_LITE_MODEL = DEFAULT_DEEPSEEK_MODEL
DEFAULT_GEMINI_EMBEDDING_MODEL = "text-embedding-ada-002"

# -1 asks thinking models for dynamic thinking
DEFAULT_THINKING_MODE = -1


class SessionSettings(BaseModel):
    """Ambient session information gathered at startup."""

    model: str | None = Field(None, description="Model override for the session")
    proxy: str | None = Field(None, description="Proxy URL for outbound requests")
    auth_type: AuthType | str | None = Field(
        None, union_mode="left_to_right", description="Declared auth mode"
    )
    cli_version: str | None = Field(None, description="Version reported in User-Agent")
    session_id: str | None = Field(None, description="Session identifier")

    model_config = ConfigDict(frozen=True, extra="ignore")


class GeneratorConfig(BaseModel):
    """Configuration a content generator is built from. Never mutated."""

    model: str = Field(..., description="Default model for requests")
    api_key: str | None = Field(None, repr=False, description="Service API key")
    base_url: str = Field(default=ApiBaseUrl.DEEPSEEK.value, description="API base URL")
    auth_type: AuthType | str | None = Field(
        None, union_mode="left_to_right", description="Declared auth mode"
    )
    proxy: str | None = Field(None, description="Proxy URL for outbound requests")

    model_config = ConfigDict(frozen=True)


def create_generator_config(
    auth_type: AuthType | str | None = None,
    settings: SessionSettings | None = None,
    env: Mapping[str, str] | None = None,
) -> GeneratorConfig:
    """
    Build a generator configuration for ``auth_type``.

    The API key is read from ``env`` (``os.environ`` when omitted): the
    DeepSeek key for the DeepSeek mode, the Gemini key for the legacy
    Gemini mode. OAuth and cloud-shell modes carry no key. Missing keys are
    left as ``None``; the generator factory decides whether that is fatal.

    Args:
        auth_type: Declared auth mode; ``None`` uses ``settings.auth_type``
        settings: Session settings (auth mode, model and proxy overrides)
        env: Environment mapping to read API keys from

    Returns:
        Immutable generator configuration
    """
    settings = settings or SessionSettings()
    env = os.environ if env is None else env
    if auth_type is None:
        auth_type = settings.auth_type

    api_key = None
    if auth_type == AuthType.USE_DEEPSEEK:
        api_key = env.get(EnvVar.DEEPSEEK_API_KEY.value) or None
    elif auth_type == AuthType.USE_GEMINI:
        api_key = env.get(EnvVar.GEMINI_API_KEY.value) or None

    return GeneratorConfig(
        model=settings.model or DEFAULT_DEEPSEEK_MODEL,
        api_key=api_key,
        base_url=ApiBaseUrl.DEEPSEEK.value,
        auth_type=auth_type,
        proxy=settings.proxy,
    )

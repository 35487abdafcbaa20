"""
Configuration
=============

Immutable generator configuration and session settings loading.
"""

from .loader import ConfigLoader, load_settings, reload_settings
from .models import (
    DEFAULT_DEEPSEEK_MODEL,
    DEFAULT_DEEPSEEK_REASONER_MODEL,
    DEFAULT_GEMINI_EMBEDDING_MODEL,
    DEFAULT_GEMINI_FLASH_LITE_MODEL,
    DEFAULT_GEMINI_FLASH_MODEL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_THINKING_MODE,
    GeneratorConfig,
    SessionSettings,
    create_generator_config,
)

__all__ = [
    "GeneratorConfig",
    "SessionSettings",
    "create_generator_config",
    "ConfigLoader",
    "load_settings",
    "reload_settings",
    "DEFAULT_DEEPSEEK_MODEL",
    "DEFAULT_DEEPSEEK_REASONER_MODEL",
    "DEFAULT_GEMINI_MODEL",
    "DEFAULT_GEMINI_FLASH_MODEL",
    "DEFAULT_GEMINI_FLASH_LITE_MODEL",
    "DEFAULT_GEMINI_EMBEDDING_MODEL",
    "DEFAULT_THINKING_MODE",
]

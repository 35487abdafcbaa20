"""
Error Types
===========

Structured errors raised by content-bridge itself.

Transport failures raised by the ``openai`` SDK or ``httpx`` are never
wrapped here; they reach the caller as-is.
"""

from __future__ import annotations

from typing import Any

from .enums import AuthType, ErrorSeverity


class ContentBridgeError(Exception):
    """Base error with severity and provider/model context."""

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.PERMANENT,
        provider: str | None = None,
        model: str | None = None,
        **metadata: Any,
    ):
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.provider = provider
        self.model = model
        self.metadata = metadata


class ConfigurationError(ContentBridgeError):
    """Generator could not be constructed from the given configuration."""

    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("severity", ErrorSeverity.PERMANENT)
        super().__init__(message, **kwargs)


class UnsupportedAuthTypeError(ConfigurationError):
    """No generator is available for the declared auth mode."""

    def __init__(self, auth_type: AuthType | str | None, **kwargs: Any):
        self.auth_type = auth_type
        label = auth_type.value if isinstance(auth_type, AuthType) else auth_type
        super().__init__(
            f"Error creating contentGenerator: Unsupported authType: {label}",
            **kwargs,
        )


class MissingAPIKeyError(ConfigurationError):
    """Auth mode requires an API key but none was configured."""

    def __init__(self, env_var: str, provider: str = "deepseek", **kwargs: Any):
        self.env_var = env_var
        super().__init__(
            f"DeepSeek API key is required. Please set {env_var} environment variable.",
            provider=provider,
            **kwargs,
        )


class InvalidConfigurationError(ConfigurationError):
    """Settings file or values failed validation."""

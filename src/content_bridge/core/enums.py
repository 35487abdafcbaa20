"""
Core Enumerations
=================

Type-safe enums for auth modes, roles, and other constants.
No more magic strings!
"""

from enum import Enum


class AuthType(str, Enum):
    """Declared authentication mode of a session."""

    USE_DEEPSEEK = "deepseek-api-key"
    # Legacy modes kept so existing settings files still parse
    LOGIN_WITH_GOOGLE = "oauth-personal"
    USE_GEMINI = "gemini-api-key"
    USE_VERTEX_AI = "vertex-ai"
    CLOUD_SHELL = "cloud-shell"


class MessageRole(str, Enum):
    """Chat message role."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ErrorSeverity(str, Enum):
    """How an error should be treated by callers."""

    PERMANENT = "permanent"
    RECOVERABLE = "recoverable"


class RequestShape(str, Enum):
    """Which variant of a legacy request was supplied."""

    MESSAGES = "messages"
    CONTENTS = "contents"
    EMPTY = "empty"

"""
Core Constants
==============

Wire keys, endpoints, environment variable names and numeric defaults.
"""

from enum import Enum


class ApiBaseUrl(str, Enum):
    """Fixed service URL per auth mode."""

    DEEPSEEK = "https://api.deepseek.com"


class EnvVar(str, Enum):
    """Environment variables consulted when building configuration."""

    DEEPSEEK_API_KEY = "DEEPSEEK_API_KEY"
    GEMINI_API_KEY = "GEMINI_API_KEY"
    CLI_VERSION = "CLI_VERSION"
    MODEL = "CONTENT_BRIDGE_MODEL"
    PROXY = "CONTENT_BRIDGE_PROXY"
    HTTPS_PROXY = "HTTPS_PROXY"
    CONFIG = "CONTENT_BRIDGE_CONFIG"


class HttpHeader(str, Enum):
    USER_AGENT = "User-Agent"


class ResponseKey(str, Enum):
    """Message keys used by the chat-completions protocol."""

    ROLE = "role"
    CONTENT = "content"


class ObjectType(str, Enum):
    CHAT_COMPLETION = "chat.completion"
    CHAT_COMPLETION_CHUNK = "chat.completion.chunk"


class Default:
    """Numeric and textual defaults."""

    # Average English token is roughly four characters
    CHARS_PER_TOKEN = 4
    EMBEDDING_DIMENSION = 1536
    GREETING = "Hello"
    USER_AGENT_PRODUCT = "DeepSeekCLI"

# content_bridge/__init__.py
"""
content-bridge
==============

Serve callers written against the legacy content-generation contract from
a chat-completions backend (DeepSeek via the OpenAI SDK).

Usage:
    from content_bridge import (
        AuthType,
        create_content_generator,
        create_generator_config,
        load_settings,
    )

    settings = load_settings()
    config = create_generator_config(AuthType.USE_DEEPSEEK, settings)
    generator = create_content_generator(config, settings)

    response = await generator.generate_content({"contents": ["Hi"]}, "prompt-1")
    print(response.text)
"""

__version__ = "0.1.0"


def get_version():
    """Get content-bridge version"""
    return __version__


from .compat import (  # noqa: E402
    count_tokens,
    estimate_tokens,
    normalize_request,
    reassemble_stream,
    to_legacy_response,
)
from .config import (  # noqa: E402
    DEFAULT_DEEPSEEK_MODEL,
    GeneratorConfig,
    SessionSettings,
    create_generator_config,
    load_settings,
)
from .core import (  # noqa: E402
    AuthType,
    ChatMessage,
    ConfigurationError,
    ContentBridgeError,
    GenerateContentParameters,
    GenerateContentResponse,
    MissingAPIKeyError,
    UnsupportedAuthTypeError,
)
from .generators import (  # noqa: E402
    ContentGenerator,
    DeepSeekContentGenerator,
    Embedder,
    create_content_generator,
    supports_embedding,
)

__all__ = [
    "__version__",
    "get_version",
    # Translation
    "normalize_request",
    "to_legacy_response",
    "reassemble_stream",
    "count_tokens",
    "estimate_tokens",
    # Configuration
    "DEFAULT_DEEPSEEK_MODEL",
    "GeneratorConfig",
    "SessionSettings",
    "create_generator_config",
    "load_settings",
    # Types and errors
    "AuthType",
    "ChatMessage",
    "GenerateContentParameters",
    "GenerateContentResponse",
    "ContentBridgeError",
    "ConfigurationError",
    "MissingAPIKeyError",
    "UnsupportedAuthTypeError",
    # Generators
    "ContentGenerator",
    "DeepSeekContentGenerator",
    "Embedder",
    "create_content_generator",
    "supports_embedding",
]

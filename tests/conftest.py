# tests/conftest.py
"""
Shared test configuration for content-bridge.
Provides fake chat-completions transport objects shaped like the OpenAI SDK's.
"""

import pytest

from content_bridge.config import GeneratorConfig, SessionSettings
from content_bridge.core import AuthType
from content_bridge.generators import DeepSeekContentGenerator

# ---------------------------------------------------------------------------
# Fake SDK objects
# ---------------------------------------------------------------------------


class MockDelta:
    def __init__(self, content=None, role=None):
        self.content = content
        self.role = role


class MockChunkChoice:
    def __init__(self, content=None, role=None, finish_reason=None, index=0):
        self.index = index
        self.delta = MockDelta(content, role)
        self.finish_reason = finish_reason


class MockUsage:
    def __init__(self, prompt_tokens=0, completion_tokens=0, total_tokens=0):
        self.prompt_tokens = prompt_tokens
        self.completion_tokens = completion_tokens
        self.total_tokens = total_tokens


class MockStreamChunk:
    def __init__(
        self,
        content=None,
        role=None,
        finish_reason=None,
        usage=None,
        chunk_id="chatcmpl-stream",
        model="deepseek-chat",
        created=1700000000,
        choices=None,
    ):
        self.id = chunk_id
        self.object = "chat.completion.chunk"
        self.created = created
        self.model = model
        self.choices = (
            choices
            if choices is not None
            else [MockChunkChoice(content, role, finish_reason)]
        )
        self.usage = usage


class MockAsyncStream:
    """Async stream that records whether it was closed."""

    def __init__(self, chunks=None, error=None):
        self.chunks = list(chunks or [])
        self.error = error
        self.closed = False
        self.consumed = 0

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self.consumed < len(self.chunks):
            chunk = self.chunks[self.consumed]
            self.consumed += 1
            return chunk
        if self.error is not None:
            raise self.error
        raise StopAsyncIteration

    async def close(self):
        self.closed = True


class MockCompletions:
    def __init__(self):
        self.calls = []
        self.create_response = None
        self.stream_response = None
        self.error = None

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if kwargs.get("stream", False):
            return self.stream_response or MockAsyncStream()
        return self.create_response


class MockChat:
    def __init__(self):
        self.completions = MockCompletions()


class MockAsyncOpenAI:
    def __init__(self, **kwargs):
        self.chat = MockChat()
        self.kwargs = kwargs
        self.closed = False

    async def close(self):
        self.closed = True


def completion_payload(content="Hello there!", role="assistant", finish_reason="stop"):
    """A complete chat-completions response as the API returns it."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "deepseek-chat",
        "choices": [
            {
                "index": 0,
                "message": {"role": role, "content": content},
                "finish_reason": finish_reason,
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 3, "total_tokens": 8},
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_client():
    """Fake AsyncOpenAI client"""
    return MockAsyncOpenAI()


@pytest.fixture
def deepseek_config():
    return GeneratorConfig(
        model="deepseek-chat",
        api_key="test-key",
        auth_type=AuthType.USE_DEEPSEEK,
    )


@pytest.fixture
def session_settings():
    return SessionSettings(cli_version="1.2.3", session_id="session-1")


@pytest.fixture
def generator(mock_client, deepseek_config):
    """DeepSeek generator wired to the fake client"""
    return DeepSeekContentGenerator(mock_client, deepseek_config)

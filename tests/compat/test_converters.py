# tests/compat/test_converters.py
"""
Tests for request normalization, response projection and text rendering.
"""

from types import SimpleNamespace

from conftest import completion_payload
from openai.types.chat import ChatCompletion, ChatCompletionMessage
from openai.types.chat.chat_completion import Choice

from content_bridge.compat import (
    contents_to_messages,
    messages_to_string,
    normalize_request,
    part_list_to_string,
    stringify_content,
    to_legacy_response,
)
from content_bridge.core import (
    ChatMessage,
    GenerateContentParameters,
    MessageRole,
)

# =============================================================================
# Inbound: normalize_request
# =============================================================================


class TestNormalizeRequest:
    def test_explicit_messages_pass_through_unchanged(self):
        messages = [
            ChatMessage(role=MessageRole.SYSTEM, content="Be brief."),
            ChatMessage(role=MessageRole.USER, content="Hi"),
            ChatMessage(role=MessageRole.ASSISTANT, content="Hello"),
            ChatMessage(role=MessageRole.USER, content="Bye"),
        ]
        request = normalize_request(
            GenerateContentParameters(messages=messages), "deepseek-chat"
        )
        assert request.messages == messages

    def test_explicit_dict_messages(self):
        request = normalize_request(
            {"messages": [{"role": "assistant", "content": "x"}]}, "deepseek-chat"
        )
        assert request.to_params(stream=False)["messages"] == [
            {"role": "assistant", "content": "x"}
        ]

    def test_contents_positional_parity(self):
        request = normalize_request({"contents": ["a", "b", "c"]}, "deepseek-chat")

        assert [m.role for m in request.messages] == [
            MessageRole.USER,
            MessageRole.ASSISTANT,
            MessageRole.USER,
        ]
        assert [m.content for m in request.messages] == ["a", "b", "c"]

    def test_structured_contents_become_json(self):
        request = normalize_request(
            {"contents": [{"parts": [{"text": "hi"}]}, 42]}, "deepseek-chat"
        )
        assert request.messages[0].content == '{"parts":[{"text":"hi"}]}'
        assert request.messages[1].content == "42"

    def test_empty_request_uses_greeting(self):
        request = normalize_request({}, "deepseek-chat")

        assert len(request.messages) == 1
        assert request.messages[0].role == MessageRole.USER
        assert request.messages[0].content == "Hello"

    def test_empty_contents_list_stays_empty(self):
        request = normalize_request({"contents": []}, "deepseek-chat")
        assert request.messages == []

    def test_messages_take_priority_over_contents(self):
        request = normalize_request(
            {"messages": [{"role": "user", "content": "m"}], "contents": ["c"]},
            "deepseek-chat",
        )
        assert [m.content for m in request.messages] == ["m"]

    def test_model_override(self):
        request = normalize_request(
            {"contents": ["a"], "model": "deepseek-reasoner"}, "deepseek-chat"
        )
        assert request.model == "deepseek-reasoner"

    def test_default_model(self):
        request = normalize_request({"contents": ["a"]}, "deepseek-chat")
        assert request.model == "deepseek-chat"

    def test_limits_pass_through(self):
        request = normalize_request(
            {"contents": ["a"], "max_tokens": 100, "temperature": 0.5}, "deepseek-chat"
        )
        assert request.max_tokens == 100
        assert request.temperature == 0.5

    def test_limits_absent(self):
        request = normalize_request({"contents": ["a"]}, "deepseek-chat")
        assert request.max_tokens is None
        assert request.temperature is None


class TestNormalizeIrregularInput:
    """Irregular requests degrade to text instead of raising."""

    def test_list_content_becomes_json(self):
        request = normalize_request(
            {"messages": [{"role": "user", "content": [{"type": "text", "text": "hi"}]}]},
            "deepseek-chat",
        )
        assert request.messages[0].content == '[{"type":"text","text":"hi"}]'

    def test_null_content_becomes_empty(self):
        request = normalize_request(
            {"messages": [{"role": "assistant", "content": None}]}, "deepseek-chat"
        )
        assert request.to_params(stream=False)["messages"] == [
            {"role": "assistant", "content": ""}
        ]

    def test_unknown_role_kept(self):
        request = normalize_request(
            {"messages": [{"role": "tool", "content": "42", "tool_call_id": "call_1"}]},
            "deepseek-chat",
        )
        assert request.to_params(stream=False)["messages"] == [
            {"role": "tool", "content": "42", "tool_call_id": "call_1"}
        ]

    def test_missing_role_defaults_to_user(self):
        request = normalize_request({"messages": [{"content": "hi"}]}, "deepseek-chat")
        assert request.messages[0].role == MessageRole.USER

    def test_non_mapping_message_becomes_user_turn(self):
        request = normalize_request({"messages": ["plain", 7]}, "deepseek-chat")

        assert [m.role for m in request.messages] == [MessageRole.USER, MessageRole.USER]
        assert [m.content for m in request.messages] == ["plain", "7"]

    def test_single_content_value(self):
        request = normalize_request({"contents": "just one"}, "deepseek-chat")
        assert [m.content for m in request.messages] == ["just one"]

    def test_fractional_limits_pass_through(self):
        request = normalize_request(
            {"contents": ["a"], "max_tokens": 1.5, "temperature": 1}, "deepseek-chat"
        )
        params = request.to_params(stream=False)

        assert params["max_tokens"] == 1.5
        assert params["temperature"] == 1

    def test_large_integers_stay_json(self):
        request = normalize_request({"contents": [{"n": 2**70}]}, "deepseek-chat")
        assert request.messages[0].content == '{"n":1180591620717411303424}'

    def test_unencodable_content_uses_str(self):
        class Opaque:
            def __str__(self):
                return "opaque!"

        request = normalize_request(
            {"messages": [{"role": "user", "content": Opaque()}]}, "deepseek-chat"
        )
        assert request.messages[0].content == "opaque!"


class TestStringifyContent:
    def test_string_unchanged(self):
        assert stringify_content("plain text") == "plain text"

    def test_none_is_json_null(self):
        assert stringify_content(None) == "null"

    def test_unserializable_falls_back_to_str(self):
        class Opaque:
            def __str__(self):
                return "opaque!"

        assert stringify_content(Opaque()) == "opaque!"

    def test_contents_to_messages_roles(self):
        messages = contents_to_messages(["q1", "a1", "q2", "a2"])
        assert [m.role.value for m in messages] == ["user", "assistant", "user", "assistant"]


# =============================================================================
# Outbound: to_legacy_response
# =============================================================================


class TestToLegacyResponse:
    def test_text_matches_first_choice(self):
        response = to_legacy_response(completion_payload("Hello there!"))

        assert response.text == "Hello there!"
        assert response.text == response.choices[0].message.content
        assert response.choices[0].message.role == "assistant"
        assert response.choices[0].finish_reason == "stop"

    def test_no_choices_gives_empty_text(self):
        payload = completion_payload()
        payload["choices"] = []
        response = to_legacy_response(payload)

        assert response.text == ""
        assert response.choices == []

    def test_missing_choices_gives_empty_text(self):
        response = to_legacy_response({"id": "x"})
        assert response.text == ""
        assert response.choices == []

    def test_null_content_defaults_to_empty(self):
        response = to_legacy_response(completion_payload(content=None))
        assert response.text == ""
        assert response.choices[0].message.content == ""

    def test_missing_role_defaults_to_assistant(self):
        payload = completion_payload()
        del payload["choices"][0]["message"]["role"]
        response = to_legacy_response(payload)
        assert response.choices[0].message.role == "assistant"

    def test_missing_message_defaults(self):
        response = to_legacy_response({"choices": [{"index": 0, "finish_reason": "length"}]})
        assert response.choices[0].message.content == ""
        assert response.choices[0].message.role == "assistant"
        assert response.choices[0].finish_reason == "length"

    def test_all_choices_mapped_in_order(self):
        payload = completion_payload("first")
        payload["choices"].append(
            {"index": 1, "message": {"role": "assistant", "content": "second"}, "finish_reason": "length"}
        )
        response = to_legacy_response(payload)

        assert [c.message.content for c in response.choices] == ["first", "second"]
        assert [c.finish_reason for c in response.choices] == ["stop", "length"]
        assert response.text == "first"

    def test_data_is_raw_response(self):
        payload = completion_payload()
        response = to_legacy_response(payload)
        assert response.data is payload

    def test_legacy_only_fields_empty(self):
        response = to_legacy_response(completion_payload())

        assert response.function_calls == []
        assert response.executable_code is None
        assert response.code_execution_result is None

    def test_sdk_response(self):
        sdk = ChatCompletion(
            id="chatcmpl-1",
            object="chat.completion",
            created=1700000000,
            model="deepseek-chat",
            choices=[
                Choice(
                    index=0,
                    message=ChatCompletionMessage(role="assistant", content="From SDK"),
                    finish_reason="stop",
                )
            ],
        )
        response = to_legacy_response(sdk)

        assert response.text == "From SDK"
        assert response.data is sdk

    def test_attribute_object_response(self):
        raw = SimpleNamespace(
            id="x",
            choices=[
                SimpleNamespace(
                    index=0,
                    message=SimpleNamespace(role="assistant", content="attr"),
                    finish_reason="stop",
                )
            ],
        )
        assert to_legacy_response(raw).text == "attr"


# =============================================================================
# Text rendering
# =============================================================================


class TestTextRendering:
    def test_messages_to_string(self):
        text = messages_to_string(
            [
                {"role": "user", "content": "Hi"},
                ChatMessage(role=MessageRole.ASSISTANT, content="Hello"),
                {"role": "user", "content": [{"type": "text", "text": "x"}]},
            ]
        )
        assert text == 'user: Hi\nassistant: Hello\nuser: [{"type":"text","text":"x"}]'

    def test_part_list_of_messages(self):
        assert part_list_to_string([{"role": "user", "content": "Hi"}]) == "user: Hi"

    def test_part_list_single_value_is_json(self):
        assert part_list_to_string({"text": "Hi"}) == '{"text":"Hi"}'
        assert part_list_to_string("Hi") == '"Hi"'

    def test_part_list_of_plain_values_is_json(self):
        assert part_list_to_string(["a", "b"]) == '["a","b"]'

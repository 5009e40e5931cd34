"""
Completion gateway selection, demo replies and Anthropic error mapping.
"""

from types import SimpleNamespace
from unittest import mock

import anthropic
import httpx
import pytest

from soless_engine.bot.config import prompts
from soless_engine.vendors import (
    ConfiguredCompletionGateway,
    DemoCompletionGateway,
    MODE_CONFIGURED,
    MODE_UNCONFIGURED,
    get_completion_gateway,
    is_valid_api_key,
)
from soless_engine.vendors.anthropic.completion_service import AnthropicCompletionService
from soless_engine.vendors.demo import DEMO_MODE_MARKER
from soless_engine.util.exceptions import UpstreamException


VALID_KEY = "sk-ant-REDACTED"


def fake_client(create):
    return SimpleNamespace(messages=SimpleNamespace(create=create))


@pytest.mark.parametrize("api_key, expected", [
    (VALID_KEY, True),
    ("  " + VALID_KEY + "\n", True),
    ("", False),
    (None, False),
    ("sk-ant-", False),
    ("sk-live-123", False),
    ("sk-ant-abc def", False),
    (12345, False),
])
def test_is_valid_api_key(api_key, expected):
    assert is_valid_api_key(api_key) is expected


@pytest.mark.parametrize("api_key", ["", "not-a-key", "sk-ant-with space"])
def test_missing_or_malformed_key_selects_demo_without_network(api_key):
    with mock.patch("soless_engine.vendors.anthropic.AnthropicCompletionService") as service_cls:
        gateway = get_completion_gateway(api_key)

        reply = gateway.complete("What is SOLess?")

    service_cls.assert_not_called()
    assert isinstance(gateway, DemoCompletionGateway)
    assert gateway.mode == MODE_UNCONFIGURED
    assert reply.startswith(DEMO_MODE_MARKER)


def test_valid_key_selects_configured_gateway():
    service = mock.Mock()
    service.generate.return_value = "real answer"

    gateway = get_completion_gateway(VALID_KEY, completion_service=service)

    assert isinstance(gateway, ConfiguredCompletionGateway)
    assert gateway.mode == MODE_CONFIGURED
    assert gateway.complete("prompt text") == "real answer"
    service.generate.assert_called_once_with(prompts.SYSTEM_INSTRUCTION, "prompt text")


def test_demo_reply_is_deterministic_per_prompt():
    gateway = DemoCompletionGateway()

    assert gateway.complete("same prompt") == gateway.complete("same prompt")
    replies = {gateway.complete(f"prompt {i}") for i in range(40)}
    assert len(replies) > 1
    assert all(DEMO_MODE_MARKER in reply for reply in replies)


class TestAnthropicCompletionService:

    def test_returns_first_text_block(self):
        create = mock.Mock(return_value=SimpleNamespace(content=[SimpleNamespace(text="Hi there")]))
        service = AnthropicCompletionService(client=fake_client(create), model="test-model", max_tokens=50)

        assert service.generate("system", "user prompt") == "Hi there"
        create.assert_called_once_with(
            model="test-model",
            max_tokens=50,
            system="system",
            messages=[{"role": "user", "content": "user prompt"}],
        )

    def test_timeout_maps_to_completion_timeout(self):
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        create = mock.Mock(side_effect=anthropic.APITimeoutError(request=request))
        service = AnthropicCompletionService(client=fake_client(create), model="m", max_tokens=10)

        with pytest.raises(UpstreamException) as exc_info:
            service.generate("system", "prompt")

        assert exc_info.value.error_code == "COMPLETION_TIMEOUT"
        assert exc_info.value.status_code == 504

    @pytest.mark.parametrize("error", [
        ConnectionError("network down"),
        ValueError("bad payload"),
    ])
    def test_other_failures_map_to_completion_failed(self, error):
        service = AnthropicCompletionService(
            client=fake_client(mock.Mock(side_effect=error)), model="m", max_tokens=10
        )

        with pytest.raises(UpstreamException) as exc_info:
            service.generate("system", "prompt")

        assert exc_info.value.error_code == "COMPLETION_FAILED"
        assert exc_info.value.status_code == 502
        assert "details" not in exc_info.value.to_dict()

    def test_empty_content_is_an_upstream_failure(self):
        create = mock.Mock(return_value=SimpleNamespace(content=[]))
        service = AnthropicCompletionService(client=fake_client(create), model="m", max_tokens=10)

        with pytest.raises(UpstreamException):
            service.generate("system", "prompt")

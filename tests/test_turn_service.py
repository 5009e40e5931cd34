"""
Turn pipeline: append order, failed completions, retry, serialization.
"""

import threading
import time

import pytest

from soless_engine.util.exceptions import (
    ConflictException,
    NotFoundException,
    UpstreamException,
)


@pytest.fixture
def turns(container):
    return container.turn_service


@pytest.fixture
def conversation_id(container):
    return container.conversation_store.create()


def roles(container, conversation_id):
    return [m.role for m in container.conversation_store.get(conversation_id).messages]


def test_successful_turn_appends_user_then_assistant(container, turns, conversation_id, gateway):
    result = turns.send_message(conversation_id, "What is SOLess?")

    assert result == {"message": gateway.reply, "mode": "configured"}
    messages = container.conversation_store.get(conversation_id).messages
    assert [(m.role, m.content) for m in messages] == [
        ("user", "What is SOLess?"),
        ("assistant", gateway.reply),
    ]


def test_prompt_uses_persona_knowledge_and_prior_history(container, turns, conversation_id, gateway):
    container.document_store.save("facts.txt", b"SOLess burns fees.")
    container.persona_store.replace({"name": "Rex", "style": "Dry", "background": "Trader"})

    turns.send_message(conversation_id, "first")
    turns.send_message(conversation_id, "second")

    first_prompt, second_prompt = gateway.prompts
    assert 'named "Rex"' in first_prompt
    assert "SOLess burns fees." in first_prompt
    assert "Trader" in first_prompt
    assert "Human:" not in first_prompt
    assert "H: second" in second_prompt
    assert f"Human: first\n\nAssistant: {gateway.reply}" in second_prompt


def test_unknown_conversation(turns):
    with pytest.raises(NotFoundException):
        turns.send_message("no-such-id", "hi")


def test_failed_completion_leaves_conversation_awaiting_reply(container, turns, conversation_id, gateway):
    gateway.error = UpstreamException(error_code="COMPLETION_FAILED", message="down")

    with pytest.raises(UpstreamException):
        turns.send_message(conversation_id, "hello?")

    conversation = container.conversation_store.get(conversation_id)
    assert roles(container, conversation_id) == ["user"]
    assert conversation.awaiting_reply


def test_retry_completes_pending_turn_without_duplicating(container, turns, conversation_id, gateway):
    gateway.error = UpstreamException(error_code="COMPLETION_TIMEOUT", message="slow", status_code=504)
    with pytest.raises(UpstreamException):
        turns.send_message(conversation_id, "hello?")

    gateway.error = None
    result = turns.retry(conversation_id)

    assert result["message"] == gateway.reply
    assert roles(container, conversation_id) == ["user", "assistant"]
    assert "H: hello?" in gateway.prompts[-1]


def test_retry_with_nothing_pending(turns, conversation_id):
    with pytest.raises(ConflictException) as exc_info:
        turns.retry(conversation_id)
    assert exc_info.value.error_code == "NOTHING_TO_RETRY"

    turns.send_message(conversation_id, "hi")
    with pytest.raises(ConflictException):
        turns.retry(conversation_id)


def test_unexpected_gateway_error_is_wrapped(turns, conversation_id, gateway):
    gateway.error = RuntimeError("boom")

    with pytest.raises(UpstreamException) as exc_info:
        turns.send_message(conversation_id, "hi")

    assert exc_info.value.error_code == "COMPLETION_FAILED"
    assert exc_info.value.details == "boom"


def test_concurrent_turns_on_one_conversation_are_serialized(container, turns, conversation_id, gateway):
    active = []
    overlaps = []

    def slow_completion():
        active.append(1)
        if len(active) > 1:
            overlaps.append(True)
        time.sleep(0.05)
        active.pop()

    gateway.delay = slow_completion

    threads = [
        threading.Thread(target=turns.send_message, args=(conversation_id, text))
        for text in ("one", "two")
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert overlaps == []
    assert roles(container, conversation_id) == ["user", "assistant", "user", "assistant"]


def test_different_conversations_do_not_share_history(container, turns, gateway):
    first = container.conversation_store.create()
    second = container.conversation_store.create()

    turns.send_message(first, "only in first")
    turns.send_message(second, "only in second")

    assert "only in first" not in gateway.prompts[-1]
    assert len(container.conversation_store.get(second).messages) == 2

"""
Shared fixtures: isolated stores under tmp_path and a recording gateway.
"""

import threading

import pytest

from soless_engine.app import create_app
from soless_engine.config.container import build_container
from soless_engine.vendors.completion_gateway import CompletionGateway, MODE_CONFIGURED


class RecordingGateway(CompletionGateway):
    """Configured-mode stand-in that remembers prompts and can be told to fail."""

    mode = MODE_CONFIGURED

    def __init__(self, reply="Hello from the assistant."):
        self.reply   = reply
        self.prompts = []
        self.error   = None
        self.delay   = None
        self._lock   = threading.Lock()

    def complete(self, prompt):
        with self._lock:
            self.prompts.append(prompt)
        if self.delay:
            self.delay()
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def gateway():
    return RecordingGateway()


@pytest.fixture
def container(tmp_path, gateway):
    return build_container(
        docs_dir = str(tmp_path / "docs"),
        data_dir = str(tmp_path / "data"),
        gateway  = gateway,
        knowledge_cache = False
    )


@pytest.fixture
def app(container):
    app = create_app(container)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()

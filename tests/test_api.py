"""
HTTP surface: envelopes, status codes and the end-to-end web flow.
"""

import io

import pytest

from soless_engine.base import constants
from soless_engine.knowledge.config import core_knowledge
from soless_engine.util.exceptions import UpstreamException


def upload(client, filename, content):
    return client.post(
        "/api/documents/upload",
        data={"document": (io.BytesIO(content), filename)},
        content_type="multipart/form-data",
    )


def new_conversation(client):
    response = client.post("/api/conversations")
    assert response.status_code == 201
    return response.get_json()["data"]["conversation_id"]


def test_health_reports_mode(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "mode": "configured"}


class TestConversations:

    def test_full_turn(self, client, gateway):
        conversation_id = new_conversation(client)

        response = client.post(
            f"/api/conversations/{conversation_id}/messages",
            json={"message": "What is SOLess?"},
        )

        assert response.status_code == 200
        body = response.get_json()
        assert body["status"] == "success"
        assert body["data"] == {"message": gateway.reply, "mode": "configured"}
        assert "What is SOLess?" in gateway.prompts[0]

        history = client.get(f"/api/conversations/{conversation_id}").get_json()["data"]["conversation"]
        assert [m["role"] for m in history["messages"]] == ["user", "assistant"]
        assert history["total"] == 2
        assert history["awaiting_reply"] is False

    def test_history_limit(self, client):
        conversation_id = new_conversation(client)
        for text in ("one", "two"):
            client.post(f"/api/conversations/{conversation_id}/messages", json={"message": text})

        data = client.get(f"/api/conversations/{conversation_id}?limit=1").get_json()["data"]

        assert data["conversation"]["total"] == 4
        assert len(data["conversation"]["messages"]) == 1
        assert data["conversation"]["messages"][0]["role"] == "assistant"

    @pytest.mark.parametrize("payload, error_code", [
        ({}, "INVALID_REQUEST"),
        ({"message": ""}, "MISSING_MESSAGE"),
        ({"text": "hi"}, "MISSING_MESSAGE"),
        ({"message": "   "}, "INVALID_MESSAGE"),
        ({"message": 42}, "INVALID_MESSAGE"),
    ])
    def test_invalid_message(self, client, container, payload, error_code):
        conversation_id = new_conversation(client)

        response = client.post(f"/api/conversations/{conversation_id}/messages", json=payload)

        assert response.status_code == 400
        assert response.get_json()["error_code"] == error_code
        assert container.conversation_store.get(conversation_id).messages == []

    def test_message_to_unknown_conversation(self, client, container):
        response = client.post("/api/conversations/unknown/messages", json={"message": "hi"})

        assert response.status_code == 404
        assert response.get_json()["error_code"] == "CONVERSATION_NOT_FOUND"
        assert len(container.conversation_store) == 0

    def test_get_unknown_conversation(self, client):
        assert client.get("/api/conversations/unknown").status_code == 404

    def test_upstream_failure_then_retry(self, client, gateway):
        conversation_id = new_conversation(client)
        gateway.error = UpstreamException(
            error_code="COMPLETION_FAILED", message="The assistant is unavailable.", details="secret"
        )

        failed = client.post(f"/api/conversations/{conversation_id}/messages", json={"message": "hi"})

        assert failed.status_code == 502
        assert failed.get_json() == {
            "status": "error",
            "error_code": "COMPLETION_FAILED",
            "message": "The assistant is unavailable.",
        }
        data = client.get(f"/api/conversations/{conversation_id}").get_json()["data"]["conversation"]
        assert data["awaiting_reply"] is True

        gateway.error = None
        retried = client.post(f"/api/conversations/{conversation_id}/retry")

        assert retried.status_code == 200
        assert retried.get_json()["data"]["message"] == gateway.reply

    def test_retry_without_pending_turn(self, client):
        conversation_id = new_conversation(client)

        response = client.post(f"/api/conversations/{conversation_id}/retry")

        assert response.status_code == 409
        assert response.get_json()["error_code"] == "NOTHING_TO_RETRY"

    def test_unexpected_error_is_generic_500(self, client, container, monkeypatch):
        def explode():
            raise RuntimeError("internal detail")

        monkeypatch.setattr(container.conversation_store, "create", explode)

        response = client.post("/api/conversations")

        assert response.status_code == 500
        assert "internal detail" not in response.get_data(as_text=True)


class TestDocuments:

    def test_upload_list_delete(self, client):
        assert upload(client, "guide.md", b"# Guide").status_code == 201
        assert upload(client, "faq.txt", b"Q/A").status_code == 201

        listed = client.get("/api/documents").get_json()["data"]
        assert listed == {"total": 2, "documents": ["faq.txt", "guide.md"]}

        deleted = client.delete("/api/documents/faq.txt")
        assert deleted.status_code == 200
        assert client.get("/api/documents").get_json()["data"]["documents"] == ["guide.md"]

    def test_upload_path_components_are_dropped(self, client, container):
        response = upload(client, "../../etc/notes.txt", b"hello")

        assert response.status_code == 201
        assert response.get_json()["data"]["filename"] == "notes.txt"
        assert container.document_store.exists("notes.txt")

    def test_upload_replaces_same_name(self, client, container):
        upload(client, "a.txt", b"old")
        upload(client, "a.txt", b"new")

        assert container.document_store.read("a.txt") == b"new"

    def test_upload_requires_file(self, client):
        response = client.post("/api/documents/upload", data={"note": "no file"}, content_type="multipart/form-data")

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "DOCUMENT_FILE_REQUIRED"

    def test_upload_rejects_unsupported_format(self, client):
        response = upload(client, "logo.png", b"\x89PNG")

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "UNSUPPORTED_FILE_FORMAT"
        assert "PNG" in response.get_json()["message"]

    def test_upload_rejects_oversized_file(self, client, monkeypatch):
        monkeypatch.setattr(constants, "MAX_UPLOAD_BYTES", 8)

        response = upload(client, "big.txt", b"0123456789")

        assert response.status_code == 413
        assert response.get_json()["error_code"] == "DOCUMENT_TOO_LARGE"

    def test_body_over_content_length_is_413_not_500(self, app, client, container):
        app.config["MAX_CONTENT_LENGTH"] = 1024

        response = upload(client, "big.txt", b"x" * 4096)

        assert response.status_code == 413
        assert response.get_json()["error_code"] == "DOCUMENT_TOO_LARGE"
        assert not container.document_store.exists("big.txt")

    def test_listing_matches_ingested_formats(self, client, container):
        container.document_store.save("notes.markdown", b"# Notes")
        container.document_store.save("faq.text", b"Q/A")
        container.document_store.save("logo.png", b"\x89PNG")

        listed = client.get("/api/documents").get_json()["data"]
        knowledge = client.get("/api/knowledge").get_json()["data"]

        assert listed["documents"] == ["faq.text", "notes.markdown"]
        assert sorted(knowledge["documents"]) == listed["documents"]

    def test_delete_missing_document(self, client):
        response = client.delete("/api/documents/missing.pdf")

        assert response.status_code == 404
        assert response.get_json()["error_code"] == "DOCUMENT_NOT_FOUND"

    def test_uploaded_document_reaches_next_prompt(self, client, gateway):
        upload(client, "tokenomics.txt", b"Total supply is 1B.")
        conversation_id = new_conversation(client)

        client.post(f"/api/conversations/{conversation_id}/messages", json={"message": "supply?"})

        assert "# Document: tokenomics.txt\nTotal supply is 1B." in gateway.prompts[-1]


class TestKnowledge:

    def test_empty_summary(self, client):
        data = client.get("/api/knowledge").get_json()["data"]

        assert data["total"] == 0
        assert data["documents"] == []
        assert data["preview"].startswith(core_knowledge.CORE_KNOWLEDGE[:50])
        assert len(data["fingerprint"]) == 64

    def test_summary_lists_documents(self, client):
        upload(client, "a.txt", b"alpha")

        data = client.get("/api/knowledge").get_json()["data"]

        assert data["documents"] == ["a.txt"]
        assert data["length"] > len(core_knowledge.CORE_KNOWLEDGE)


class TestPersona:

    def test_get_default(self, client):
        persona = client.get("/api/persona").get_json()["data"]["persona"]

        assert set(persona) == {"name", "style", "background"}

    def test_replace(self, client, gateway):
        record = {"name": "Rex", "style": "Deadpan", "background": "Former trader"}

        response = client.put("/api/persona", json=record)

        assert response.status_code == 200
        assert client.get("/api/persona").get_json()["data"]["persona"] == record

        conversation_id = new_conversation(client)
        client.post(f"/api/conversations/{conversation_id}/messages", json={"message": "hi"})
        assert 'named "Rex"' in gateway.prompts[-1]
        assert "Deadpan" in gateway.prompts[-1]

    def test_partial_update_rejected(self, client):
        before = client.get("/api/persona").get_json()["data"]["persona"]

        response = client.put("/api/persona", json={"name": "Only name"})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_PERSONA"
        assert client.get("/api/persona").get_json()["data"]["persona"] == before


class TestTelegramSettings:

    TOKEN = "123456789:" + "A" * 35

    def test_token_is_masked(self, client, container, monkeypatch):
        monkeypatch.setattr(container.telegram_settings, "env_token", "")

        response = client.put("/api/telegram/settings", json={"enabled": True, "bot_token": self.TOKEN})

        assert response.status_code == 200
        settings = response.get_json()["data"]["settings"]
        assert settings["enabled"] is True
        assert settings["token_configured"] is True
        assert settings["token_source"] == "record"
        assert self.TOKEN not in response.get_data(as_text=True)

    def test_invalid_enabled_flag(self, client):
        response = client.put("/api/telegram/settings", json={"enabled": "yes"})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_TELEGRAM_SETTINGS"

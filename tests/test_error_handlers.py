"""Tests for the FastAPI integration of the sanitizer."""

import logging

from notesafe.core.errors import INVALID_INPUT_MESSAGE


class TestValidationErrorHandler:
    def test_safe_note_accepted(self, client):
        resp = client.post("/notes", json={"text": "<b>Hi</b>"})
        assert resp.status_code == 200
        assert resp.json() == {"note": "&lt;b&gt;Hi&lt;&#x2F;b&gt;"}

    def test_unsafe_note_returns_400(self, client):
        resp = client.post("/notes", json={"text": "javajavascript:script:"})
        assert resp.status_code == 400
        assert resp.json() == {"detail": INVALID_INPUT_MESSAGE}

    def test_status_code_from_settings(self, client, monkeypatch):
        from notesafe.config import settings
        monkeypatch.setattr(settings, "UNSAFE_INPUT_STATUS_CODE", 422)
        resp = client.post("/notes", json={"text": "dadata:ta:"})
        assert resp.status_code == 422

    def test_rejection_logged_without_content(self, client, caplog):
        caplog.set_level(logging.WARNING, logger="notesafe.api")
        client.post("/notes", json={"text": "javajavascript:script:"})
        assert "Rejected unsafe input: POST /notes" in caplog.text
        assert "javascript:" not in caplog.text


class TestSchemaValidation:
    def test_model_body_sanitized(self, client):
        resp = client.post("/notes/model", json={"note": "onload=go()"})
        assert resp.status_code == 200
        assert resp.json() == {"note": "go()"}

    def test_model_body_rejected_with_422(self, client):
        resp = client.post("/notes/model", json={"note": "javajavascript:script:"})
        assert resp.status_code == 422

    def test_partial_update(self, client):
        resp = client.patch("/notes/model", json={})
        assert resp.status_code == 200
        assert resp.json() == {"note": None}

"""
Test the Gemini assistant wrapper without reaching Vertex AI.
"""

import sys

import pytest

from myhealth.core.exceptions import AssistantError
from myhealth.services.assistant_service import (
    DEFAULT_SESSION_TITLE,
    AssistantService,
    build_chat_contents,
    build_title_prompt,
)


@pytest.fixture
def service(settings):
    """Assistant with Vertex AI initialisation stubbed out."""
    assistant = AssistantService(settings)
    assistant._initialized = True
    assistant.model = "chat-model"
    assistant.title_model = "title-model"
    return assistant


def test_build_chat_contents_maps_roles():
    contents = build_chat_contents(
        [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
        ],
        {"firstName": "A"},
    )
    assert [c["role"] for c in contents] == ["user", "user", "model"]
    assert contents[0]["parts"][0]["text"] == 'User Profile: {"firstName": "A"}'
    assert contents[2]["parts"][0]["text"] == "hello"


def test_build_chat_contents_without_profile():
    contents = build_chat_contents([], None)
    assert contents[0]["parts"][0]["text"] == "User Profile: {}"


def test_title_prompt_quotes_message():
    assert '"chest pain"' in build_title_prompt("chest pain")


def test_chat_uses_chat_model(service, monkeypatch):
    seen = {}

    def fake_generate(model, contents):
        seen["model"] = model
        seen["contents"] = contents
        return "Rest well."

    monkeypatch.setattr(service, "_generate", fake_generate)
    assert service.chat([{"role": "user", "content": "tired"}]) == "Rest well."
    assert seen["model"] == "chat-model"
    assert seen["contents"][-1]["parts"][0]["text"] == "tired"


def test_chat_wraps_model_errors(service, monkeypatch):
    def broken(model, contents):
        raise RuntimeError("quota exceeded")

    monkeypatch.setattr(service, "_generate", broken)
    with pytest.raises(AssistantError):
        service.chat([{"role": "user", "content": "hi"}])


def test_session_title_is_trimmed(service, monkeypatch):
    monkeypatch.setattr(service, "_generate", lambda model, contents: "  Headache \n")
    assert service.generate_session_title("my head hurts") == "Headache"


def test_session_title_falls_back(service, monkeypatch):
    def broken(model, contents):
        raise RuntimeError("offline")

    monkeypatch.setattr(service, "_generate", broken)
    assert service.generate_session_title("hi") == DEFAULT_SESSION_TITLE

    monkeypatch.setattr(service, "_generate", lambda model, contents: "   ")
    assert service.generate_session_title("hi") == DEFAULT_SESSION_TITLE


class BlockedResponse:
    """Mimics a response whose only candidate was blocked by safety filters."""

    @property
    def text(self):
        raise ValueError("Response has no text: candidate was blocked")


class BlockingModel:
    def generate_content(self, contents):
        return BlockedResponse()


def test_blocked_response_is_empty_reply(service):
    service.model = BlockingModel()
    assert service.chat([{"role": "user", "content": "hi"}]) == ""


def test_report_sdk_failure_is_assistant_error(service, monkeypatch):
    monkeypatch.setitem(sys.modules, "vertexai.generative_models", None)
    with pytest.raises(AssistantError):
        service.analyze_report(b"%PDF", "application/pdf")


def test_initialisation_failure_is_assistant_error(settings, monkeypatch):
    monkeypatch.setitem(sys.modules, "vertexai.generative_models", None)
    with pytest.raises(AssistantError):
        AssistantService(settings).analyze_report(b"%PDF", "application/pdf")

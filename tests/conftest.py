"""
Fixtures compartidas.

Los tests nunca hablan con OpenAI: `FakeOpenAI` imita la forma del cliente
(`chat.completions.create` y `audio.transcriptions.create`) y registra cada
llamada.
"""

from types import SimpleNamespace

import pytest

from sermon_ai_core import engine, llm_client
from sermon_ai_core.config import get_settings

ENV_VARS = [
    "OPENAI_API_KEY",
    "OPENAI_MODEL_TEXT",
    "OPENAI_MODEL_TRANSCRIBE",
    "TRANSCRIPTION_LANGUAGE",
    "MAX_AUDIO_BYTES",
    "GENERATION_POLICY",
    "INTER_TASK_DELAY_S",
    "OUTPUT_DIR",
]

# Fragmento propio de cada template → tipo de contenido
PROMPT_MARKERS = {
    "expert in homiletics": "critique",
    "diverse panel of thoughtful listeners": "perspectiveFeedback",
    "Bible Study Leader's Guide": "bibleStudyGuide",
    '"Follow Along" activity sheet': "kidsFollowAlong",
}


def content_type_of(prompt: str) -> str:
    for marker, content_type in PROMPT_MARKERS.items():
        if marker in prompt:
            return content_type
    raise AssertionError(f"prompt desconocido: {prompt[:60]!r}")


class FakeOpenAI:
    def __init__(self, fail=None, transcript_text="transcribed sermon", transcription_error=None, on_chat=None, on_transcribe=None):
        self.fail = fail or {}
        self.transcript_text = transcript_text
        self.transcription_error = transcription_error
        self.on_chat = on_chat
        self.on_transcribe = on_transcribe
        self.chat_calls = []
        self.transcription_calls = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._chat_create))
        self.audio = SimpleNamespace(transcriptions=SimpleNamespace(create=self._transcribe))

    def chat_types(self):
        return [content_type_of(call["messages"][0]["content"]) for call in self.chat_calls]

    def _chat_create(self, **kwargs):
        self.chat_calls.append(kwargs)
        content_type = content_type_of(kwargs["messages"][0]["content"])
        if self.on_chat:
            self.on_chat(content_type)
        if content_type in self.fail:
            raise self.fail[content_type]
        message = SimpleNamespace(content=f"{content_type} output")
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    def _transcribe(self, **kwargs):
        self.transcription_calls.append(kwargs)
        if self.on_transcribe:
            self.on_transcribe()
        if self.transcription_error:
            raise self.transcription_error
        return SimpleNamespace(text=self.transcript_text)


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """Entorno limpio y determinista para `get_settings()` en cada test."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def sleeps(monkeypatch):
    """Registra las pausas entre tareas en vez de dormir."""
    calls = []
    monkeypatch.setattr(engine, "time", SimpleNamespace(sleep=calls.append))
    return calls


@pytest.fixture
def fake_client(monkeypatch):
    """`FakeOpenAI` instalado como cliente por defecto de engine y llm_client."""
    client = FakeOpenAI()
    monkeypatch.setattr(engine, "get_client", lambda: client)
    monkeypatch.setattr(llm_client, "get_client", lambda: client)
    return client


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "")
    get_settings.cache_clear()

from types import SimpleNamespace

import pytest
from openai import OpenAI

from sermon_ai_core import llm_client
from sermon_ai_core.domain_models import UploadedFile
from sermon_ai_core.errors import PayloadTooLargeError, TranscriptionError

from conftest import FakeOpenAI

MIB = 1024 * 1024


def _never_build_client():
    raise AssertionError("no debería construirse un cliente")


def test_26_mib_audio_is_rejected_before_any_call(monkeypatch):
    monkeypatch.setattr(llm_client, "get_client", _never_build_client)
    audio = UploadedFile("long.mp3", "audio/mpeg", b"\x00" * (26 * MIB))

    with pytest.raises(PayloadTooLargeError) as exc_info:
        llm_client.transcribe_audio(audio)

    assert str(exc_info.value) == "Audio file exceeds the 25MB size limit for transcription"
    assert isinstance(exc_info.value, TranscriptionError)


def test_exactly_25_mib_is_allowed():
    client = FakeOpenAI()
    audio = UploadedFile("edge.mp3", "audio/mpeg", b"\x00" * (25 * MIB))
    assert llm_client.transcribe_audio(audio, client=client) == "transcribed sermon"


def test_single_request_in_english_with_whisper():
    client = FakeOpenAI(transcript_text="  Text with spaces  ")
    audio = UploadedFile("sermon.m4a", "audio/mp4", b"abc")

    text = llm_client.transcribe_audio(audio, client=client)

    assert text == "  Text with spaces  "
    assert len(client.transcription_calls) == 1
    call = client.transcription_calls[0]
    assert call["model"] == "whisper-1"
    assert call["language"] == "en"
    assert call["file"] == ("sermon.m4a", b"abc", "audio/mp4")


def test_api_failure_is_wrapped():
    error = RuntimeError("connection reset")
    client = FakeOpenAI(transcription_error=error)

    with pytest.raises(TranscriptionError) as exc_info:
        llm_client.transcribe_audio(UploadedFile("a.mp3", "audio/mpeg", b"a"), client=client)

    assert str(exc_info.value) == "Transcription failed: connection reset"
    assert exc_info.value.__cause__ is error


def test_invalid_size_limit_setting_is_wrapped(monkeypatch):
    monkeypatch.setenv("MAX_AUDIO_BYTES", "lots")
    llm_client.get_settings.cache_clear()
    client = FakeOpenAI()

    with pytest.raises(TranscriptionError, match="^Transcription failed: ") as exc_info:
        llm_client.transcribe_audio(UploadedFile("a.mp3", "audio/mpeg", b"a"), client=client)

    assert isinstance(exc_info.value.__cause__, ValueError)
    assert client.transcription_calls == []


def test_missing_api_key_surfaces_as_transcription_error(no_api_key):
    with pytest.raises(TranscriptionError, match="OPENAI_API_KEY"):
        llm_client.transcribe_audio(UploadedFile("a.mp3", "audio/mpeg", b"a"))


def test_get_client_requires_api_key(no_api_key):
    with pytest.raises(RuntimeError):
        llm_client.get_client()


def test_get_client_builds_openai_client():
    assert isinstance(llm_client.get_client(), OpenAI)


def test_generate_text_returns_first_choice():
    client = FakeOpenAI()
    text = llm_client.generate_text(
        client,
        "You are an expert in homiletics. SERMON",
        temperature=0.7,
        max_tokens=1500,
    )
    assert text == "critique output"
    assert client.chat_calls[0]["max_tokens"] == 1500


def test_generate_text_handles_empty_content():
    message = SimpleNamespace(content=None)
    create = lambda **kwargs: SimpleNamespace(choices=[SimpleNamespace(message=message)])
    client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

    assert llm_client.generate_text(client, "prompt", temperature=0.7, max_tokens=10) == ""

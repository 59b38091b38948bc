from __future__ import annotations

import logging

from openai import OpenAI

from .config import get_settings
from .domain_models import UploadedFile
from .errors import PayloadTooLargeError, TranscriptionError

logger = logging.getLogger(__name__)


def get_client() -> OpenAI:
    settings = get_settings()
    if not settings.openai_api_key:
        raise RuntimeError("OPENAI_API_KEY no está configurada en el .env")
    return OpenAI(api_key=settings.openai_api_key)


def transcribe_audio(audio: UploadedFile, client: OpenAI | None = None) -> str:
    """
    Transcribe un audio subido usando el endpoint de transcriptions (Whisper).

    - El límite de tamaño se valida ANTES de construir el cliente, así que
      un audio demasiado grande nunca genera tráfico de red.
    - Una sola llamada, sin reintentos ni chunking. El texto vuelve tal cual.
    - Cualquier otra falla (configuración inválida, construcción del
      cliente, la llamada misma) se devuelve como `TranscriptionError`.
    """
    try:
        settings = get_settings()
        if audio.size > settings.max_audio_bytes:
            raise PayloadTooLargeError(audio.size, settings.max_audio_bytes)

        client = client or get_client()
        transcription = client.audio.transcriptions.create(
            file=(audio.filename, audio.data, audio.content_type),
            model=settings.openai_model_transcribe,
            language=settings.transcription_language,
        )
    except PayloadTooLargeError:
        raise
    except Exception as e:
        logger.error("Error transcribiendo %s: %s", audio.filename, e)
        raise TranscriptionError(f"Transcription failed: {e}") from e

    return transcription.text


def generate_text(
    client: OpenAI,
    prompt: str,
    *,
    temperature: float,
    max_tokens: int,
    model: str | None = None,
) -> str:
    """
    Una llamada a chat.completions con un único mensaje de usuario.
    Devuelve el contenido de la primera opción.
    """
    settings = get_settings()

    completion = client.chat.completions.create(
        model=model or settings.openai_model_text,
        messages=[{"role": "user", "content": prompt}],
        temperature=temperature,
        max_tokens=max_tokens,
    )

    return completion.choices[0].message.content or ""

from __future__ import annotations

"""
sermon_ai_core.media
====================

Extracción de texto desde un archivo subido (UploadedFile → str).

Despacha por media type declarado:

- text/plain          → lectura directa (UTF-8)
- application/pdf     → extracción simulada (placeholder)
- Word (.doc / .docx) → extracción simulada (placeholder)
- audio/*             → transcripción vía `llm_client.transcribe_audio`
- cualquier otro      → `UnsupportedTypeError`

Las extracciones de PDF/Word son stubs conocidos: quedan aisladas en
`extract_pdf_text` / `extract_word_text` para que un parser real las
reemplace sin tocar a los llamadores.

Este módulo no guarda estado; el estado de carga/error lo maneja
`TranscriptStore`.
"""

import logging
from typing import Optional

from openai import OpenAI

from .domain_models import UploadedFile
from .errors import UnsupportedTypeError
from .llm_client import transcribe_audio

logger = logging.getLogger(__name__)

TEXT_TYPES = {"text/plain"}
PDF_TYPES = {"application/pdf"}
WORD_TYPES = {
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}
AUDIO_PREFIX = "audio/"


def kind_from_media_type(media_type: str) -> Optional[str]:
    """
    Devuelve el tipo lógico a partir del media type.

    Retorna "text" | "pdf" | "word" | "audio", o None si no está soportado.
    """
    media_type = (media_type or "").lower()
    if media_type in TEXT_TYPES:
        return "text"
    if media_type in PDF_TYPES:
        return "pdf"
    if media_type in WORD_TYPES:
        return "word"
    if media_type.startswith(AUDIO_PREFIX):
        return "audio"
    return None


def read_text_file(upload: UploadedFile) -> str:
    # utf-8-sig descarta el BOM; bytes inválidos se reemplazan en vez de fallar
    return upload.data.decode("utf-8-sig", errors="replace")


def extract_pdf_text(upload: UploadedFile) -> str:
    return (
        f"Simulated PDF extraction from {upload.filename}\n\n"
        "This is placeholder text. In a real implementation, you would use a PDF "
        "parsing library to extract the actual content of the document."
    )


def extract_word_text(upload: UploadedFile) -> str:
    return (
        f"Simulated DOC/DOCX extraction from {upload.filename}\n\n"
        "This is placeholder text. In a real implementation, you would use a document "
        "parsing library to extract the actual content of the document."
    )


def extract_text(upload: UploadedFile, client: OpenAI | None = None) -> str:
    """
    Produce el texto plano de un archivo subido.

    Raises
    ------
    UnsupportedTypeError
        Si el media type no es texto, PDF, Word ni audio.
    TranscriptionError / PayloadTooLargeError
        Propagados desde la transcripción de audio.
    """
    kind = kind_from_media_type(upload.content_type)
    logger.info("Extrayendo texto de %s (%s → %s)", upload.filename, upload.content_type, kind)

    if kind == "text":
        return read_text_file(upload)

    if kind == "pdf":
        return extract_pdf_text(upload)

    if kind == "word":
        return extract_word_text(upload)

    if kind == "audio":
        return transcribe_audio(upload, client=client)

    raise UnsupportedTypeError(upload.content_type)

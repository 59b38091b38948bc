"""
Endpoint para extraer el texto de un sermón subido.

- POST /api/v1/transcripts: sube un archivo (texto, PDF, Word o audio) y
  devuelve el texto extraído. Los audios se transcriben con Whisper.
"""

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from sermon_ai_core.domain_models import UploadedFile
from sermon_ai_core.errors import (
    PayloadTooLargeError,
    TranscriptionError,
    UnsupportedTypeError,
)
from sermon_ai_core.transcript_store import TranscriptStore

from ..models.requests import TranscriptResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/transcripts", tags=["transcripts"])


@router.post("", response_model=TranscriptResponse)
def create_transcript(file: UploadFile = File(...)):
    """
    Extrae el texto de un archivo subido.

    Errores:
        415: media type no soportado
        413: audio por encima del límite de transcripción
        502: falló el servicio de transcripción
    """
    content = file.file.read()
    upload = UploadedFile(
        filename=file.filename or "upload",
        content_type=file.content_type or "",
        data=content,
    )

    store = TranscriptStore()
    try:
        text = store.extract_text(upload)
    except UnsupportedTypeError as e:
        raise HTTPException(status_code=415, detail=str(e)) from e
    except PayloadTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e)) from e
    except TranscriptionError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    store.process_transcript(text)
    logger.info("Texto extraído de %s: %d caracteres", upload.filename, len(text))

    return TranscriptResponse(
        filename=upload.filename,
        content_type=upload.content_type,
        raw_text=store.raw_text,
        processed_text=store.processed_text,
    )

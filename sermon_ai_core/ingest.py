from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Dict

from .domain_models import UploadedFile

"""
sermon_ai_core.ingest
=====================

Ingestión de archivos locales (path → UploadedFile).

Responsabilidad
----------------
- Leer un archivo del filesystem
- Inferir su media type a partir de la extensión
- Construir el `UploadedFile` que consumen `media` y los stores

NO hace:
---------
- Extracción de texto
- Transcripción
- Llamadas a LLM

La API HTTP no pasa por acá: ahí el media type lo declara el upload.
"""

# ============================================================
# Media types por extensión
# ============================================================

# `mimetypes` depende de la plataforma para varias de estas; las fijamos.
EXTRA_MEDIA_TYPES: Dict[str, str] = {
    ".txt": "text/plain",
    ".md": "text/plain",
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".m4a": "audio/mp4",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
}

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def guess_media_type(path: Path) -> str:
    """
    Devuelve el media type para `path`.

    Primero la tabla fija, después `mimetypes`. Si nada matchea,
    `application/octet-stream` (que `media.extract_text` rechaza).
    """
    ext = path.suffix.lower()
    if ext in EXTRA_MEDIA_TYPES:
        return EXTRA_MEDIA_TYPES[ext]
    mime, _ = mimetypes.guess_type(str(path))
    return mime or DEFAULT_MEDIA_TYPE


def load_upload(path: str | Path, content_type: str | None = None) -> UploadedFile:
    """
    Carga un archivo local como `UploadedFile`.

    Args:
        path: Ruta al archivo.
        content_type: Media type explícito; si no se pasa, se infiere.

    Raises:
        FileNotFoundError: si el archivo no existe.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"No se encontró el archivo: {file_path}")

    return UploadedFile(
        filename=file_path.name,
        content_type=content_type or guess_media_type(file_path),
        data=file_path.read_bytes(),
    )

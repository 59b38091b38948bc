"""
Estado observable de la transcripción.

Reemplaza el estado global de la UI por un objeto explícito que el llamador
crea y posee (uno por sesión / vista). Expone los mismos campos que la UI
observa: texto crudo, texto procesado, flag de carga y último error.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from openai import OpenAI

from . import media
from .domain_models import UploadedFile

logger = logging.getLogger(__name__)


@dataclass
class TranscriptStore:
    raw_text: str = ""
    processed_text: str = ""
    is_loading: bool = False
    error: Optional[str] = None

    def extract_text(self, upload: UploadedFile, client: OpenAI | None = None) -> str:
        """
        Extrae el texto de `upload` y lo guarda en `raw_text`.

        `is_loading` queda en True durante la llamada y se limpia siempre,
        haya éxito o error. Si falla, el mensaje queda en `error`, `raw_text`
        no se toca y la excepción se re-lanza.
        """
        self.is_loading = True
        self.error = None

        try:
            text = media.extract_text(upload, client=client)
            self.raw_text = text
            return text
        except Exception as e:
            logger.error("No se pudo extraer texto de %s: %s", upload.filename, e)
            self.error = str(e)
            raise
        finally:
            self.is_loading = False

    def process_transcript(self, text: str) -> str:
        # Por ahora sin procesamiento: el texto procesado es el crudo
        self.processed_text = text
        return text

    def reset(self) -> None:
        self.raw_text = ""
        self.processed_text = ""
        self.is_loading = False
        self.error = None

    def snapshot(self) -> Dict[str, Any]:
        return asdict(self)

"""
Excepciones del core.

Todas heredan de `SermonAIError` para que las capas de arriba (API, CLI)
puedan atraparlas juntas. Los mensajes son strings descriptivos pensados
para mostrarse tal cual al usuario.
"""

from __future__ import annotations


class SermonAIError(Exception):
    """Base de los errores del core."""


class UnsupportedTypeError(SermonAIError):
    """El media type del archivo subido no está soportado."""

    def __init__(self, media_type: str):
        self.media_type = media_type
        super().__init__(f"Unsupported file type: {media_type}")


class TranscriptionError(SermonAIError):
    """Falló la llamada al endpoint de speech-to-text."""


class PayloadTooLargeError(TranscriptionError):
    """El audio supera el límite de tamaño; se lanza antes de tocar la red."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"Audio file exceeds the {limit // (1024 * 1024)}MB size limit for transcription"
        )


class GenerationTaskError(SermonAIError):
    """
    Falló una tarea individual de generación.

    Nunca sale del generador: se convierte en la entrada de error del mapa
    de resultados para ese tipo de contenido.
    """

    def __init__(self, content_type: str, message: str):
        self.content_type = content_type
        super().__init__(message)


class BatchError(SermonAIError):
    """Falla a nivel de lote (fuera de cualquier tarea); se propaga al llamador."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class ContentType(str, Enum):
    """
    Tipos de contenido derivado que se pueden generar.

    El valor es la clave que viaja a la UI en el mapa de resultados.
    El orden de declaración es el orden de selección (y de ejecución
    en la política secuencial).
    """

    CRITIQUE = "critique"
    PERSPECTIVE_FEEDBACK = "perspectiveFeedback"
    BIBLE_STUDY_GUIDE = "bibleStudyGuide"
    KIDS_FOLLOW_ALONG = "kidsFollowAlong"


# tipo de contenido -> texto generado (o mensaje de error)
GenerationResults = Dict[str, str]


@dataclass
class SermonPrepOptions:
    """Salidas para preparar el sermón."""

    critique: bool = False
    perspective_feedback: bool = False


@dataclass
class SundayContentOptions:
    """Salidas para el domingo."""

    bible_study_guide: bool = False
    kids_follow_along: bool = False


@dataclass
class GenerationOptions:
    """
    Selección de contenidos a generar, agrupada como la muestra la UI.

    No se persiste: se arma de nuevo en cada request.
    """

    sermon_prep: SermonPrepOptions = field(default_factory=SermonPrepOptions)
    sunday_content: SundayContentOptions = field(default_factory=SundayContentOptions)

    def selected(self) -> List[ContentType]:
        """Tipos seleccionados, en orden de selección. Los flags apagados se omiten."""
        flags = [
            (ContentType.CRITIQUE, self.sermon_prep.critique),
            (ContentType.PERSPECTIVE_FEEDBACK, self.sermon_prep.perspective_feedback),
            (ContentType.BIBLE_STUDY_GUIDE, self.sunday_content.bible_study_guide),
            (ContentType.KIDS_FOLLOW_ALONG, self.sunday_content.kids_follow_along),
        ]
        return [content_type for content_type, enabled in flags if enabled]

    @classmethod
    def all(cls) -> "GenerationOptions":
        return cls(
            sermon_prep=SermonPrepOptions(critique=True, perspective_feedback=True),
            sunday_content=SundayContentOptions(bible_study_guide=True, kids_follow_along=True),
        )

    @classmethod
    def from_types(cls, types: List[str]) -> "GenerationOptions":
        """Arma la selección a partir de claves de `ContentType` (ej: desde la CLI)."""
        wanted = {ContentType(t) for t in types}
        return cls(
            sermon_prep=SermonPrepOptions(
                critique=ContentType.CRITIQUE in wanted,
                perspective_feedback=ContentType.PERSPECTIVE_FEEDBACK in wanted,
            ),
            sunday_content=SundayContentOptions(
                bible_study_guide=ContentType.BIBLE_STUDY_GUIDE in wanted,
                kids_follow_along=ContentType.KIDS_FOLLOW_ALONG in wanted,
            ),
        )


@dataclass
class UploadedFile:
    """
    Archivo subido por el usuario, ya en memoria.

    `content_type` es el media type declarado por quien sube el archivo
    (no se inspeccionan los bytes).
    """

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

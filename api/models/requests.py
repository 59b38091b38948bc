"""
Modelos de request/response para la API.

Estos modelos definen la estructura esperada de los requests HTTP,
validando tipos y valores antes de pasarlos al core. Las opciones usan
las mismas claves camelCase que manda la UI.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from sermon_ai_core.domain_models import (
    GenerationOptions,
    SermonPrepOptions,
    SundayContentOptions,
)


class GenerationPolicy(str, Enum):
    """Política de ejecución del lote."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


class SermonPrepModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    critique: bool = False
    perspective_feedback: bool = Field(default=False, alias="perspectiveFeedback")


class SundayContentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bible_study_guide: bool = Field(default=False, alias="bibleStudyGuide")
    kids_follow_along: bool = Field(default=False, alias="kidsFollowAlong")


class GenerationOptionsModel(BaseModel):
    """Selección de contenidos, agrupada como en la UI."""

    model_config = ConfigDict(populate_by_name=True)

    sermon_prep: SermonPrepModel = Field(default_factory=SermonPrepModel, alias="sermonPrep")
    sunday_content: SundayContentModel = Field(
        default_factory=SundayContentModel, alias="sundayContent"
    )

    def to_domain(self) -> GenerationOptions:
        return GenerationOptions(
            sermon_prep=SermonPrepOptions(
                critique=self.sermon_prep.critique,
                perspective_feedback=self.sermon_prep.perspective_feedback,
            ),
            sunday_content=SundayContentOptions(
                bible_study_guide=self.sunday_content.bible_study_guide,
                kids_follow_along=self.sunday_content.kids_follow_along,
            ),
        )


class ContentRunRequest(BaseModel):
    """
    Request para generar contenido a partir de una transcripción.

    Si `policy` no viene, se usa `settings.generation_policy`.
    """

    transcript: str = Field(..., min_length=1, description="Transcripción del sermón")
    options: GenerationOptionsModel = Field(default_factory=GenerationOptionsModel)
    policy: Optional[GenerationPolicy] = Field(
        default=None, description="sequential | parallel"
    )


class ContentRunResponse(BaseModel):
    """Resultado de un lote de generación."""

    status: str = Field(
        ...,
        description="Siempre completed; una falla de lote responde 502 en vez de este modelo",
    )
    results: Dict[str, str] = Field(
        default_factory=dict,
        description="Tipo de contenido → texto generado o mensaje de error",
    )
    pending_items: List[str] = Field(default_factory=list)
    error: Optional[str] = Field(default=None, description="Error a nivel de lote")


class TranscriptResponse(BaseModel):
    """Texto extraído de un archivo subido."""

    filename: str = Field(..., description="Nombre del archivo subido")
    content_type: str = Field(..., description="Media type declarado")
    raw_text: str = Field(..., description="Texto extraído / transcripto")
    processed_text: str = Field(..., description="Texto procesado (hoy igual al crudo)")

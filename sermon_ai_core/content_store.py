"""
Estado observable de un lote de generación.

`ContentStore` no genera nada por sí mismo: envuelve una llamada a
`engine.generate_content` y mantiene los campos que la UI observa
(resultados, si hay un lote en curso, último error y tareas pendientes).

No está pensado para lotes concurrentes: arrancar un segundo lote antes de
que termine el primero pisa `results` / `is_generating` sin encolar.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from openai import OpenAI

from . import engine
from .config import get_settings
from .domain_models import GenerationOptions, GenerationResults
from .errors import BatchError

logger = logging.getLogger(__name__)


@dataclass
class ContentStore:
    results: GenerationResults = field(default_factory=dict)
    is_generating: bool = False
    error: Optional[str] = None
    pending_items: List[str] = field(default_factory=list)

    # política de ejecución; None → settings.generation_policy
    policy: Optional[str] = None
    # se llama después de cada update_result (ej: para refrescar una vista)
    on_update: Optional[engine.ProgressCallback] = field(default=None, repr=False)

    def resolved_policy(self) -> str:
        return (self.policy or get_settings().generation_policy).lower()

    def start_batch(
        self,
        transcript: str,
        options: GenerationOptions,
        *,
        client: OpenAI | None = None,
        delay_s: float | None = None,
    ) -> GenerationResults:
        """
        Corre un lote completo y actualiza el estado en cada transición.

        - En la política secuencial, `pending_items` arranca con los tipos
          seleccionados y cada resultado parcial entra por `update_result`.
        - Al terminar: `results` con el mapa final.
        - Ante `BatchError`: el mensaje queda en `error`, `results` conserva
          lo parcial y la excepción se re-lanza.
        - En ambos casos `pending_items` queda vacío e `is_generating` en False.
        """
        policy = self.resolved_policy()

        self.is_generating = True
        self.error = None
        self.results = {}
        self.pending_items = []

        on_result = None
        if policy == engine.SEQUENTIAL:
            self.pending_items = [content_type.value for content_type in options.selected()]
            on_result = self.update_result

        try:
            results = engine.generate_content(
                transcript,
                options,
                policy=policy,
                on_result=on_result,
                client=client,
                delay_s=delay_s,
            )
            self.results = results
            return results
        except BatchError as e:
            logger.error("Falló el lote de generación: %s", e)
            self.error = str(e)
            raise
        finally:
            # el lote terminó (bien o mal): no queda nada pendiente
            self.pending_items = []
            self.is_generating = False

    def update_result(self, content_type: str, value: str) -> None:
        self.results = {**self.results, content_type: value}
        if content_type in self.pending_items:
            self.pending_items.remove(content_type)
        if self.on_update is not None:
            self.on_update(content_type, value)

    def reset(self) -> None:
        self.results = {}
        self.is_generating = False
        self.error = None
        self.pending_items = []

    def snapshot(self) -> Dict[str, Any]:
        return {
            "results": dict(self.results),
            "is_generating": self.is_generating,
            "error": self.error,
            "pending_items": list(self.pending_items),
        }

from __future__ import annotations

"""
sermon_ai_core.engine
=====================

Orquestador de la generación de contenido derivado de un sermón.

Dada una transcripción y una selección de opciones, arma una tarea por cada
tipo de contenido seleccionado (crítica, feedback de perspectivas, guía de
estudio bíblico, hoja para niños) y hace una llamada a chat.completions por
tarea con su template fijo.

Políticas de ejecución
----------------------
- "sequential" (default): una tarea por vez, en orden de selección, con una
  pausa fija entre tareas consecutivas para bajar la presión de rate limits.
  Después de cada tarea se invoca `on_result(tipo, resultado)` para que la
  UI muestre el progreso parcial.
- "parallel": todas las tareas en simultáneo (ThreadPoolExecutor). Devuelve
  cuando todas terminaron; el orden del mapa es el de finalización y no hay
  callback de progreso.

Fallas
------
- Una tarea que falla NO corta el lote: su entrada pasa a ser
  "Error generating content: <mensaje>".
- Una falla fuera de las tareas (construir el cliente, política desconocida,
  un callback que explota) se lanza como `BatchError`.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterator, Optional, Tuple

from openai import OpenAI

from .config import get_settings
from .domain_models import ContentType, GenerationOptions, GenerationResults
from .errors import BatchError, GenerationTaskError
from .llm_client import generate_text, get_client
from .prompts import build_prompt, get_content_spec

logger = logging.getLogger(__name__)

SEQUENTIAL = "sequential"
PARALLEL = "parallel"
POLICIES = (SEQUENTIAL, PARALLEL)

TASK_ERROR_PREFIX = "Error generating content: "

ProgressCallback = Callable[[str, str], None]


def _noop(content_type: str, result: str) -> None:
    return None


def _resolve_client(client: Optional[OpenAI]) -> OpenAI:
    if client is not None:
        return client
    try:
        return get_client()
    except Exception as e:
        raise BatchError(f"Content generation failed: {e}") from e


def run_task(client: OpenAI, content_type: ContentType, transcript: str) -> str:
    """
    Genera un tipo de contenido.

    Raises:
        GenerationTaskError: envolviendo cualquier falla de la llamada.
    """
    spec = get_content_spec(content_type)
    try:
        return generate_text(
            client,
            build_prompt(content_type, transcript),
            temperature=spec.temperature,
            max_tokens=spec.max_tokens,
        )
    except Exception as e:
        raise GenerationTaskError(content_type.value, str(e)) from e


def _settle(client: OpenAI, content_type: ContentType, transcript: str) -> str:
    """Corre una tarea y devuelve su texto, o el mensaje de error si falló."""
    logger.info("Generando %s...", content_type.value)
    try:
        result = run_task(client, content_type, transcript)
    except GenerationTaskError as e:
        logger.error("Error generando %s: %s", e.content_type, e)
        return f"{TASK_ERROR_PREFIX}{e}"
    logger.info("Completado %s", content_type.value)
    return result


def iter_content(
    transcript: str,
    options: GenerationOptions,
    *,
    client: OpenAI | None = None,
    delay_s: float | None = None,
) -> Iterator[Tuple[str, str]]:
    """
    Política secuencial como generador: produce `(tipo, resultado)` a medida
    que cada tarea termina, en orden de selección.

    Sin opciones seleccionadas no se construye cliente ni se llama a la API.
    """
    tasks = options.selected()
    if not tasks:
        return

    delay = get_settings().inter_task_delay_s if delay_s is None else delay_s
    client = _resolve_client(client)

    for index, content_type in enumerate(tasks):
        if index > 0 and delay > 0:
            time.sleep(delay)
        yield content_type.value, _settle(client, content_type, transcript)


def _generate_parallel(
    transcript: str,
    options: GenerationOptions,
    client: OpenAI | None,
) -> GenerationResults:
    tasks = options.selected()
    if not tasks:
        return {}

    client = _resolve_client(client)
    results: GenerationResults = {}

    with ThreadPoolExecutor(max_workers=len(tasks)) as executor:
        futures = {
            executor.submit(_settle, client, content_type, transcript): content_type
            for content_type in tasks
        }
        for future in as_completed(futures):
            results[futures[future].value] = future.result()

    return results


def generate_content(
    transcript: str,
    options: GenerationOptions,
    *,
    policy: str | None = None,
    on_result: ProgressCallback | None = None,
    client: OpenAI | None = None,
    delay_s: float | None = None,
) -> GenerationResults:
    """
    Genera todo el contenido seleccionado para una transcripción.

    Args:
        transcript: Texto del sermón.
        options: Selección de tipos a generar. Los no seleccionados no
            aparecen en el resultado.
        policy: "sequential" o "parallel". Default: `settings.generation_policy`.
        on_result: Callback `(tipo, resultado)` tras cada tarea (solo secuencial).
        client: Cliente de OpenAI; si no se pasa se construye desde settings.
        delay_s: Pausa entre tareas (solo secuencial). Default: settings.

    Returns:
        Mapa tipo de contenido → texto generado o mensaje de error.

    Raises:
        BatchError: ante cualquier falla que no pertenezca a una tarea.
    """
    policy = (policy or get_settings().generation_policy).lower()
    if policy not in POLICIES:
        raise BatchError(f"Content generation failed: unknown generation policy '{policy}'")

    if policy == PARALLEL:
        return _generate_parallel(transcript, options, client)

    callback = on_result or _noop
    results: GenerationResults = {}

    try:
        for content_type, value in iter_content(transcript, options, client=client, delay_s=delay_s):
            results[content_type] = value
            callback(content_type, value)
    except BatchError:
        raise
    except Exception as e:
        logger.exception("Error generando contenido")
        raise BatchError(f"Content generation failed: {e}") from e

    return results

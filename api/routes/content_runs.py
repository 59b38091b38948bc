"""
Endpoints para generar contenido derivado de un sermón.

- POST /api/v1/content-runs: corre un lote completo y devuelve el mapa final.
- POST /api/v1/content-runs/stream: corre un lote secuencial y emite cada
  resultado como Server-Sent Event apenas está listo.
"""

import json
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from sermon_ai_core.content_store import ContentStore
from sermon_ai_core.domain_models import GenerationOptions
from sermon_ai_core.engine import iter_content
from sermon_ai_core.errors import BatchError

from ..models.requests import ContentRunRequest, ContentRunResponse, GenerationPolicy

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/content-runs", tags=["content-runs"])


@router.post("", response_model=ContentRunResponse)
def create_content_run(request: ContentRunRequest):
    """
    Genera el contenido seleccionado para una transcripción.

    Las fallas de tareas individuales vuelven dentro de `results` como
    "Error generating content: ..."; solo una falla de lote devuelve 502.
    """
    policy = request.policy.value if request.policy else None
    store = ContentStore(policy=policy)

    try:
        store.start_batch(request.transcript, request.options.to_domain())
    except BatchError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e

    return ContentRunResponse(
        status="completed",
        results=store.results,
        pending_items=store.pending_items,
        error=store.error,
    )


def _event_stream(transcript: str, options: GenerationOptions):
    try:
        for content_type, value in iter_content(transcript, options):
            payload = json.dumps({"type": content_type, "result": value})
            yield f"data: {payload}\n\n"
    except BatchError as e:
        logger.error("Falló el lote en streaming: %s", e)
        yield f"event: error\ndata: {json.dumps({'error': str(e)})}\n\n"
    yield "data: [DONE]\n\n"


@router.post("/stream")
def stream_content_run(request: ContentRunRequest):
    """
    Igual que `create_content_run` pero siempre secuencial y con progreso.

    Cada tarea terminada produce `data: {"type": ..., "result": ...}`; el
    stream cierra con `data: [DONE]`. Pedir `policy: parallel` devuelve 422.
    """
    if request.policy is GenerationPolicy.PARALLEL:
        raise HTTPException(
            status_code=422,
            detail="El streaming solo soporta la política sequential",
        )

    response = StreamingResponse(
        _event_stream(request.transcript, request.options.to_domain()),
        media_type="text/event-stream",
    )
    response.headers["Cache-Control"] = "no-cache"
    response.headers["X-Accel-Buffering"] = "no"
    return response

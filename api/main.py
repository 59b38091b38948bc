"""
API HTTP de sermon-ai-core.

Expone dos recursos sobre el core (sermon_ai_core):
- /api/v1/transcripts: archivo subido → texto del sermón
- /api/v1/content-runs: texto del sermón → contenido derivado

Las rutas que llaman a OpenAI son funciones sync: FastAPI las corre en su
threadpool y el event loop sigue atendiendo otros requests.

Uso:
    uvicorn api.main:app --reload --port 8000
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sermon_ai_core.config import get_settings

from .routes import content_runs, transcripts

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(
    title="Sermon AI Core API",
    description="Crítica, feedback y material del domingo a partir de sermones",
    version="0.1.0",
)

cors_origins = _cors_origins()
logger.info("CORS origins: %s", cors_origins)

# La UI corre en otro origen
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(transcripts.router)
app.include_router(content_runs.router)


@app.get("/")
async def root():
    return {"status": "ok", "service": "sermon-ai-core-api"}


@app.get("/health")
async def health():
    """Estado del servicio y política de generación por defecto."""
    return {
        "status": "ok",
        "service": "sermon-ai-core-api",
        "version": "0.1.0",
        "generation_policy": get_settings().generation_policy,
    }

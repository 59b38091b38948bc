# sermon_ai_core/config.py
from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

"""
sermon_ai_core.config
=====================

Gestión centralizada de configuración de la aplicación.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para desarrollo local.
- Si falta la API key NO se falla acá: el error aparece cuando alguien
  construye el cliente de OpenAI (`llm_client.get_client`).
- En tests, usar `get_settings.cache_clear()` después de tocar el entorno.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()

# Límite del endpoint de transcripción (25 MiB)
DEFAULT_MAX_AUDIO_BYTES = 25 * 1024 * 1024


@dataclass
class Settings:
    """
    Contenedor tipado de configuración global de la aplicación.

    Attributes
    ----------
    openai_api_key:
        API key de OpenAI. Se usa tanto para chat como para transcripción.
    openai_model_text:
        Modelo de chat para generar el contenido derivado del sermón.
    openai_model_transcribe:
        Modelo de speech-to-text (Whisper).
    transcription_language:
        Idioma que se le indica al endpoint de transcripción.
    max_audio_bytes:
        Tamaño máximo de audio aceptado antes de llamar a la API.
    generation_policy:
        "sequential" (default, con progreso parcial) o "parallel".
    inter_task_delay_s:
        Pausa entre tareas consecutivas en la política secuencial.
    output_dir:
        Directorio donde la CLI escribe los resultados.
    log_level:
        Nivel de logging para los entrypoints (CLI / API).
    """

    # OpenAI
    openai_api_key: str
    openai_model_text: str

    # Transcripción
    openai_model_transcribe: str
    transcription_language: str = "en"
    max_audio_bytes: int = DEFAULT_MAX_AUDIO_BYTES

    # Generación
    generation_policy: str = "sequential"
    inter_task_delay_s: float = 1.0

    # I/O
    output_dir: str = "output"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - OPENAI_API_KEY
    - OPENAI_MODEL_TEXT (default: "gpt-4o")
    - OPENAI_MODEL_TRANSCRIBE (default: "whisper-1")
    - TRANSCRIPTION_LANGUAGE (default: "en")
    - MAX_AUDIO_BYTES (default: 25 MiB)
    - GENERATION_POLICY (default: "sequential")
    - INTER_TASK_DELAY_S (default: 1.0)
    - OUTPUT_DIR (default: "output")
    - LOG_LEVEL (default: "INFO")
    """
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        openai_model_text=os.getenv("OPENAI_MODEL_TEXT", "gpt-4o"),

        # Audio
        openai_model_transcribe=os.getenv("OPENAI_MODEL_TRANSCRIBE", "whisper-1"),
        transcription_language=os.getenv("TRANSCRIPTION_LANGUAGE", "en"),
        max_audio_bytes=int(os.getenv("MAX_AUDIO_BYTES", str(DEFAULT_MAX_AUDIO_BYTES))),

        generation_policy=os.getenv("GENERATION_POLICY", "sequential").strip().lower(),
        inter_task_delay_s=float(os.getenv("INTER_TASK_DELAY_S", "1.0")),

        output_dir=os.getenv("OUTPUT_DIR", "output"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

"""Rutas de la API."""

from . import content_runs, transcripts

__all__ = ["content_runs", "transcripts"]

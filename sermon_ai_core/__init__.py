"""
Core de sermon-ai.

Este paquete contiene la lógica reutilizable detrás de la UI:
- Ingest / media (archivo subido → texto, incluida la transcripción de audio)
- LLM client (comunicación con OpenAI)
- Engine (generación del contenido derivado del sermón)
- Stores (estado observable de transcripción y de generación)
"""

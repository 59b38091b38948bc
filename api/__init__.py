"""
API HTTP para sermon-ai-core.

Esta capa expone endpoints REST que usan el core interno (sermon_ai_core)
para extraer transcripciones y generar contenido derivado.

La API está diseñada para ser consumida por:
- UI web
- Scripts de automatización
"""

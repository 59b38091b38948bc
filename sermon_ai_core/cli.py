"""
sermon_ai_core.cli
==================

Punto de entrada de línea de comandos (`sermon-ai`) para correr el flujo
completo sobre un archivo local:

1) Cargar el archivo (texto, PDF, Word o audio).
2) Extraer el texto (transcribiendo si es audio).
3) Generar el contenido seleccionado, mostrando cada resultado a medida
   que llega.
4) Escribir la transcripción y un Markdown por contenido en `output_dir`.

Ejemplo
-------
    sermon-ai input/sermon.mp3 --critique --kids-follow-along
    sermon-ai input/sermon.txt --all --policy parallel -o output/domingo
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_settings
from .content_store import ContentStore
from .domain_models import ContentType, GenerationOptions
from .engine import POLICIES
from .errors import SermonAIError
from .ingest import load_upload
from .transcript_store import TranscriptStore

FLAG_TO_TYPE = {
    "critique": ContentType.CRITIQUE,
    "perspective_feedback": ContentType.PERSPECTIVE_FEEDBACK,
    "bible_study_guide": ContentType.BIBLE_STUDY_GUIDE,
    "kids_follow_along": ContentType.KIDS_FOLLOW_ALONG,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sermon-ai",
        description="Genera crítica, feedback y material del domingo a partir de un sermón.",
    )
    parser.add_argument("input", help="Archivo del sermón (.txt, .pdf, .doc/.docx o audio)")

    group = parser.add_argument_group("contenido a generar")
    group.add_argument("--critique", action="store_true", help="Crítica homilética")
    group.add_argument("--perspective-feedback", action="store_true", help="Feedback desde distintas audiencias")
    group.add_argument("--bible-study-guide", action="store_true", help="Guía para líderes de estudio bíblico")
    group.add_argument("--kids-follow-along", action="store_true", help="Hoja de actividades para niños")
    group.add_argument("--all", action="store_true", help="Todo lo anterior")

    parser.add_argument("--policy", choices=POLICIES, default=None, help="Política de ejecución")
    parser.add_argument("-o", "--output-dir", default=None, help="Directorio de salida")
    parser.add_argument(
        "--transcript-only",
        action="store_true",
        help="Solo extraer/transcribir, sin generar contenido",
    )
    parser.add_argument("--content-type", default=None, help="Media type explícito del archivo")
    return parser


def options_from_args(args: argparse.Namespace) -> GenerationOptions:
    if args.all:
        return GenerationOptions.all()
    selected = [ct.value for flag, ct in FLAG_TO_TYPE.items() if getattr(args, flag)]
    return GenerationOptions.from_types(selected)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Ejecuta una corrida completa y devuelve el exit code.

    - 0: todo ok (aunque alguna tarea individual haya fallado)
    - 1: falló la extracción o el lote
    - 2: no se pidió ningún contenido
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options = options_from_args(args)
    if not options.selected() and not args.transcript_only:
        print("⚠️ No se seleccionó ningún contenido. Usá --all o alguna de las opciones.")
        return 2

    output_dir = Path(args.output_dir or settings.output_dir)

    # 1) Cargar + extraer texto
    transcript_store = TranscriptStore()
    try:
        upload = load_upload(args.input, content_type=args.content_type)
        print(f"📄 Procesando {upload.filename} ({upload.content_type}, {upload.size} bytes)")
        text = transcript_store.extract_text(upload)
    except (FileNotFoundError, SermonAIError) as e:
        print(f"❌ {e}")
        return 1

    transcript = transcript_store.process_transcript(text)

    output_dir.mkdir(parents=True, exist_ok=True)
    transcript_path = output_dir / "transcript.txt"
    transcript_path.write_text(transcript, encoding="utf-8")
    print(f"✅ Transcripción guardada en: {transcript_path.resolve()}")

    if args.transcript_only:
        return 0

    # 2) Generar contenido
    content_store = ContentStore(policy=args.policy)

    def show_progress(content_type: str, value: str) -> None:
        print(f"🧩 {content_type} listo ({len(content_store.pending_items)} pendientes)")

    content_store.on_update = show_progress

    print(f"🤖 Generando: {', '.join(ct.value for ct in options.selected())}")
    try:
        results = content_store.start_batch(transcript, options)
    except SermonAIError as e:
        print(f"❌ {e}")
        return 1

    # 3) Persistir outputs
    for content_type, value in results.items():
        md_path = output_dir / f"{content_type}.md"
        md_path.write_text(value, encoding="utf-8")
        print(f"✅ {content_type} → {md_path.resolve()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

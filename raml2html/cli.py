"""
raml2html.cli
=============

Punto de entrada de línea de comandos:

    raml2html api.raml -o api.html
    raml2html -i https://example.com/api.raml -t main.jinja2 -p ./templates

Flujo:
1) Leer configuración de entorno (log level, templates por defecto).
2) Armar la configuración de render por defecto (o con el template indicado).
3) Ejecutar `render` y escribir el HTML (archivo o stdout).

Cualquier error se informa por stderr y el proceso termina con código 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import get_settings
from .defaults import get_default_config
from .engine import render
from .export import write_html

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raml2html",
        description="Genera documentación HTML a partir de un archivo RAML.",
    )
    parser.add_argument("source", nargs="?", help="Archivo RAML o URL")
    parser.add_argument("-i", "--input", dest="input", help="Archivo RAML o URL (alternativa al posicional)")
    parser.add_argument("-o", "--output", help="Archivo HTML de salida (por defecto: stdout)")
    parser.add_argument("-t", "--template", help="Template principal, relativo a --templates-path")
    parser.add_argument("-p", "--templates-path", help="Directorio de templates")
    parser.add_argument("--no-minify", action="store_true", help="No minificar el HTML generado")
    parser.add_argument("-v", "--verbose", action="store_true", help="Logging en nivel DEBUG")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Ejecuta el CLI y devuelve el código de salida.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()

    log_level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    source = args.input or args.source
    if not source:
        parser.error("falta el archivo RAML de entrada (posicional o -i/--input)")

    templates_path = args.templates_path or settings.templates_path or None
    config = get_default_config(args.template, templates_path)
    if args.no_minify:
        config.post_process_html = None

    try:
        html = render(source, config)
    except Exception as e:
        logger.debug("Falló el render", exc_info=True)
        print(f"❌ No se pudo generar la documentación: {e}", file=sys.stderr)
        return 1

    if args.output:
        out = write_html(html, Path(args.output))
        print(f"✅ Documentación generada en: {out.resolve()}", file=sys.stderr)
    else:
        sys.stdout.write(html)

    return 0


if __name__ == "__main__":
    sys.exit(main())

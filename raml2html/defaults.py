"""
Configuración por defecto: template Jinja2 incluido + minificación htmlmin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from .engine import RenderConfig
from .export import minify_html
from .renderer import render_html

PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_TEMPLATE = "templates/template.jinja2"


def get_default_config(main_template: str | None = None, templates_path: str | Path | None = None) -> RenderConfig:
    """
    Devuelve un `RenderConfig` listo para usar.

    Args:
        main_template:
            Nombre del template principal, relativo a `templates_path`.
            Si se omite se usa el template incluido en el paquete y
            `templates_path` pasa a ser el directorio del paquete (no el
            directorio de trabajo, que puede ser cualquiera).
        templates_path:
            Directorio donde Jinja2 busca los templates. Por defecto, el
            directorio de trabajo.
    """
    if not main_template:
        main_template = DEFAULT_TEMPLATE
        templates_path = PACKAGE_DIR

    search_path = Path(templates_path) if templates_path else Path.cwd()

    def process_raml_obj(raml_obj: Dict[str, Any]) -> str:
        return render_html(raml_obj, main_template, search_path)

    return RenderConfig(
        process_raml_obj=process_raml_obj,
        post_process_html=minify_html,
    )

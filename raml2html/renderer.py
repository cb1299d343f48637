"""
Renderer HTML por defecto (objeto RAML → HTML) usando Jinja2.

Cada render crea su propio `Environment`: no se cachea entre corridas, así
un registro (extensiones, filtros) nunca queda de una corrida anterior.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader

from . import markdown_ext
from .helpers import inject_helpers
from .schemas import expand_json_schemas

logger = logging.getLogger(__name__)

# Jinja2 escapa `"` como `&#34;`; se normalizan ambas formas
_QUOTE_ENTITIES = ("&quot;", "&#34;")


def create_environment(templates_path: str | Path) -> Environment:
    """
    Crea el entorno Jinja2 sobre `templates_path`, sin auto-reload.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_path)),
        autoescape=True,
        auto_reload=False,
    )
    markdown_ext.register(env, markdown_ext.create_markdown_to_html())
    return env


def render_template(env: Environment, template_name: str, data: Dict[str, Any]) -> str:
    return env.get_template(template_name).render(data)


def unescape_quotes(html: str) -> str:
    for entity in _QUOTE_ENTITIES:
        html = html.replace(entity, '"')
    return html


def render_html(raml_obj: Dict[str, Any], main_template: str, templates_path: str | Path) -> str:
    """
    Renderiza el objeto RAML con el template principal.

    Pasos:
    1) Entorno Jinja2 + adaptador Markdown.
    2) Inyecta `securitySchemeWithName` y `renderSecuredBy`.
    3) Expande los JSON schemas (`$ref`).
    4) Renderiza `main_template`.
    5) Restaura las comillas dobles escapadas.

    Raises:
        jinja2.TemplateError: si el template no existe o tiene errores.
    """
    env = create_environment(templates_path)

    inject_helpers(raml_obj)
    raml_obj = expand_json_schemas(raml_obj)

    logger.debug("Renderizando %s desde %s", main_template, templates_path)
    html = render_template(env, main_template, raml_obj)

    # TODO: distinguir comillas escapadas que vienen de datos del usuario
    # Los nombres de esquemas y scopes del RAML se confían: `renderSecuredBy` no los escapa
    # y los templates lo insertan con `| safe`.
    return unescape_quotes(html)

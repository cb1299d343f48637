"""
Adaptador de Markdown para el entorno Jinja2.

Registra en el entorno:

- un tag de bloque `{% markdown %}...{% endmarkdown %}`
- un filtro `markdown` (`{{ description | markdown }}`)

Ambos delegan en la función `markdown_to_html` que se pase a `register()`.
La función por defecto (`create_markdown_to_html`) usa mistune y renderiza
las tablas con la clase `table` de Bootstrap.
"""

from __future__ import annotations

import textwrap
from typing import Any, Callable

import mistune
from jinja2 import Environment, nodes
from jinja2.ext import Extension
from markupsafe import Markup

MarkdownToHtml = Callable[[str], str]


def _as_text(value: Any) -> str:
    # YAML puede dar números o booleanos como descripción
    return "" if value is None else str(value)


class BootstrapTableRenderer(mistune.HTMLRenderer):
    """Renderer HTML de mistune que emite `<table class="table">`."""

    def table(self, text: str) -> str:
        return '<table class="table">\n' + text + "</table>\n"


def create_markdown_to_html() -> MarkdownToHtml:
    """
    Construye la función markdown → HTML por defecto.

    Sin escape de HTML embebido: las descripciones RAML suelen traer HTML.
    """
    md = mistune.create_markdown(
        renderer=BootstrapTableRenderer(escape=False),
        plugins=["table"],
    )
    return lambda text: md(_as_text(text))


class MarkdownExtension(Extension):
    """Tag `{% markdown %}` para Jinja2."""

    tags = {"markdown"}

    def __init__(self, environment: Environment) -> None:
        super().__init__(environment)
        environment.extend(markdown_to_html=None)

    def parse(self, parser):
        lineno = next(parser.stream).lineno
        body = parser.parse_statements(("name:endmarkdown",), drop_needle=True)
        return nodes.CallBlock(self.call_method("_render", []), [], [], body).set_lineno(lineno)

    def _render(self, caller) -> Markup:
        # El contenido suele venir indentado dentro del template
        return Markup(self.environment.markdown_to_html(textwrap.dedent(caller())))


def register(env: Environment, markdown_to_html: MarkdownToHtml) -> Environment:
    """
    Registra el tag y el filtro `markdown` en `env`.

    Args:
        env: Entorno Jinja2 recién creado.
        markdown_to_html: Función que convierte texto Markdown a HTML.

    Returns:
        El mismo entorno (para encadenar).
    """
    env.add_extension(MarkdownExtension)
    env.markdown_to_html = markdown_to_html
    env.filters["markdown"] = lambda text: Markup(markdown_to_html(_as_text(text)))
    return env

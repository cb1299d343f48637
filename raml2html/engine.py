from __future__ import annotations

"""
raml2html.engine
================

Orquestador del pipeline de documentación RAML.

Flujo (secuencial, sin reintentos):

    fuente ──parse──▶ objeto RAML ──process_raml_obj──▶ HTML ──post_process_html──▶ HTML final

- Si `process_raml_obj` no está configurado, se devuelve el objeto RAML
  (con `config` adjunta) sin renderizar.
- Si `post_process_html` no está configurado, se devuelve la salida del
  renderer tal cual.
- Cualquier excepción (parser, renderer, post-proceso) se propaga sin
  transformarse: el primer error corta el pipeline.

Este módulo es una librería. El CLI está en `raml2html.cli`; `python -m raml2html`
solo imprime un mensaje guía (ver `raml2html.__main__`).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from . import __version__, raml_parser
from .core.abstractions import HtmlPostProcessor, RamlProcessor

logger = logging.getLogger(__name__)

LIBRARY_ONLY_MESSAGE = (
    "Este módulo está pensado para usarse como librería. "
    "Si buscás un CLI, probablemente quieras ejecutar `raml2html`."
)


@dataclass
class RenderConfig:
    """
    Configuración de una corrida de `render`.

    Attributes
    ----------
    process_raml_obj:
        Renderer del objeto RAML. Si es None, `render` devuelve el objeto
        RAML sin renderizar.
    post_process_html:
        Post-proceso de la salida del renderer. Si es None, la salida se
        devuelve tal cual. Solo se usa si hay `process_raml_obj`.
    raml2html_version:
        Versión del paquete; la completa `render` antes de usar la config.
    """

    process_raml_obj: Optional[RamlProcessor] = None
    post_process_html: Optional[HtmlPostProcessor] = None
    raml2html_version: Optional[str] = None


def render(source: Any, config: RenderConfig | None = None) -> str | Dict[str, Any]:
    """
    Parsea `source` y lo pasa por las etapas configuradas en `config`.

    Args:
        source:
            Ruta a un archivo RAML, URL, texto RAML crudo u objeto ya parseado.
        config:
            Etapas a ejecutar. Si es None se usa un `RenderConfig()` vacío.
            Se modifica: se le asigna `raml2html_version`.

    Returns:
        La salida del post-proceso, la del renderer, o el objeto RAML
        (con la clave `config`) si no hay renderer.
    """
    config = config or RenderConfig()
    config.raml2html_version = __version__

    raml_obj = raml_parser.parse(source)
    raml_obj["config"] = config

    if config.process_raml_obj is None:
        logger.debug("Sin process_raml_obj: se devuelve el objeto RAML")
        return raml_obj

    html = config.process_raml_obj(raml_obj)

    if config.post_process_html is None:
        return html
    return config.post_process_html(html)

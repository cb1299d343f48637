"""
Abstracciones (Protocols) para las etapas configurables del pipeline.

`RenderConfig` acepta cualquier callable que cumpla estas interfaces; las
implementaciones por defecto están en `raml2html.defaults`.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol


class RamlProcessor(Protocol):
    """
    Interfaz para renderizar el objeto RAML normalizado.
    """

    def __call__(self, raml_obj: Dict[str, Any]) -> Any:
        """
        Procesa el objeto RAML (ya con `config` adjunta).

        Args:
            raml_obj: Objeto RAML normalizado.

        Returns:
            Normalmente el HTML renderizado como string. Lo que se devuelva
            se pasa tal cual al post-procesador, o al llamador si no hay.
        """
        ...


class HtmlPostProcessor(Protocol):
    """
    Interfaz para post-procesar la salida del renderer (ej: minificar).
    """

    def __call__(self, html: Any) -> Any:
        ...

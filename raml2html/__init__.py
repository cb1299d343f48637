"""raml2html - documentación HTML a partir de descripciones RAML

Uso como librería:

    import raml2html

    html = raml2html.render("api.raml", raml2html.get_default_config())

El CLI equivalente es `raml2html api.raml -o api.html`.
"""

__version__ = "0.1.0"

from .engine import RenderConfig, render
from .defaults import get_default_config

__all__ = ["RenderConfig", "render", "get_default_config", "__version__"]

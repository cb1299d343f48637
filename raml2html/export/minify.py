# raml2html/export/minify.py
from __future__ import annotations

from dataclasses import dataclass

import htmlmin

"""
raml2html.export.minify
=======================

Post-proceso del HTML generado: minificación con `htmlmin`.

- Se preservan las comillas de los atributos (`remove_optional_attribute_quotes=False`),
  igual que el HTML que produce el template.
- Cualquier error del minificador se envuelve en `RuntimeError` para que
  quien llama no dependa de las excepciones internas de htmlmin.
"""


@dataclass
class HtmlMinifier:
    """
    Minificador HTML basado en htmlmin.

    Attributes
    ----------
    name:
        Identificador del post-procesador.
    keep_quotes:
        Si True, no se quitan las comillas "opcionales" de los atributos.
    remove_comments:
        Si True, se eliminan los comentarios HTML.
    """

    name: str = "htmlmin"
    keep_quotes: bool = True
    remove_comments: bool = True

    def minify(self, html: str) -> str:
        """
        Minifica `html` y devuelve el resultado.

        Raises
        ------
        RuntimeError
            Si htmlmin falla al parsear el documento.
        """
        try:
            return htmlmin.minify(
                html,
                remove_comments=self.remove_comments,
                remove_empty_space=True,
                remove_optional_attribute_quotes=not self.keep_quotes,
            )
        except Exception as e:
            raise RuntimeError(f"Falló la minificación del HTML: {e}") from e

"""
Funciones auxiliares que se inyectan en el objeto RAML antes del render.

Los templates las usan como `securitySchemeWithName(...)` y
`renderSecuredBy(...)`; por eso las claves quedan en camelCase, igual que
el resto de los datos RAML.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional


def security_scheme_with_name(security_schemes: List[Mapping] | None, name: str) -> Optional[Any]:
    """
    Busca la definición de un security scheme por nombre.

    `security_schemes` es la lista normalizada (mapeos de una sola clave).
    Devuelve la definición del primer mapeo que tenga `name`, o None.
    """
    for scheme in security_schemes or []:
        if scheme.get(name):
            return scheme[name]
    return None


def render_secured_by(secured_by: Any) -> str:
    """
    Renderiza un requisito de seguridad (`securedBy`) a HTML.

    - {"oauth2": {"scopes": ["read"]}} → <b>oauth2</b> with scopes:<ul><li>read</li></ul>
    - {"basic": {"scopes": []}}        → <b>basic</b>
    - "anonymous"                      → <b>anonymous</b>
    - None (`null` en RAML)            → ""

    Los nombres no se escapan: el RAML se considera fuente confiable.
    """
    if secured_by is None:
        return ""

    if not isinstance(secured_by, Mapping):
        return f"<b>{secured_by}</b>"

    out = ""
    for name, requirement in secured_by.items():
        out += f"<b>{name}</b>"
        scopes = (requirement or {}).get("scopes") or []
        if scopes:
            out += " with scopes:<ul>"
            for scope in scopes:
                out += f"<li>{scope}</li>"
            out += "</ul>"
    return out


def inject_helpers(raml_obj: Dict[str, Any]) -> Dict[str, Callable[..., Any]]:
    """
    Agrega `securitySchemeWithName` y `renderSecuredBy` al objeto RAML.

    La búsqueda por nombre lee `securitySchemes` en el momento de la llamada,
    así que refleja cambios posteriores del objeto.
    """

    def scheme_with_name(name: str) -> Optional[Any]:
        return security_scheme_with_name(raml_obj.get("securitySchemes"), name)

    helpers = {
        "securitySchemeWithName": scheme_with_name,
        "renderSecuredBy": render_secured_by,
    }
    raml_obj.update(helpers)
    return helpers

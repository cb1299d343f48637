from __future__ import annotations

"""
raml2html.raml_parser
=====================

Carga de RAML (fuente → objeto normalizado).

Responsabilidad
----------------
- Aceptar una fuente en cualquiera de sus formas:
    * ruta a un archivo `.raml`
    * URL (http/https)
    * texto RAML crudo (empieza con `#%RAML`)
    * objeto ya parseado (Mapping)
- Cargar el YAML resolviendo `!include` (archivos locales o remotos)
- Normalizar el resultado a la forma que consumen los templates:
    * recursos anidados (`/users`, `/{id}`, ...) → listas `resources`
    * `securitySchemes` siempre como lista de mapeos de una sola clave
    * `securedBy` heredado raíz → recurso → método
    * `displayName` en cada parámetro

NO hace
-------
- Validación de la gramática RAML
- Aplicación de `traits` / `resourceTypes`
- Expansión de JSON schemas (eso lo hace `schemas.expand_json_schemas`)
- Render de HTML
"""

import copy
import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Tuple
from urllib.parse import urljoin

import requests
import yaml

from .config import get_settings

logger = logging.getLogger(__name__)

RAML_HEADER = "#%RAML"

HTTP_METHODS = {"get", "post", "put", "delete", "patch", "head", "options", "trace", "connect"}

PARAMETER_KEYS = ("uriParameters", "baseUriParameters", "queryParameters", "headers", "formParameters")

# Extensiones de `!include` que se parsean como YAML; el resto queda como texto
YAML_INCLUDE_EXT = {".raml", ".yaml", ".yml"}


# ============================================================
# Lectura de fuentes
# ============================================================

def _is_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def _fetch_url(url: str) -> str:
    settings = get_settings()
    logger.debug("Descargando RAML desde %s", url)
    response = requests.get(url, timeout=settings.http_timeout)
    response.raise_for_status()
    return response.text


def _read_file(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"No se encontró el archivo RAML: {path}")
    return path.read_text(encoding="utf-8")


def _read_source(source: str | os.PathLike) -> Tuple[str, str | None]:
    """
    Devuelve (texto, base) para una fuente no parseada.

    `base` es la ubicación contra la que se resuelven los `!include`
    relativos: la URL o la ruta del archivo. Para texto crudo es None
    (los includes se resuelven contra el directorio de trabajo).
    """
    if isinstance(source, os.PathLike):
        path = Path(source)
        return _read_file(path), str(path)

    if _is_url(source):
        return _fetch_url(source), source

    if source.lstrip("\ufeff \t\r\n").startswith(RAML_HEADER):
        return source, None

    path = Path(source)
    return _read_file(path), str(path)


def _resolve_include(target: str, base: str | None) -> str:
    if _is_url(target):
        return target
    if base is None:
        return target
    if _is_url(base):
        return urljoin(base, target)
    return os.path.join(os.path.dirname(base), target)


def _load_include(target: str, base: str | None) -> Any:
    location = _resolve_include(target, base)
    logger.debug("Resolviendo !include %s → %s", target, location)

    text = _fetch_url(location) if _is_url(location) else _read_file(Path(location))

    if Path(target).suffix.lower() in YAML_INCLUDE_EXT:
        return _load_yaml(text, location)
    return text


def _load_yaml(text: str, base: str | None) -> Any:
    # Un Loader por carga: el constructor de `!include` necesita conocer `base`
    class _RamlLoader(yaml.SafeLoader):
        pass

    def _include(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
        return _load_include(loader.construct_scalar(node), base)

    _RamlLoader.add_constructor("!include", _include)
    return yaml.load(text, Loader=_RamlLoader)


# ============================================================
# Normalización
# ============================================================

def _method_name(key: Any) -> str | None:
    if not isinstance(key, str):
        return None
    name = key.rstrip("?").lower()
    return name if name in HTTP_METHODS else None


def _is_resource_key(key: Any) -> bool:
    return isinstance(key, str) and key.startswith("/")


def _make_unique_id(full_url: str) -> str:
    return re.sub(r"\W", "_", full_url)


def _normalize_named_list(value: Any) -> List[Dict[str, Any]]:
    """
    RAML 0.8 declara `securitySchemes` como lista de mapeos de una clave;
    RAML 1.0 como un mapeo. Los templates trabajan siempre con la lista.
    """
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [{name: definition} for name, definition in value.items()]
    return list(value)


def _with_display_names(params: Any) -> Any:
    if not isinstance(params, Mapping):
        return params

    out: Dict[str, Any] = {}
    for name, param in params.items():
        if isinstance(param, Mapping):
            param = dict(param)
        elif isinstance(param, str):
            # RAML 1.0 permite `id: string` como atajo de `id: {type: string}`
            param = {"type": param}
        else:
            param = {}
        param.setdefault("displayName", name)
        out[name] = param
    return out


def _add_parameter_display_names(node: Dict[str, Any]) -> None:
    for key in PARAMETER_KEYS:
        if key in node:
            node[key] = _with_display_names(node[key])


def _build_method(name: str, node: Any, secured_by: Any) -> Dict[str, Any]:
    method = dict(node or {})
    method["method"] = name
    if secured_by is not None:
        method.setdefault("securedBy", secured_by)
    _add_parameter_display_names(method)
    return method


def _collect_resources(node: Mapping, parent_url: str, secured_by: Any) -> List[Dict[str, Any]]:
    resources: List[Dict[str, Any]] = []

    for relative_uri, child in node.items():
        if not _is_resource_key(relative_uri):
            continue
        child = child or {}

        resource = {
            k: v for k, v in child.items()
            if not _is_resource_key(k) and _method_name(k) is None
        }
        resource["relativeUri"] = relative_uri
        resource["parentUrl"] = parent_url
        resource["uniqueId"] = _make_unique_id(parent_url + relative_uri)
        resource.setdefault("displayName", relative_uri)
        _add_parameter_display_names(resource)

        resource_secured_by = child.get("securedBy", secured_by)
        resource["methods"] = [
            _build_method(_method_name(k), v, resource_secured_by)
            for k, v in child.items()
            if _method_name(k) is not None
        ]
        resource["resources"] = _collect_resources(child, parent_url + relative_uri, resource_secured_by)
        resources.append(resource)

    return resources


def normalize(raml_obj: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normaliza (in place) un objeto RAML recién cargado.

    Es idempotente: un objeto ya normalizado (sin claves `/...` en la raíz)
    conserva sus `resources`.
    """
    raml_obj["securitySchemes"] = _normalize_named_list(raml_obj.get("securitySchemes"))

    resources = _collect_resources(raml_obj, "", raml_obj.get("securedBy"))
    for key in [k for k in raml_obj if _is_resource_key(k)]:
        del raml_obj[key]
    if resources or "resources" not in raml_obj:
        raml_obj["resources"] = resources

    _add_parameter_display_names(raml_obj)
    return raml_obj


# ============================================================
# API pública
# ============================================================

def loads(text: str, base: str | None = None) -> Dict[str, Any]:
    """
    Parsea texto RAML a un dict (sin normalizar).

    Raises
    ------
    ValueError
        Si falta el encabezado `#%RAML` o la raíz no es un mapeo.
    yaml.YAMLError
        Si el YAML está mal formado.
    """
    stripped = text.lstrip("\ufeff \t\r\n")
    header = stripped.splitlines()[0] if stripped else ""
    if not header.startswith(RAML_HEADER):
        raise ValueError("El documento no es RAML: falta el encabezado '#%RAML'.")

    data = _load_yaml(text, base)
    if not isinstance(data, dict):
        raise ValueError("El documento RAML debe tener un mapeo en la raíz.")

    version = header[len(RAML_HEADER):].split()
    data.setdefault("ramlVersion", version[0] if version else None)
    return data


def parse(source: str | os.PathLike | Mapping) -> Dict[str, Any]:
    """
    Convierte una fuente RAML en el objeto normalizado que consumen los templates.

    Args:
        source: Ruta, URL, texto RAML crudo u objeto ya parseado.

    Returns:
        Dict normalizado. Para un Mapping se normaliza una copia profunda;
        el objeto del llamador no se modifica en ningún nivel.

    Raises:
        FileNotFoundError: si la ruta (o un `!include`) no existe.
        ValueError: si el texto no es RAML.
        requests.HTTPError: si la URL responde con error.
        TypeError: si la fuente no es de ningún tipo soportado.
    """
    if isinstance(source, Mapping):
        logger.debug("Fuente RAML ya parseada (%d claves)", len(source))
        return normalize(copy.deepcopy(dict(source)))

    if not isinstance(source, (str, os.PathLike)):
        raise TypeError(f"Fuente RAML no soportada: {type(source).__name__}")

    text, base = _read_source(source)
    return normalize(loads(text, base=base))

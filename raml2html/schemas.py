from __future__ import annotations

"""
raml2html.schemas
=================

Expansión de JSON schemas dentro del objeto RAML.

Reemplaza, en cada body de request y de response:

- un `schema` que es el *nombre* de un schema declarado en `schemas`
  por el texto de ese schema,
- las referencias `$ref` por el contenido referenciado (usando `jsonref`).

Las referencias se resuelven contra los schemas declarados en la raíz,
ya sea por nombre (`"$ref": "user"`) o por su `id` / `$id`.

Diseño
------
- Nunca rompe el render: un schema que no es JSON válido, o con un `$ref`
  que no se puede resolver, queda como estaba y se loguea un warning.
- El resultado se vuelve a guardar como texto JSON indentado, porque los
  templates lo muestran dentro de un bloque <pre>.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator

import jsonref

logger = logging.getLogger(__name__)


def _declared_schemas(raml_obj: Mapping) -> Dict[str, str]:
    """
    Devuelve {nombre: texto} para los schemas declarados en la raíz.

    Acepta la forma RAML 0.8 (lista de mapeos de una clave) y la forma de
    mapeo.
    """
    declared = raml_obj.get("schemas") or []
    if isinstance(declared, Mapping):
        declared = [declared]

    out: Dict[str, str] = {}
    for entry in declared:
        if not isinstance(entry, Mapping):
            continue
        for name, text in entry.items():
            out[name] = text if isinstance(text, str) else json.dumps(text)
    return out


def _build_store(declared: Dict[str, str]) -> Dict[str, Any]:
    """Índice de documentos JSON por nombre y por id, para el loader de jsonref."""
    store: Dict[str, Any] = {}
    for name, text in declared.items():
        try:
            doc = json.loads(text)
        except ValueError:
            continue
        store[name] = doc
        if isinstance(doc, Mapping):
            for key in ("id", "$id"):
                if isinstance(doc.get(key), str):
                    store[doc[key]] = doc
    return store


def _iter_bodies(raml_obj: Mapping) -> Iterator[Dict[str, Any]]:
    """Recorre todos los bodies (request y responses) de todos los métodos."""

    def _bodies(container: Any) -> Iterator[Dict[str, Any]]:
        body = container.get("body") if isinstance(container, Mapping) else None
        if not isinstance(body, Mapping):
            return
        for media in body.values():
            if isinstance(media, dict):
                yield media

    def _walk(resources: Any) -> Iterator[Dict[str, Any]]:
        for resource in resources or []:
            for method in resource.get("methods") or []:
                yield from _bodies(method)
                for response in (method.get("responses") or {}).values():
                    yield from _bodies(response)
            yield from _walk(resource.get("resources"))

    yield from _walk(raml_obj.get("resources"))


def _expand_schema(text: str, store: Dict[str, Any]) -> str:
    if "$ref" not in text:
        return text

    def loader(uri: str) -> Any:
        if uri not in store:
            raise KeyError(uri)
        return store[uri]

    doc = json.loads(text)
    expanded = jsonref.replace_refs(doc, loader=loader, proxies=False, lazy_load=False)
    return json.dumps(expanded, indent=2)


def expand_json_schemas(raml_obj: Dict[str, Any]) -> Dict[str, Any]:
    """
    Expande los JSON schemas del objeto RAML (in place) y lo devuelve.

    Args:
        raml_obj: Objeto RAML normalizado (ver `raml_parser.parse`).

    Returns:
        El mismo objeto, con los `schema` de cada body expandidos.
    """
    declared = _declared_schemas(raml_obj)
    store = _build_store(declared)

    for body in _iter_bodies(raml_obj):
        schema = body.get("schema")
        if not isinstance(schema, str):
            continue

        # Un schema puede ser solo el nombre de uno declarado en la raíz
        schema = declared.get(schema, schema)

        try:
            body["schema"] = _expand_schema(schema, store)
        except (ValueError, KeyError, RecursionError, jsonref.JsonRefError) as e:
            logger.warning("No se pudo expandir el schema (%s); se deja sin expandir.", e)
            body["schema"] = schema

    return raml_obj

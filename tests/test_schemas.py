import json
import logging

from raml2html.schemas import expand_json_schemas

USER_SCHEMA = json.dumps({"type": "object", "properties": {"name": {"type": "string"}}})


def _raml_obj(body_schema, schemas=None):
    return {
        "schemas": schemas if schemas is not None else [{"user": USER_SCHEMA}],
        "resources": [
            {
                "relativeUri": "/users",
                "methods": [
                    {
                        "method": "get",
                        "responses": {200: {"body": {"application/json": {"schema": body_schema}}}},
                    }
                ],
                "resources": [],
            }
        ],
    }


def _response_schema(raml_obj):
    return raml_obj["resources"][0]["methods"][0]["responses"][200]["body"]["application/json"]["schema"]


def test_nombre_de_schema_se_reemplaza_por_su_contenido():
    raml_obj = expand_json_schemas(_raml_obj("user"))
    assert _response_schema(raml_obj) == USER_SCHEMA


def test_ref_por_nombre_se_expande():
    schema = json.dumps({"type": "array", "items": {"$ref": "user"}})

    raml_obj = expand_json_schemas(_raml_obj(schema))

    expanded = json.loads(_response_schema(raml_obj))
    assert expanded["items"]["properties"]["name"]["type"] == "string"
    assert "$ref" not in _response_schema(raml_obj)


def test_ref_por_id_se_expande():
    user = json.dumps({"id": "http://example.com/user", "type": "object"})
    schema = json.dumps({"type": "array", "items": {"$ref": "http://example.com/user"}})

    raml_obj = expand_json_schemas(_raml_obj(schema, schemas={"user": user}))

    assert json.loads(_response_schema(raml_obj))["items"]["type"] == "object"


def test_ref_local_se_expande():
    schema = json.dumps(
        {
            "definitions": {"id": {"type": "integer"}},
            "properties": {"id": {"$ref": "#/definitions/id"}},
        }
    )

    raml_obj = expand_json_schemas(_raml_obj(schema))

    assert json.loads(_response_schema(raml_obj))["properties"]["id"] == {"type": "integer"}


def test_ref_inexistente_queda_sin_expandir(caplog):
    schema = json.dumps({"items": {"$ref": "missing"}})

    with caplog.at_level(logging.WARNING, logger="raml2html.schemas"):
        raml_obj = expand_json_schemas(_raml_obj(schema))

    assert _response_schema(raml_obj) == schema
    assert "No se pudo expandir" in caplog.text


def test_schema_que_no_es_json_queda_igual():
    raml_obj = expand_json_schemas(_raml_obj("<xs:schema $ref='x'/>"))
    assert _response_schema(raml_obj) == "<xs:schema $ref='x'/>"


def test_body_de_request_y_recursos_hijos():
    raml_obj = {
        "schemas": [{"user": USER_SCHEMA}],
        "resources": [
            {
                "methods": [],
                "resources": [
                    {
                        "methods": [{"method": "post", "body": {"application/json": {"schema": "user"}}}],
                        "resources": [],
                    }
                ],
            }
        ],
    }

    expand_json_schemas(raml_obj)

    body = raml_obj["resources"][0]["resources"][0]["methods"][0]["body"]["application/json"]
    assert body["schema"] == USER_SCHEMA

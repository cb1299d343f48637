"""
Tests del orquestador (`raml2html.render`).

El parser se reemplaza por un fake para verificar solo la secuencia:
parse → process_raml_obj → post_process_html.
"""

import subprocess
import sys
from pathlib import Path

import pytest

import raml2html
from raml2html import engine
from raml2html.engine import LIBRARY_ONLY_MESSAGE, RenderConfig, render


@pytest.fixture
def parsed_sources(monkeypatch):
    """Reemplaza el parser y registra las fuentes recibidas."""
    received = []

    def fake_parse(source):
        received.append(source)
        return {"title": "Fake API"}

    monkeypatch.setattr(engine.raml_parser, "parse", fake_parse)
    return received


@pytest.mark.parametrize(
    "source",
    [
        "api.raml",
        Path("api.raml"),
        "https://example.com/api.raml",
        "#%RAML 0.8\ntitle: Fake API",
        {"title": "Fake API"},
    ],
)
def test_fuente_se_pasa_sin_cambios_al_parser(parsed_sources, source):
    result = render(source)

    assert parsed_sources == [source]
    assert result["title"] == "Fake API"


def test_sin_renderer_devuelve_objeto_con_config(parsed_sources):
    config = RenderConfig()
    result = render("api.raml", config)

    assert result["config"] is config
    assert config.raml2html_version == raml2html.__version__
    assert config.process_raml_obj is None
    assert config.post_process_html is None


def test_config_none_usa_config_vacia(parsed_sources):
    result = render("api.raml", None)

    assert isinstance(result["config"], RenderConfig)
    assert result["config"].raml2html_version == raml2html.__version__


def test_renderer_sin_post_proceso(parsed_sources):
    seen = []

    def process(raml_obj):
        seen.append(raml_obj)
        return "<x>"

    result = render("api.raml", RenderConfig(process_raml_obj=process))

    assert result == "<x>"
    # El renderer recibe el objeto ya con la config adjunta
    assert seen[0]["config"].process_raml_obj is process


def test_renderer_con_post_proceso(parsed_sources):
    config = RenderConfig(
        process_raml_obj=lambda raml_obj: "<x>",
        post_process_html=lambda html: html.upper() + "!",
    )

    assert render("api.raml", config) == "<X>!"


def test_post_proceso_se_ignora_sin_renderer(parsed_sources):
    called = []
    config = RenderConfig(post_process_html=lambda html: called.append(html))

    result = render("api.raml", config)

    assert called == []
    assert result["title"] == "Fake API"


def test_error_del_parser_se_propaga_sin_cambios(monkeypatch):
    error = ValueError("RAML inválido")

    def failing_parse(source):
        raise error

    monkeypatch.setattr(engine.raml_parser, "parse", failing_parse)
    process_calls = []

    with pytest.raises(ValueError) as exc_info:
        render("api.raml", RenderConfig(process_raml_obj=process_calls.append))

    assert exc_info.value is error
    assert process_calls == []


def test_error_del_renderer_se_propaga(parsed_sources):
    error = RuntimeError("template roto")
    post_calls = []

    def process(raml_obj):
        raise error

    config = RenderConfig(process_raml_obj=process, post_process_html=post_calls.append)

    with pytest.raises(RuntimeError) as exc_info:
        render("api.raml", config)

    assert exc_info.value is error
    assert post_calls == []


def test_ejecutar_el_paquete_como_programa_sale_con_codigo_1():
    """Test: `python -m raml2html` solo imprime el mensaje guía, sin nada en stderr."""
    project_root = Path(__file__).resolve().parents[1]
    completed = subprocess.run(
        [sys.executable, "-m", "raml2html"],
        cwd=project_root,
        capture_output=True,
        text=True,
    )

    assert completed.returncode == 1
    assert completed.stdout.strip() == LIBRARY_ONLY_MESSAGE
    assert completed.stderr == ""

import pytest

from raml2html.config import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for var in ("RAML2HTML_HTTP_TIMEOUT", "RAML2HTML_TEMPLATES_PATH", "RAML2HTML_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    assert get_settings() == Settings()


def test_variables_de_entorno(monkeypatch):
    monkeypatch.setenv("RAML2HTML_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("RAML2HTML_TEMPLATES_PATH", "/tmp/templates")
    monkeypatch.setenv("RAML2HTML_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.http_timeout == 2.5
    assert settings.templates_path == "/tmp/templates"
    assert settings.log_level == "DEBUG"


def test_settings_se_cachea():
    assert get_settings() is get_settings()

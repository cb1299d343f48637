# raml2html/config.py
from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

"""
raml2html.config
================

Configuración de entorno del paquete.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Importante
----------
Esta configuración es *de entorno* (timeouts, log level, rutas por defecto
del CLI). No confundir con `RenderConfig` (engine.py), que es la configuración
de una corrida de render y la arma quien llama a `render()`.

Notas
-----
- `load_dotenv()` se ejecuta al importar el módulo.
- En tests, si se tocan variables de entorno, hay que llamar a
  `get_settings.cache_clear()`.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


@dataclass
class Settings:
    """
    Contenedor tipado de configuración de entorno.

    Attributes
    ----------
    http_timeout:
        Timeout (segundos) para descargar RAML desde una URL y sus `!include`
        remotos.
    templates_path:
        Directorio de templates por defecto para el CLI. Vacío significa
        "usar el template incluido en el paquete".
    log_level:
        Nivel de logging usado por el CLI.
    """

    http_timeout: float = 30.0
    templates_path: str = ""
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - RAML2HTML_HTTP_TIMEOUT (default: 30)
    - RAML2HTML_TEMPLATES_PATH (default: "")
    - RAML2HTML_LOG_LEVEL (default: "WARNING")
    """
    return Settings(
        http_timeout=float(os.getenv("RAML2HTML_HTTP_TIMEOUT", "30")),
        templates_path=os.getenv("RAML2HTML_TEMPLATES_PATH", ""),
        log_level=os.getenv("RAML2HTML_LOG_LEVEL", "WARNING").upper(),
    )

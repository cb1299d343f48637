"""
raml2html.__main__
==================

`python -m raml2html` no genera documentación: el paquete es una librería.
Imprime el mensaje guía y sale con código 1.
"""

import sys

from .engine import LIBRARY_ONLY_MESSAGE

print(LIBRARY_ONLY_MESSAGE)
sys.exit(1)

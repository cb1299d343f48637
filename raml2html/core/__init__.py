"""
Interfaces del pipeline de render (parse → render → post-proceso).
"""

from .abstractions import HtmlPostProcessor, RamlProcessor

__all__ = ["HtmlPostProcessor", "RamlProcessor"]

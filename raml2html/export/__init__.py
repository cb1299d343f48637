from __future__ import annotations

from pathlib import Path

from .minify import HtmlMinifier


def minify_html(html: str) -> str:
    return HtmlMinifier().minify(html)


def write_html(html: str, output_path: Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    return output_path

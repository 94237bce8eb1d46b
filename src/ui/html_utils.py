"""Utilities for preparing HTML snippets before rendering in Streamlit."""
import html
from textwrap import dedent
from typing import Optional


def html_block(template: str) -> str:
    """
    Normalize multi-line HTML so Streamlit doesn't treat it as Markdown code.

    Streamlit's Markdown renderer interprets lines with >=4 leading spaces as
    code blocks, so every line is dedented and left-stripped.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def html_text(value: Optional[str]) -> str:
    """Escape API-provided text for interpolation into HTML; None becomes ""."""
    if value is None:
        return ""
    return html.escape(value, quote=True)

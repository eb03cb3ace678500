"""Report renderers."""

from repo_activity.render.html import render_html
from repo_activity.render.text import render_text, write_text

__all__ = [
    "render_html",
    "render_text",
    "write_text",
]

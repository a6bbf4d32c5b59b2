"""HTML-to-text extraction: parse, then render like a text-mode browser."""

from collections.abc import Mapping
from typing import Any

from astext.models.options import RenderOptions
from astext.services.html_tree import parse_html
from astext.services.render import render


def html_to_text(
    html: str,
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Convert HTML to text with line breaks after block elements.

    The synthetic document root is inline, so the result always ends with
    ``zwsp_char`` (even after trimming, unless ``zwsp_char`` is trimmable).
    """
    return render(parse_html(html), options, **overrides)

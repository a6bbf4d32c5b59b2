"""Render endpoints: HTML text or a JSON tree in, flattened text out."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from astext.core.config import get_settings
from astext.models.node import Element
from astext.models.options import RenderOptions, resolve_options
from astext.services.html_extract import html_to_text
from astext.services.render import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/render", tags=["render"])


# ── Schemas ───────────────────────────────────────────────────


class OptionsIn(BaseModel):
    """Request options; anything left unset falls back to server settings."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    lf_char: str | None = Field(default=None, alias="lfChar")
    zwsp_char: str | None = Field(default=None, alias="zwspChar")
    trim: bool | None = None
    extra_chars: str | None = Field(default=None, alias="extraChars")
    skip_dels: bool | None = Field(default=None, alias="skipDels")


class HtmlRenderRequest(BaseModel):
    html: str
    options: OptionsIn = Field(default_factory=OptionsIn)


class TreeRenderRequest(BaseModel):
    root: dict[str, Any] = Field(
        description='Nested {"tag": str, "children": [node | str | null]} objects',
    )
    options: OptionsIn = Field(default_factory=OptionsIn)


class RenderResponse(BaseModel):
    text: str
    char_count: int


# ── Helpers ───────────────────────────────────────────────────


def _effective_options(options: OptionsIn) -> RenderOptions:
    settings = get_settings()
    defaults = RenderOptions(
        lf_char=settings.lf_char,
        zwsp_char=settings.zwsp_char,
        trim=settings.trim,
        extra_chars=settings.extra_chars,
        skip_dels=settings.skip_dels,
    )
    return resolve_options(defaults, **options.model_dump(exclude_none=True))


def _invalid_tree(detail: str) -> HTTPException:
    return HTTPException(status_code=422, detail=detail)


def _build_tree(raw: dict[str, Any], max_depth: int) -> Element:
    """Convert decoded JSON into an Element tree, iteratively."""
    if not isinstance(raw.get("tag"), str):
        raise _invalid_tree("root: 'tag' must be a string")
    root = Element(raw["tag"])
    pending: list[tuple[dict[str, Any], Element, int]] = [(raw, root, 1)]

    while pending:
        source, element, depth = pending.pop()
        if depth > max_depth:
            logger.info("Rejected tree deeper than %d levels", max_depth)
            raise HTTPException(
                status_code=413,
                detail=f"Tree depth exceeds {max_depth}",
            )
        children = source.get("children") or []
        if not isinstance(children, list):
            raise _invalid_tree(f"{element.tag}: 'children' must be a list")

        for child in children:
            if child is None or isinstance(child, str):
                element.append(child)
            elif isinstance(child, dict) and isinstance(child.get("tag"), str):
                child_element = Element(child["tag"])
                element.append(child_element)
                pending.append((child, child_element, depth + 1))
            else:
                raise _invalid_tree(
                    f"{element.tag}: children must be strings, null or "
                    "objects with a string 'tag'"
                )
    return root


# ── Endpoints ─────────────────────────────────────────────────


@router.post("/html", response_model=RenderResponse)
def render_html(body: HtmlRenderRequest) -> RenderResponse:
    """Parse an HTML document and render it as text."""
    settings = get_settings()
    if len(body.html) > settings.max_html_size:
        logger.info("Rejected HTML of %d characters", len(body.html))
        raise HTTPException(
            status_code=413,
            detail=f"HTML exceeds {settings.max_html_size} characters",
        )
    text = html_to_text(body.html, _effective_options(body.options))
    return RenderResponse(text=text, char_count=len(text))


@router.post("/tree", response_model=RenderResponse)
def render_tree(body: TreeRenderRequest) -> RenderResponse:
    """Render an already-parsed tree supplied as nested JSON objects."""
    settings = get_settings()
    root = _build_tree(body.root, settings.max_tree_depth)
    text = render(root, _effective_options(body.options))
    return RenderResponse(text=text, char_count=len(text))

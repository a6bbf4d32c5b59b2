"""Explicit, scoped installation of the renderer as an ``as_text`` method.

Nothing here patches anything globally on import. Callers either hold a
:class:`TextRenderer` and call it, or wrap a block in :func:`install`, which
puts the previous attribute back when the block exits.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from astext.models.node import Node
from astext.models.options import RenderOptions, canonical_options
from astext.services.render import render

logger = logging.getLogger(__name__)

_MISSING = object()


class TextRenderer:
    """Callable rendering strategy with fixed options.

    Options given at construction take precedence over options passed per
    call, so a renderer configured with ``zwsp_char=""`` never emits ZWSP.
    """

    def __init__(
        self,
        options: RenderOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        fixed: dict[str, Any] = {}
        if isinstance(options, RenderOptions):
            fixed.update(options.model_dump(exclude_unset=True))
        elif options:
            fixed.update(canonical_options(options))
        fixed.update(canonical_options(overrides))
        self._fixed = fixed

    @property
    def fixed_options(self) -> dict[str, Any]:
        return dict(self._fixed)

    def __call__(
        self,
        node: Node,
        options: RenderOptions | Mapping[str, Any] | None = None,
        **call_options: Any,
    ) -> str:
        merged = {**canonical_options(call_options), **self._fixed}
        return render(node, options, **merged)

    def __repr__(self) -> str:
        return f"TextRenderer({self._fixed!r})"


@contextmanager
def install(
    target: Any,
    name: str = "as_text",
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Iterator[Any]:
    """Temporarily replace ``target.<name>`` with the renderer.

    ``target`` may be a class (every instance is affected) or a single
    instance. Yields the attribute that was reachable before installation,
    or ``None``, so the caller can delegate to it. On exit the previous
    state is restored exactly, including when the block raises.
    """
    renderer = TextRenderer(options, **overrides)
    own_attrs = vars(target)
    previous = own_attrs.get(name, _MISSING)
    delegate = getattr(target, name, None)

    if isinstance(target, type):

        def as_text(self, options=None, **call_options):
            return renderer(self, options, **call_options)

        as_text.__name__ = name
        replacement: Any = as_text
    else:
        replacement = functools.partial(renderer, target)

    setattr(target, name, replacement)
    logger.debug("Installed %r as %s.%s", renderer, _describe(target), name)
    try:
        yield delegate
    finally:
        if previous is _MISSING:
            delattr(target, name)
        else:
            setattr(target, name, previous)
        logger.debug("Restored %s.%s", _describe(target), name)


def _describe(target: Any) -> str:
    if isinstance(target, type):
        return target.__qualname__
    return f"<{type(target).__qualname__} instance>"

"""Flatten a markup tree into text the way line-oriented browsers show it.

Block elements end with ``lf_char`` and inline elements with ``zwsp_char``
(a zero-width space by default), so ``<p><span>A</span>pple</p>`` reads as
``"A\\u200bpple\\n"`` instead of ``"Apple"`` and ``<h2>`` headings land on
their own line. ``script`` and ``style`` subtrees are dropped entirely,
``del`` subtrees only when ``skip_dels`` is set.

The traversal keeps its own work list instead of recursing, so arbitrarily
deep trees render without hitting the interpreter's recursion limit. The tree
must be finite and acyclic; a cycle makes ``render`` loop forever.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping
from typing import Any

from astext.models.node import Child, Node
from astext.models.options import RenderOptions, resolve_options
from astext.services.normalize import normalize
from astext.services.tags import is_suppressed, separator_for

logger = logging.getLogger(__name__)


def render(
    root: Node,
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Render ``root`` and its subtree as flat text.

    Args:
        root: Tree to flatten. Any object with ``tag`` and ``children``.
        options: Base options; ``None`` means defaults.
        **overrides: Individual options (``lf_char``, ``zwspChar``, ...)
            applied over ``options``. Unknown names are ignored.

    Returns:
        The flattened text, trimmed when ``trim`` is set.
    """
    opts = resolve_options(options, **overrides)

    pending: deque[Child] = deque([root])
    pieces: list[str] = []
    node_count = 0

    while pending:
        item = pending.popleft()
        if item is None:
            continue
        if isinstance(item, str):
            pieces.append(item)
            continue

        node_count += 1
        tag = item.tag
        if is_suppressed(tag, opts):
            continue

        expansion = list(item.children or ())
        expansion.append(separator_for(tag, opts))
        pending.extendleft(reversed(expansion))

    text = "".join(pieces)
    logger.debug("Rendered %d nodes into %d fragments", node_count, len(pieces))

    if opts.trim:
        text = normalize(text, opts.extra_chars)
    return text

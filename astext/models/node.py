"""Markup tree types consumed by the renderer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class Node(Protocol):
    """Anything with a tag name and an ordered sequence of children.

    A child is another ``Node``, a text fragment (``str``) or ``None``.
    ``children`` itself may be ``None`` for a childless element.
    """

    tag: str
    children: Iterable[Child] | None


Child = Union[Node, str, None]


@dataclass
class Element:
    """Concrete tree node produced by :func:`astext.services.html_tree.parse_html`."""

    tag: str
    children: list[Child] = field(default_factory=list)

    def append(self, child: Child) -> None:
        self.children.append(child)

    def as_text(self) -> str:
        """Concatenate every text fragment under this element, without separators."""
        pieces: list[str] = []
        pending: list[Child] = [self]
        while pending:
            item = pending.pop()
            if item is None:
                continue
            if isinstance(item, str):
                pieces.append(item)
                continue
            pending.extend(reversed(list(item.children or ())))
        return "".join(pieces)

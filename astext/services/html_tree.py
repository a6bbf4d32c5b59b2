"""Build an :class:`Element` tree from HTML text using Python stdlib."""

from html.parser import HTMLParser

from astext.models.node import Child, Element

ROOT_TAG = "#document"

# Elements that never have content; their end tags are ignored
VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


# Start tags that end an open <p>
CLOSES_P_TAGS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "center",
        "dd",
        "dir",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hr",
        "li",
        "main",
        "menu",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "ul",
    }
)

# Implicit closing never reaches past these
_SCOPE_TAGS = frozenset({"button", "caption", "object", "table", "td", "th", "template"})
_LIST_TAGS = frozenset({"dir", "menu", "ol", "ul"})


class _TreeBuilder(HTMLParser):
    """Collects start/end tags and text into a tree of :class:`Element`."""

    def __init__(self, root_tag: str) -> None:
        super().__init__(convert_charrefs=True)
        self.root = Element(root_tag)
        self._open: list[Element] = [self.root]

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._close_implied(tag)
        element = Element(tag)
        self._open[-1].append(element)
        if tag not in VOID_TAGS:
            self._open.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # <br/>, <div/>: never opened
        self._close_implied(tag)
        self._open[-1].append(Element(tag))

    def handle_endtag(self, tag: str) -> None:
        if tag in VOID_TAGS:
            return
        for depth in range(len(self._open) - 1, 0, -1):
            if self._open[depth].tag == tag:
                del self._open[depth:]
                return
        # Stray end tag with nothing to close

    def _close_implied(self, tag: str) -> None:
        """Close a <p>, <li>, <dt> or <dd> that the start of ``tag`` ends."""
        if tag == "li":
            self._close_nearest({"li"}, _SCOPE_TAGS | _LIST_TAGS)
        elif tag in ("dt", "dd"):
            self._close_nearest({"dt", "dd"}, _SCOPE_TAGS | {"dl"})
        if tag in CLOSES_P_TAGS:
            self._close_nearest({"p"}, _SCOPE_TAGS)

    def _close_nearest(self, targets: set[str], boundaries: frozenset[str]) -> None:
        for depth in range(len(self._open) - 1, 0, -1):
            open_tag = self._open[depth].tag
            if open_tag in targets:
                del self._open[depth:]
                return
            if open_tag in boundaries:
                return

    def handle_data(self, data: str) -> None:
        if data:
            self._open[-1].append(data)


def parse_html(markup: str, root_tag: str = ROOT_TAG) -> Element:
    """Parse ``markup`` into an element tree under a synthetic inline root.

    Tag names are lowercased. Comments, doctype and processing instructions
    are dropped. Elements left open at the end are closed implicitly.
    """
    builder = _TreeBuilder(root_tag)
    builder.feed(markup)
    builder.close()
    return builder.root


def fragment(*children: Child, tag: str = ROOT_TAG) -> Element:
    """Wrap sibling nodes under a neutral (inline) root element."""
    return Element(tag, list(children))

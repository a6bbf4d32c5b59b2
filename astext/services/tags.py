"""Block/inline classification and subtree suppression rules."""

from enum import StrEnum

from astext.models.options import RenderOptions


class TagKind(StrEnum):
    BLOCK = "block"
    VOID_BLOCK = "void_block"
    INLINE = "inline"


# Elements followed by a line break in text-mode browsers
BLOCK_TAGS = frozenset(
    {
        "p",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "dl",
        "dt",
        "dd",
        "ol",
        "ul",
        "li",
        "dir",
        "address",
        "blockquote",
        "center",
        "del",
        "div",
        "hr",
        "ins",
        "noscript",
        "script",
        "pre",
    }
)

VOID_BLOCK_TAGS = frozenset({"br"})

# Never rendered, separator included
ALWAYS_SUPPRESSED_TAGS = frozenset({"script", "style"})

DELETED_TEXT_TAG = "del"


def classify(tag: str) -> TagKind:
    """Return the kind of ``tag``; unknown names are inline."""
    if tag in BLOCK_TAGS:
        return TagKind.BLOCK
    if tag in VOID_BLOCK_TAGS:
        return TagKind.VOID_BLOCK
    return TagKind.INLINE


def is_suppressed(tag: str, options: RenderOptions) -> bool:
    """True when neither the subtree under ``tag`` nor its separator is emitted."""
    if tag in ALWAYS_SUPPRESSED_TAGS:
        return True
    return bool(options.skip_dels) and tag == DELETED_TEXT_TAG


def separator_for(tag: str, options: RenderOptions) -> str:
    """Character appended after the flattened content of a ``tag`` element."""
    if classify(tag) is TagKind.INLINE:
        return options.zwsp_char
    return options.lf_char

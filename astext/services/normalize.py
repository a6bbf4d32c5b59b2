"""Edge trimming and non-ASCII space folding for rendered text."""

NBSP = "\xa0"

# Plain whitespace that is trimmed at the edges but left alone inside the text
_EDGE_WHITESPACE = "\n\r\f\t "


def normalize(text: str, extra_chars: str = "") -> str:
    """Trim edge whitespace and fold NBSP / ``extra_chars`` to plain spaces.

    Steps, each applied to the previous result:

    1. strip the trailing run of ``\\n \\r \\f \\t``, space, NBSP and ``extra_chars``;
    2. strip the leading run of the same characters;
    3. replace every NBSP and every character of ``extra_chars`` with a space.

    Step 3 substitutes one character for one character; runs of spaces are
    not collapsed. ``extra_chars`` is a set of literal characters.
    """
    extra_chars = extra_chars or ""
    trimmable = _EDGE_WHITESPACE + NBSP + extra_chars

    text = text.rstrip(trimmable)
    text = text.lstrip(trimmable)

    folded = dict.fromkeys(map(ord, NBSP + extra_chars), " ")
    return text.translate(folded)

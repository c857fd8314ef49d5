from __future__ import annotations
from typing import Iterator, Sequence, Tuple

# Known dirt in the wwwjdic export, repaired in this order.
DEFAULT_RULES: Tuple[Tuple[str, str], ...] = (
    ("\t ", "\t"),   # stray space after a field separator
    (" \n", "\n"),   # stray space before a line break
    ("  ", " "),     # doubled space between index words
)


def normalize_corpus(text: str, rules: Sequence[Tuple[str, str]] = DEFAULT_RULES) -> str:
    """
    Repair corpus-wide irregularities before the text is split into lines.

    Each rule is a literal (old, new) replacement applied once over the whole
    text. This is lossy: an intentional double space is collapsed as well.
    The result always ends with a newline so the last record is terminated
    like every other one.
    """
    for old, new in rules:
        text = text.replace(old, new)
    if not text.endswith("\n"):
        text += "\n"
    return text


def iter_lines(text: str) -> Iterator[str]:
    """Yield lines including their '\\n'. Only '\\n' splits; other separators are data."""
    start = 0
    n = len(text)
    while start < n:
        end = text.find("\n", start)
        if end < 0:
            yield text[start:]
            return
        yield text[start:end + 1]
        start = end + 1

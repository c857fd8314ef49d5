"""
Index-word grammar for the fifth field of a wwwjdic corpus line.

An index word is a headword followed by any number of annotations and a
single space or newline:

    彼(かれ)[01]{彼の}~ は|1 ...

    (...)   reading
    [...]   sense number (signed integer)
    {...}   form used in the sentence
    ~       good-and-checked marker
    |1 |2   legacy maintenance artifact, ignored

The corpus documents a fixed annotation order but does not keep to it, so
annotations are accepted in any order and the first one of each kind wins.
"""
from __future__ import annotations
import re
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple, Union

from .errors import ErrorKind, ParseError
from .models import IndexWord

_HEADWORD_RE = re.compile(r"[^(\[{~| \n]+")
_SENSE_RE = re.compile(r"[+-]?[0-9]+")
_WORD_END = frozenset(" \n")
_BARE_DIGITS = frozenset("12")

I32_MIN, I32_MAX = -(2 ** 31), 2 ** 31 - 1


class DelimiterKind(Enum):
    """Annotation kinds, keyed by the character that opens them."""
    READING = "("
    SENSE = "["
    FORM = "{"
    GOOD_AND_CHECKED = "~"
    BARE = "|"


_CLOSERS: Dict[DelimiterKind, str] = {
    DelimiterKind.READING: ")",
    DelimiterKind.SENSE: "]",
    DelimiterKind.FORM: "}",
}


class IndexElement(NamedTuple):
    kind: DelimiterKind
    value: Union[str, int, None] = None
    raw: str = ""          # payload as written: "02" in [02], "1" in |1


def _delimiter_kind(ch: str, pos: int) -> DelimiterKind:
    try:
        return DelimiterKind(ch)
    except ValueError:
        raise ParseError(
            ErrorKind.UNRECOGNIZED_ELEMENT, f"unexpected {ch!r} after headword", pos
        ) from None


def _sense_number(value: str, pos: int) -> int:
    if not _SENSE_RE.fullmatch(value):
        raise ParseError(ErrorKind.INVALID_SENSE_NUMBER, f"[{value}] is not an integer", pos)
    n = int(value)
    if not I32_MIN <= n <= I32_MAX:
        raise ParseError(ErrorKind.INVALID_SENSE_NUMBER, f"[{value}] is out of range", pos)
    return n


def parse_index_element(text: str, pos: int) -> Tuple[IndexElement, int]:
    """Consume one annotation starting at `pos`; return it and the new position."""
    if pos >= len(text):
        raise ParseError(
            ErrorKind.MISSING_SEPARATOR, "index word not followed by space or newline", pos
        )
    kind = _delimiter_kind(text[pos], pos)
    start = pos
    pos += 1

    if kind is DelimiterKind.GOOD_AND_CHECKED:
        return IndexElement(kind), pos

    if kind is DelimiterKind.BARE:
        if pos < len(text) and text[pos] in _BARE_DIGITS:
            return IndexElement(kind, raw=text[pos]), pos + 1
        raise ParseError(ErrorKind.UNRECOGNIZED_ELEMENT, "'|' must be followed by 1 or 2", pos)

    closer = _CLOSERS[kind]
    end = text.find(closer, pos)
    newline = text.find("\n", pos)
    if end < 0 or 0 <= newline < end:
        raise ParseError(ErrorKind.UNTERMINATED_ANNOTATION, f"no closing {closer!r}", start)
    value = text[pos:end]
    if kind is DelimiterKind.SENSE:
        return IndexElement(kind, _sense_number(value, pos), value), end + 1
    return IndexElement(kind, value, value), end + 1


def _first(found: Dict[DelimiterKind, IndexElement], kind: DelimiterKind):
    element = found.get(kind)
    return element.value if element is not None else None


def reduce_elements(headword: str, elements: List[IndexElement]) -> IndexWord:
    """Fold annotations into an IndexWord; the first element of each kind wins."""
    found: Dict[DelimiterKind, IndexElement] = {}
    for e in elements:
        found.setdefault(e.kind, e)
    return IndexWord(
        headword=headword,
        reading=_first(found, DelimiterKind.READING),
        sense_number=_first(found, DelimiterKind.SENSE),
        form_in_sentence=_first(found, DelimiterKind.FORM),
        good_and_checked=DelimiterKind.GOOD_AND_CHECKED in found,
    )


def parse_index_token(text: str, pos: int = 0) -> Tuple[str, List[IndexElement], int]:
    """
    Parse one index word at `pos` without reducing it.

    Returns the headword, its elements in the order written, and the position
    just past the trailing space/newline.
    """
    m = _HEADWORD_RE.match(text, pos)
    if m is None:
        found: Optional[str] = text[pos] if pos < len(text) else None
        raise ParseError(
            ErrorKind.EMPTY_HEADWORD,
            f"expected a headword, found {found!r}" if found else "expected a headword",
            pos,
        )
    headword = m.group()
    pos = m.end()

    elements: List[IndexElement] = []
    while not (pos < len(text) and text[pos] in _WORD_END):
        element, pos = parse_index_element(text, pos)
        elements.append(element)
    return headword, elements, pos + 1


def parse_index_word(text: str, pos: int = 0) -> Tuple[IndexWord, int]:
    """
    Parse one index word at `pos`, including its trailing space/newline.

    Returns the word and the position just past the delimiter.
    """
    headword, elements, pos = parse_index_token(text, pos)
    return reduce_elements(headword, elements), pos


def serialize_token(headword: str, elements: List[IndexElement]) -> str:
    """Write a token back exactly as parsed: elements in their order, payloads verbatim."""
    parts = [headword]
    for e in elements:
        if e.kind is DelimiterKind.GOOD_AND_CHECKED:
            parts.append("~")
        elif e.kind is DelimiterKind.BARE:
            parts.append(f"|{e.raw}")
        else:
            parts.append(f"{e.kind.value}{e.raw}{_CLOSERS[e.kind]}")
    return "".join(parts)


def parse_index_field(text: str, pos: int = 0) -> Tuple[IndexWord, ...]:
    """Parse index words from `pos` until the end of `text` (at least one)."""
    words: List[IndexWord] = []
    while True:
        word, pos = parse_index_word(text, pos)
        words.append(word)
        if pos >= len(text):
            return tuple(words)

from __future__ import annotations
from typing import Tuple

from .errors import ErrorKind, ParseError
from .grammar import parse_index_field
from .models import ExampleSentence

U32_MAX = 2 ** 32 - 1


def _field(line: str, pos: int) -> Tuple[str, int]:
    """Return the text up to the next tab and the position just past that tab."""
    end = line.find("\t", pos)
    if end < 0:
        raise ParseError(ErrorKind.MISSING_SEPARATOR, "expected a tab", len(line.rstrip("\n")))
    return line[pos:end], end + 1


def _sentence_id(line: str, pos: int) -> Tuple[int, int]:
    raw, nxt = _field(line, pos)
    if not (raw.isascii() and raw.isdigit()):
        raise ParseError(ErrorKind.MALFORMED_IDENTIFIER, f"{raw!r} is not a sentence id", pos)
    value = int(raw)
    if value > U32_MAX:
        raise ParseError(ErrorKind.MALFORMED_IDENTIFIER, f"{raw} does not fit in 32 bits", pos)
    return value, nxt


def parse(line: str) -> ExampleSentence:
    """
    Parse one corpus line:

        <ja id> TAB <en id> TAB <japanese> TAB <english> TAB <index words>

    The last index word must be followed by a newline (or a space at the very
    end of the input). Raises ParseError at the first mismatch; nothing is
    recovered.
    """
    japanese_id, pos = _sentence_id(line, 0)
    english_id, pos = _sentence_id(line, pos)
    japanese_text, pos = _field(line, pos)
    english_text, pos = _field(line, pos)
    indices = parse_index_field(line, pos)
    return ExampleSentence(
        japanese_sentence_id=japanese_id,
        english_sentence_id=english_id,
        japanese_text=japanese_text,
        english_text=english_text,
        indices=indices,
    )

# src/wwwjdic/models.py
"""
Data models for the example-sentence core.

This module defines three small, immutable data containers:

- IndexWord: one dictionary headword cited by a sentence, plus its annotations.
- ExampleSentence: one parsed corpus line (ids, both texts, index words).
- LineError: a corpus line that failed to parse, with its line number.

These classes do not contain parsing logic; the grammar and record modules
build them, and the index module shares them between headword buckets.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple

from .errors import ParseError


@total_ordering
@dataclass(frozen=True, slots=True)
class IndexWord:
    """
    A headword as cited in the index field of a corpus line.

    Attributes
    ----------
    headword : str
        Citation form of the word as found in the dictionary. Never empty.
    reading : Optional[str]
        Reading taken from a ``(...)`` annotation.
    sense_number : Optional[int]
        Dictionary sense taken from a ``[...]`` annotation.
    form_in_sentence : Optional[str]
        Surface form used in the sentence, taken from a ``{...}`` annotation.
    good_and_checked : bool
        True when the entry carries the ``~`` manual-verification marker.
    """
    headword: str
    reading: Optional[str] = None
    sense_number: Optional[int] = None
    form_in_sentence: Optional[str] = None
    good_and_checked: bool = False

    def _sort_key(self):
        # field by field; an absent annotation sorts before any present one
        return (
            self.headword,
            (self.reading is not None, self.reading or ""),
            (self.sense_number is not None, self.sense_number or 0),
            (self.form_in_sentence is not None, self.form_in_sentence or ""),
            self.good_and_checked,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IndexWord):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def to_token(self) -> str:
        """Canonical notation headword(reading)[sense]{form}~. For the bytes as written use grammar.serialize_token."""
        parts = [self.headword]
        if self.reading is not None:
            parts.append(f"({self.reading})")
        if self.sense_number is not None:
            parts.append(f"[{self.sense_number:02d}]")
        if self.form_in_sentence is not None:
            parts.append(f"{{{self.form_in_sentence}}}")
        if self.good_and_checked:
            parts.append("~")
        return "".join(parts)


@dataclass(frozen=True, slots=True)
class ExampleSentence:
    """
    One record of the corpus.

    Attributes
    ----------
    japanese_sentence_id : int
        First field of the line; opaque, not guaranteed unique.
    english_sentence_id : int
        Second field of the line; opaque, not guaranteed unique.
    japanese_text : str
        Third field, verbatim.
    english_text : str
        Fourth field, verbatim.
    indices : Tuple[IndexWord, ...]
        Index words in the order they appear in the fifth field.
    """
    japanese_sentence_id: int
    english_sentence_id: int
    japanese_text: str
    english_text: str
    indices: Tuple[IndexWord, ...] = ()

    @property
    def headwords(self) -> Tuple[str, ...]:
        return tuple(w.headword for w in self.indices)


@dataclass(frozen=True, slots=True)
class LineError:
    line_no: int      # 1-based, counted over the normalized corpus
    line: str
    error: ParseError

    @property
    def kind(self):
        return self.error.kind

from __future__ import annotations
import logging
from collections import defaultdict
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models import ExampleSentence, LineError

log = logging.getLogger(__name__)


class SentenceMap(Mapping):
    """
    Reverse index: headword -> sentences citing it, in corpus order.

    Read-only once built. A sentence that cites several headwords is one
    object referenced from each of their buckets; a sentence citing the same
    headword twice appears twice in that bucket.
    Lines that failed to parse under the "collect" policy are kept in `errors`.
    """
    __slots__ = ("_buckets", "_errors", "_sentence_count")

    def __init__(self,
                 buckets: Dict[str, Tuple[ExampleSentence, ...]],
                 errors: Tuple[LineError, ...] = (),
                 sentence_count: int = 0) -> None:
        self._buckets = buckets
        self._errors = errors
        self._sentence_count = sentence_count

    # ---- Mapping ----
    def __getitem__(self, headword: str) -> Tuple[ExampleSentence, ...]:
        return self._buckets[headword]

    def __iter__(self) -> Iterator[str]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return (f"SentenceMap(headwords={len(self)}, sentences={self._sentence_count}, "
                f"errors={len(self._errors)})")

    # ---- Query ----
    def lookup(self, headword: str) -> Tuple[ExampleSentence, ...]:
        """Sentences for `headword`; empty when the corpus never cites it."""
        return self._buckets.get(headword, ())

    def shortest(self, headword: str) -> Optional[ExampleSentence]:
        """The sentence with the shortest English text (first one on ties)."""
        bucket = self.lookup(headword)
        if not bucket:
            return None
        return min(bucket, key=lambda s: len(s.english_text))

    # ---- Getters ----
    @property
    def errors(self) -> Tuple[LineError, ...]:
        return self._errors

    @property
    def sentence_count(self) -> int:
        return self._sentence_count

    @property
    def entry_count(self) -> int:
        return sum(len(b) for b in self._buckets.values())


def build_sentence_map(sentences: Iterable[ExampleSentence],
                       errors: Iterable[LineError] = ()) -> SentenceMap:
    """Fold parsed sentences into a SentenceMap. Single writer; order is input order."""
    buckets: Dict[str, List[ExampleSentence]] = defaultdict(list)
    count = 0
    for s in sentences:
        count += 1
        for word in s.indices:
            buckets[word.headword].append(s)
    log.debug("folded %d sentences into %d headword buckets", count, len(buckets))
    return SentenceMap(
        {headword: tuple(bucket) for headword, bucket in buckets.items()},
        errors=tuple(errors),
        sentence_count=count,
    )


def lookup(index: SentenceMap, headword: str) -> Tuple[ExampleSentence, ...]:
    return index.lookup(headword)

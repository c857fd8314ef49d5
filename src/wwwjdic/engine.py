# wwwjdic/engine.py
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, Optional, Tuple

from . import config as CFG
from .index import SentenceMap
from .loader import load
from .models import ExampleSentence

log = logging.getLogger(__name__)


class Engine:
    """
    Thin session holder around one SentenceMap:
      - build(path=..., text=...): read corpus -> normalize/parse/index
      - reload():                  rebuild wholesale from the same source
      - lookup(word):              sentences citing `word`
      - details(word, limit):      payload for a details view
      - shutdown():                drop the index

    The engine is handed to whatever needs lookups (CLI, Flask view); there is
    no module-level instance.
    """

    # ------------- lifecycle -------------

    def __init__(self, *, verbose: bool = False) -> None:
        self.index: Optional[SentenceMap] = None
        self._source: Optional[Tuple[Optional[str], Optional[str]]] = None
        self._options: Dict[str, Any] = {}
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)

    # /* ~~~ Read the corpus (from a file or an already decoded string) and index it ~~~ */
    def build(
        self,
        path: Optional[str] = None,
        *,
        text: Optional[str] = None,
        encoding: Optional[str] = None,
        policy: Optional[str] = None,        # "collect" | "strict"
        mode: Optional[str] = None,          # "serial" | "threads" | "procs"
        workers: Optional[int] = None,
    ) -> SentenceMap:
        if path is not None and text is not None:
            raise ValueError("build(): pass either a corpus path or corpus text, not both")

        source_path = None
        if text is None:
            source_path = path or CFG.DEFAULT_CORPUS_PATH
            log.info("Reading corpus from %s", source_path)
            with open(source_path, "r", encoding=encoding or CFG.ENCODING) as f:
                text = f.read()

        index = load(text, policy=policy, mode=mode, workers=workers)

        # Commit engine state only once the whole load succeeded
        self.index = index
        self._source = (source_path, None if source_path else text)
        self._options = {"encoding": encoding, "policy": policy, "mode": mode, "workers": workers}
        log.info("Engine build() complete: sentences=%d headwords=%d errors=%d",
                 index.sentence_count, len(index), len(index.errors))
        return index

    # /* ~~~ Rebuild from the same source; the old index is replaced, never patched ~~~ */
    def reload(self) -> SentenceMap:
        if self._source is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        path, text = self._source
        return self.build(path, text=text, **self._options)

    # ------------- query -------------

    def lookup(self, word: str) -> Tuple[ExampleSentence, ...]:
        return self._require().lookup(word)

    def details(self, word: str, *, limit: Optional[int] = None) -> Dict[str, Any]:
        """Sentences to show for `word`: the first `limit` in corpus order plus the shortest one."""
        index = self._require()
        limit = CFG.MAX_DETAILS if limit is None else max(0, int(limit))
        sentences = index.lookup(word)
        shortest = index.shortest(word)
        return {
            "word": word,
            "total": len(sentences),
            "sentences": [asdict(s) for s in sentences[:limit]],
            "shortest": asdict(shortest) if shortest is not None else None,
        }

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        self._source = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require(self) -> SentenceMap:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.index

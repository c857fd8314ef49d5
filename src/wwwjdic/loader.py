"""
Corpus loading: normalize -> split into lines -> parse (in parallel) -> fold.

Lines are independent, so parsing is spread over a worker pool. Lines are cut
into contiguous shards and `Executor.map` hands the shard results back in
submission order, so concatenating them restores corpus order before the
single-writer fold in `build_sentence_map`.
"""
from __future__ import annotations
import logging
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple, Union

from . import config as CFG
from .errors import CorpusLoadError, ParseError
from .index import SentenceMap, build_sentence_map
from .models import ExampleSentence, LineError
from .normalize import DEFAULT_RULES, iter_lines, normalize_corpus
from .record import parse

log = logging.getLogger(__name__)

ParseResult = Union[ExampleSentence, ParseError]

MODES = ("serial", "threads", "procs")
POLICIES = ("collect", "strict")


def _parse_one(line: str) -> ParseResult:
    try:
        return parse(line)
    except ParseError as e:
        return e


def _parse_shard(shard: List[str]) -> List[ParseResult]:
    return [_parse_one(line) for line in shard]


def _shards(lines: Sequence[str], size: int) -> List[List[str]]:
    return [list(lines[i:i + size]) for i in range(0, len(lines), size)]


def parse_lines(
    lines: Sequence[str],
    *,
    mode: Optional[str] = None,
    workers: Optional[int] = None,
    shard_size: Optional[int] = None,
    threshold: Optional[int] = None,
) -> List[ParseResult]:
    """
    Parse every line; return one ExampleSentence or ParseError per line, in input order.

    mode: "serial", "threads" or "procs" (default: config.PARSE_MODE).
    Inputs shorter than `threshold` lines are parsed serially whatever the mode.
    """
    mode = (mode or CFG.PARSE_MODE).lower()
    if mode not in MODES:
        raise ValueError(f"unknown parse mode {mode!r}; expected one of {MODES}")
    shard_size = max(1, int(shard_size or CFG.SHARD_SIZE))
    threshold = CFG.PARALLEL_THRESHOLD if threshold is None else threshold

    if mode == "serial" or len(lines) < threshold:
        return _parse_shard(list(lines))

    workers = workers or CFG.resolve_workers()
    shards = _shards(lines, shard_size)
    exec_cls = ThreadPoolExecutor if mode == "threads" else ProcessPoolExecutor
    log.debug("parsing %d lines in %d shards (%s, workers=%d)", len(lines), len(shards), mode, workers)

    results: List[ParseResult] = []
    with exec_cls(max_workers=workers) as ex:
        for shard_results in ex.map(_parse_shard, shards):
            results.extend(shard_results)
    return results


def load(
    corpus: str,
    *,
    policy: Optional[str] = None,
    mode: Optional[str] = None,
    workers: Optional[int] = None,
    rules: Sequence[Tuple[str, str]] = DEFAULT_RULES,
) -> SentenceMap:
    """
    Build the headword -> sentences index from the decoded corpus text.

    policy "collect" (default) skips lines that do not parse and lists them in
    SentenceMap.errors; "strict" raises CorpusLoadError for the first one.
    Blank lines are not records and are skipped.
    """
    policy = (policy or CFG.ERROR_POLICY).lower()
    if policy not in POLICIES:
        raise ValueError(f"unknown error policy {policy!r}; expected one of {POLICIES}")

    text = normalize_corpus(corpus, rules)
    numbered = [(no, line) for no, line in enumerate(iter_lines(text), start=1) if line != "\n"]

    t0 = time.perf_counter()
    results = parse_lines([line for _, line in numbered], mode=mode, workers=workers)
    log.info("parsed %d example sentences in %d milliseconds",
             len(results), (time.perf_counter() - t0) * 1000)

    sentences: List[ExampleSentence] = []
    errors: List[LineError] = []
    for (line_no, line), result in zip(numbered, results):
        if isinstance(result, ParseError):
            failure = LineError(line_no=line_no, line=line, error=result)
            if policy == "strict":
                raise CorpusLoadError(failure)
            log.warning("skipping line %d (%s): %s", line_no, result.kind.value, result.message)
            errors.append(failure)
        else:
            sentences.append(result)

    t1 = time.perf_counter()
    index = build_sentence_map(sentences, errors)
    log.info("indexing example sentences took %d milliseconds", (time.perf_counter() - t1) * 1000)
    if errors:
        log.warning("%d of %d lines could not be parsed", len(errors), len(numbered))
    return index

"""
wwwjdic example-sentence core.

Parses the tab-delimited wwwjdic sentence-dictionary linking corpus into
ExampleSentence records and builds a reverse index from dictionary headword
to every sentence that cites it.

Main Functions:
    parse(line): parse one corpus line into an ExampleSentence
    load(corpus): normalize, parse and index a whole decoded corpus
    lookup(index, headword): sentences citing headword (empty if none)

Example Usage:
    from wwwjdic import load, lookup

    index = load(open("wwwjdic.csv", encoding="utf-8").read())
    for sentence in lookup(index, "愛する"):
        print(sentence.japanese_text, sentence.english_text)
"""
from .engine import Engine
from .errors import CorpusLoadError, ErrorKind, ParseError
from .index import SentenceMap, build_sentence_map, lookup
from .loader import load, parse_lines
from .models import ExampleSentence, IndexWord, LineError
from .normalize import normalize_corpus
from .record import parse

__version__ = "0.1.0"
__all__ = [
    "Engine",
    "CorpusLoadError", "ErrorKind", "ParseError",
    "SentenceMap", "build_sentence_map", "lookup",
    "load", "parse_lines",
    "ExampleSentence", "IndexWord", "LineError",
    "normalize_corpus",
    "parse",
]

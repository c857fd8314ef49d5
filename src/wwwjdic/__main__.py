from __future__ import annotations
import argparse, json, sys

from . import config as CFG
from .engine import Engine
from .errors import CorpusLoadError


def _print_table(word: str, details: dict) -> None:
    rows = details["sentences"]
    if not rows:
        print(f"{word}: (no sentences)"); return
    print(f"{word}: {details['total']} sentence(s), showing {len(rows)}")
    print("#   JA id    EN id    Japanese / English")
    for i, s in enumerate(rows, 1):
        print(f"{i:<3} {s['japanese_sentence_id']:<8} {s['english_sentence_id']:<8} {s['japanese_text']}")
        print(f"{'':<21} {s['english_text']}")
    if details["shortest"]:
        print(f"shortest: {details['shortest']['japanese_text']}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Look up wwwjdic example sentences by headword")
    p.add_argument("--corpus", default=None, help=f"Corpus file (default: {CFG.DEFAULT_CORPUS_PATH})")
    p.add_argument("--encoding", default=None)
    p.add_argument("--q", action="append", default=[], help="Headword to look up (repeatable)")
    p.add_argument("--repl", action="store_true", help="Interactive loop after loading")
    p.add_argument("-k", type=int, default=CFG.MAX_DETAILS, help="Sentences shown per headword")
    p.add_argument("--mode", choices=["serial", "threads", "procs"], default=None)
    p.add_argument("--workers", type=int, default=None)
    p.add_argument("--strict", action="store_true", help="Abort on the first line that does not parse")
    p.add_argument("--errors", action="store_true", help="List lines that failed to parse")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    eng = Engine(verbose=args.verbose)
    try:
        try:
            index = eng.build(
                args.corpus,
                encoding=args.encoding,
                policy="strict" if args.strict else None,
                mode=args.mode,
                workers=args.workers,
            )
        except (OSError, CorpusLoadError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

        if args.errors:
            for failure in index.errors:
                print(f"line {failure.line_no}: {failure.error}", file=sys.stderr)

        def run_query(word: str) -> None:
            details = eng.details(word, limit=args.k)
            if args.json:
                print(json.dumps(details, ensure_ascii=False, indent=2))
            else:
                _print_table(word, details)

        for word in args.q:
            run_query(word)

        if args.repl:
            print("Type a headword (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())

import os

# where the corpus lives unless a path is given explicitly
DEFAULT_CORPUS_PATH: str = os.environ.get("WWWJDIC_CORPUS", "resources/wwwjdic.csv")
ENCODING: str = "utf-8"

# parsing mode:
# - "procs" for CPU-bound parsing across worker processes
# - "threads" for a thread pool (useful when processes are unavailable)
# - "serial" to parse in the calling thread
PARSE_MODE: str = os.environ.get("WWWJDIC_MODE", "procs")

# workers (0 -> WWWJDIC_WORKERS, else cpu count; resolved when parsing starts)
WORKERS: int = 0


def resolve_workers() -> int:
    if WORKERS:
        return WORKERS
    raw = os.environ.get("WWWJDIC_WORKERS", "").strip()
    if not raw:
        return os.cpu_count() or 4
    try:
        n = int(raw)
    except ValueError:
        raise ValueError(f"WWWJDIC_WORKERS must be a positive integer, got {raw!r}") from None
    if n < 1:
        raise ValueError(f"WWWJDIC_WORKERS must be a positive integer, got {raw!r}")
    return n


# lines per shard handed to one worker
SHARD_SIZE: int = 2_000

# below this many lines the pool start-up costs more than it saves
PARALLEL_THRESHOLD: int = 5_000

# "collect" skips bad lines and reports them, "strict" aborts on the first one
ERROR_POLICY: str = "collect"

# how many sentences the details view shows
MAX_DETAILS: int = 20

VERBOSE: bool = os.environ.get("WWWJDIC_VERBOSE") == "1"

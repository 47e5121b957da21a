import os
import sys

# Debug output controlled by environment variable ARCHIVER_DEBUG
_DEBUG = os.environ.get("ARCHIVER_DEBUG", "").lower() in {"1", "true", "yes"}


def set_debug(enabled: bool) -> None:
    global _DEBUG
    _DEBUG = enabled


def dbg(tag: str, msg: str) -> None:
    if _DEBUG:
        print(f"[{tag}] {msg}", file=sys.stderr)

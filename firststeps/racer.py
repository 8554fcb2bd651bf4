"""Race two URLs and report which answers first."""

import contextlib
import queue
import threading
import urllib.request


class RaceTimeoutError(Exception):
    """Neither URL answered within the time limit."""


def racer(a: str, b: str) -> str:
    """Return whichever URL answers first, within ten seconds."""
    return race(a, b, 10.0)


def race(a: str, b: str, time_limit: float) -> str:
    """Return whichever URL answers first within ``time_limit`` seconds."""
    finished: "queue.Queue[str]" = queue.Queue()
    for url in (a, b):
        threading.Thread(target=_ping, args=(url, finished), daemon=True).start()
    try:
        return finished.get(timeout=time_limit)
    except queue.Empty:
        raise RaceTimeoutError(f"time limit exceeded to {a} and {b}") from None


def _ping(url: str, finished: "queue.Queue[str]") -> None:
    with contextlib.suppress(OSError, ValueError):
        urllib.request.urlopen(url).close()
    finished.put(url)
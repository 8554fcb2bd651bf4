"""A thread-safe counter."""

import threading


class Counter:
    """Counts increments safely across threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def increase(self) -> None:
        """Add one to the count."""
        with self._lock:
            self._value += 1

    @property
    def value(self) -> int:
        """The current count."""
        return self._value
"""A handler that serves data fetched from a cancellable store."""

import threading
from abc import ABC, abstractmethod
from typing import Callable, Optional, TextIO


class Store(ABC):
    """A source of data whose fetch can be cancelled."""

    @abstractmethod
    def fetch(self, cancelled: threading.Event) -> str:
        """Return the data, or raise if ``cancelled`` is set first."""


def server(store: Store) -> Callable[..., None]:
    """Return a handler writing the store's data, or nothing if fetching fails."""

    def handler(writer: TextIO, cancelled: Optional[threading.Event] = None) -> None:
        try:
            data = store.fetch(cancelled or threading.Event())
        except Exception:
            return
        writer.write(data)

    return handler
"""Visit every string nested inside a value."""

import dataclasses
from collections.abc import Callable, Mapping
from typing import Any


def walk(x: Any, fn: Callable[[str], None]) -> None:
    """Call ``fn`` on every string found in ``x``.

    Dataclass fields are visited in declaration order, lists and tuples in
    sequence order, and mappings by their values. Other values are ignored.
    """
    if isinstance(x, str):
        fn(x)
    elif dataclasses.is_dataclass(x) and not isinstance(x, type):
        for field in dataclasses.fields(x):
            walk(getattr(x, field.name), fn)
    elif isinstance(x, Mapping):
        for value in x.values():
            walk(value, fn)
    elif isinstance(x, (list, tuple)):
        for item in x:
            walk(item, fn)
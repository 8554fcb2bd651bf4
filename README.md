# firststeps

A collection of small, focused Python modules. Each one does a single job.
The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it offers |
| --- | --- |
| `firststeps.arrays` | `total(numbers)`, `sum_all(*sequences)` and `sum_rest(*sequences)` (sum of all but the first element; 0 for an empty sequence) |
| `firststeps.adder` | `add(x, y)` |
| `firststeps.repeat` | `repeat(character, times)`; a non-positive count gives `""` |
| `firststeps.hello` | `hello(name, language)`: greetings in English (the default), Spanish, Russian and Portuguese; an empty name greets the world |
| `firststeps.greeting` | `greeting(writer, name)` writes `Hello, <name>` to a writer; `GreetingHandler` answers every GET with `Hello, word` |
| `firststeps.dictionary` | `Dictionary` (a `dict`) with `search`, `add`, `update`, `delete`; raises `WordNotFoundError`, `WordAlreadyExistsError`, `WordDoesNotExistError`, all subclasses of `DictionaryError` |
| `firststeps.wallet` | `Wallet` holding a `Bitcoin` balance (`balance` property); `withdraw` raises `InsufficientBalanceError` when the amount exceeds the balance |
| `firststeps.shapes` | Frozen dataclasses `Rectangle`, `Circle`, `Triangle` implementing the `Shape` ABC's `area()`, plus `perimeter(rectangle)` |
| `firststeps.counter` | A thread-safe `Counter` with `increase()` and a `value` property |
| `firststeps.concurrency` | `check_websites(checker, urls)` runs a checker over the URLs in threads and returns a `{url: result}` dict |
| `firststeps.racer` | `racer(a, b)` and `race(a, b, time_limit)` return whichever URL answers an HTTP request first; `RaceTimeoutError` if neither does in time (ten seconds for `racer`) |
| `firststeps.walk` | `walk(x, fn)` calls `fn` on every string inside `x`, descending into dataclass fields, lists, tuples and mapping values |
| `firststeps.store` | `Store` ABC whose `fetch(cancelled)` takes a `threading.Event`, and `server(store)` returning a handler `handler(writer, cancelled=None)` that writes the fetched data, or nothing if fetching raises |

## Examples

```python
import io
import threading

from firststeps.hello import hello
from firststeps.arrays import sum_all, sum_rest
from firststeps.dictionary import Dictionary, WordNotFoundError
from firststeps.wallet import Wallet, Bitcoin
from firststeps.walk import walk
from firststeps.store import Store, server

hello("Antonio", "spanish")      # 'Hola, Antonio!'
hello()                          # 'Hello, world!'
sum_all([1, 2], [0, 9])          # [3, 9]
sum_rest([], [0, 9])             # [0, 9]

words = Dictionary()
words.add("test", "just a test")
words.search("test")             # 'just a test'
try:
    words.search("missing")
except WordNotFoundError as error:
    print(error)                 # word not found

wallet = Wallet(Bitcoin(20))
wallet.withdraw(Bitcoin(10))
str(wallet.balance)              # '10 BTC'

found = []
walk({"a": ["x", 1, ("y",)]}, found.append)
found                            # ['x', 'y']


class FixedStore(Store):
    def fetch(self, cancelled: threading.Event) -> str:
        return "Hello, world!"


out = io.StringIO()
server(FixedStore())(out)
out.getvalue()                   # 'Hello, world!'
```

## Commands

Print a greeting (to the world unless a name is given, optionally in
`spanish`, `russian` or `portuguese`):

```
firststeps-hello
firststeps-hello Antonio --language spanish
```

Serve a greeting over HTTP on port 5001 until interrupted; every GET request
gets `Hello, word`:

```
firststeps-greeting
```

## What it does not do

- `server(store)` returns a plain callable that writes to a text writer; it is
  not attached to any HTTP server, and the only HTTP server in the package is
  the fixed greeting served by `firststeps-greeting`.
- `Store` is an abstract base class only; no concrete store is included.
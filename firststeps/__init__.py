"""Small, focused building blocks: sums, greetings, a dictionary, a wallet,
shapes, a thread-safe counter, concurrent checks, URL racing, string walking
and a cancellable store handler."""

__version__ = "0.1.0"
"""Greetings in a few languages."""

import argparse

_PREFIXES = {
    "spanish": "Hola, ",
    "russian": "Привет, ",
    "portuguese": "Olá, ",
}
_ENGLISH_PREFIX = "Hello, "


def hello(name: str = "", language: str = "") -> str:
    """Greet ``name`` (or the world) in ``language``, defaulting to English."""
    return f"{_PREFIXES.get(language, _ENGLISH_PREFIX)}{name or 'world'}!"


def main(argv: list[str] | None = None) -> int:
    """Print a greeting, to the world unless a name is given."""
    parser = argparse.ArgumentParser(description="Print a greeting.")
    parser.add_argument("name", nargs="?", default="world", help="who to greet")
    parser.add_argument(
        "-l", "--language", default="", help="spanish, russian or portuguese"
    )
    args = parser.parse_args(argv)
    print(hello(args.name, args.language))
    return 0
"""Greetings in a few languages."""

import argparse
import sys

SPANISH = "Spanish"
FRENCH = "French"

_PREFIXES = {
    SPANISH: "Hola, ",
    FRENCH: "Bonjour, ",
}
_ENGLISH_PREFIX = "Hello, "


def _greeting_prefix(language: str) -> str:
    return _PREFIXES.get(language, _ENGLISH_PREFIX)


def hello(name: str, language: str) -> str:
    """Greet name in language; an empty name greets the World."""
    return _greeting_prefix(language) + (name or "World")


def main(argv: list[str] | None = None) -> int:
    """Print a greeting; by default to the World in English."""
    parser = argparse.ArgumentParser(description="Print a greeting.")
    parser.add_argument("name", nargs="?", default="World")
    parser.add_argument("language", nargs="?", default="English")
    args = parser.parse_args(argv)
    print(hello(args.name, args.language))
    return 0


if __name__ == "__main__":
    sys.exit(main())
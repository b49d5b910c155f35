"""Repeating strings."""


def repeat(character: str, repeat_count: int) -> str:
    """Return character repeated repeat_count times, built up piece by piece."""
    return "".join(character for _ in range(repeat_count))


def string_repeat(character: str, repeat_count: int) -> str:
    """Return character repeated repeat_count times.

    A negative count raises ValueError.
    """
    if repeat_count < 0:
        raise ValueError("negative repeat count")
    return character * repeat_count
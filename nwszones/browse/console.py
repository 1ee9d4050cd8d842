"""Blocking line-based console I/O."""

from collections.abc import Callable

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def read_line(prompt: str) -> str:
    """Prompt and read one line; end-of-input reads as blank."""
    try:
        return input(prompt)
    except EOFError:
        return ""


def write(text: str) -> None:
    print(text)

"""Prompt-and-answer channel over a pair of text streams."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Writes prompts to one stream and reads answers line by line from another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text to the output stream and flush it."""
        self.stdout.write(text)
        flush = getattr(self.stdout, "flush", None)
        if flush is not None:
            flush()

    def _next_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line

    def read_line(self, prompt: str = "") -> str:
        """Show the prompt and return the next whole line, without its line ending."""
        if prompt:
            self.write(prompt)
        return self._next_line().rstrip("\r\n")

    def read_word(self, prompt: str = "") -> str:
        """Show the prompt and return the first word of the next non-blank line.

        The rest of that line is discarded.
        """
        if prompt:
            self.write(prompt)
        while True:
            words = self._next_line().split()
            if words:
                return words[0]

    def read_int(self, prompt: str = "") -> int:
        """Read a word and return it as an integer.

        Raises ValueError if the word is not an integer.
        """
        word = self.read_word(prompt)
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"not an integer: {word!r}") from None
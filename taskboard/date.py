"""Calendar date used as a task deadline."""

from __future__ import annotations

from dataclasses import dataclass

from taskboard.console import Console

MIN_YEAR = 2020
MAX_YEAR = 2050


def _ask_in_range(console: Console, prompt: str, low: int, high: int) -> int:
    while True:
        try:
            value = console.read_int(prompt)
        except ValueError:
            continue
        if low <= value <= high:
            return value


@dataclass(frozen=True)
class Date:
    """A year, month and day, printed as year-month-day without padding."""

    year: int
    month: int
    day: int

    @classmethod
    def prompt(cls, console: Console) -> Date:
        """Ask for year, month and day, repeating each question until it is in range."""
        year = _ask_in_range(console, "Enter year: ", MIN_YEAR, MAX_YEAR)
        month = _ask_in_range(console, "Enter month: ", 1, 12)
        day = _ask_in_range(console, "Enter day: ", 1, 31)
        return cls(year, month, day)

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"
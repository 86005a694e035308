"""Tasks with priority, status and an interactive edit menu."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum

from taskboard.console import Console
from taskboard.date import Date

_task_ids = itertools.count(1)


class Prio(Enum):
    LOW = 1
    MID = 2
    HIGH = 3
    URGENT = 4


class Status(Enum):
    NOT_STARTED = 1
    IN_PROGRESS = 2
    COMPLETED = 3


_EDIT_MENU = (
    "What do you want to edit:"
    "\n1) Title\n2) Description\n3) Category\n"
    "4) Deadline\n5) Status\n6) Priority\n7) Exit\n"
)


def _ask_int(console: Console, complaint: str) -> int:
    while True:
        try:
            return console.read_int()
        except ValueError:
            console.write(complaint)


@dataclass
class Task:
    """A task owned by a user; every new task gets the next id."""

    uid: int = 0
    title: str = ""
    description: str = ""
    deadline: Date | None = None
    category: str = ""
    task_id: int = field(init=False, default_factory=lambda: next(_task_ids))
    prio: Prio = field(init=False, default=Prio.LOW)
    status: Status = field(init=False, default=Status.NOT_STARTED)

    def choose_status(self, console: Console) -> Status:
        """Ask for a new status; an unknown choice falls back to NOT_STARTED."""
        console.write("Switch status:\n1) NOT_STARTED\n2) IN_PROGRESS\n3) COMPLETED\n")
        choice = _ask_int(console, "Invalid input! Enter integer [1-3]\n")
        try:
            self.status = Status(choice)
        except ValueError:
            console.write("Defaulting Status to NOT_STARTED\n")
            self.status = Status.NOT_STARTED
        return self.status

    def choose_priority(self, console: Console) -> Prio:
        """Ask for a new priority; an unknown choice falls back to LOW."""
        console.write("Switch priority:\n1) LOW\n2) MID\n3) HIGH\n4) URGENT\n")
        choice = _ask_int(console, "Invalid input! Enter integer [1-4]\n")
        try:
            self.prio = Prio(choice)
        except ValueError:
            console.write("Defaulting priority to LOW: \n")
            self.prio = Prio.LOW
        return self.prio

    def edit(self, console: Console) -> None:
        """Run the edit menu until the user chooses to exit."""
        while True:
            console.write(_EDIT_MENU)
            try:
                choice = console.read_int()
            except ValueError:
                console.write("Invalid input! Please enter a number.\n")
                continue
            if choice == 1:
                self.title = console.read_line("New title: ")
            elif choice == 2:
                self.description = console.read_line("New description: ")
            elif choice == 3:
                self.category = console.read_line("New category: ")
            elif choice == 4:
                console.write("New deadline:\n")
                self.deadline = Date.prompt(console)
            elif choice == 5:
                self.choose_status(console)
            elif choice == 6:
                self.choose_priority(console)
            elif choice == 7:
                console.write("Exiting edit menu!\n")
                return
            else:
                console.write("Invalid input:\n")

    def describe(self) -> str:
        """Return the task's details as printed in listings."""
        deadline = "" if self.deadline is None else str(self.deadline)
        return (
            f"Task Id - {self.task_id}"
            f"\nUID - {self.uid}"
            f"\nTitle - {self.title}"
            f"\nDescription - {self.description}"
            f"\nDeadline - {deadline}"
            f"\nCategory - {self.category}\n"
        )
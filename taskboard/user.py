"""Users and the tasks they own."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from taskboard.console import Console
from taskboard.task import Task

_user_ids = itertools.count(1)


class TaskNotFoundError(LookupError):
    """Raised when a user has no task with the given id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"No task found with ID {task_id}")
        self.task_id = task_id


@dataclass(eq=False)
class User:
    """A registered user; every new user gets the next id and starts logged in."""

    name: str
    password: str = field(repr=False)
    uid: int = field(init=False, default_factory=lambda: next(_user_ids))
    tasks: list[Task] = field(init=False, default_factory=list)
    logged_in: bool = field(init=False, default=True)

    def add_task(self, task: Task) -> None:
        """Give the task to this user."""
        self.tasks.append(task)

    def search_task(self, task_id: int) -> Task | None:
        """Return the user's task with this id, or None."""
        return next((task for task in self.tasks if task.task_id == task_id), None)

    def _require_task(self, task_id: int) -> Task:
        task = self.search_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def delete_task(self, task_id: int) -> Task:
        """Remove the task with this id from the user and return it."""
        task = self._require_task(task_id)
        self.tasks = [kept for kept in self.tasks if kept is not task]
        return task

    def edit_task(self, task_id: int, console: Console) -> Task:
        """Run the edit menu for the task with this id and return the task."""
        task = self._require_task(task_id)
        task.edit(console)
        return task

    def list_tasks(self) -> str:
        """Return the user's tasks, numbered from 1, as printed in listings."""
        return "".join(
            f"\n -Task {number}-\n{task.describe()}"
            for number, task in enumerate(self.tasks, 1)
        )

    def login(self, password: str) -> bool:
        """Log in if the password matches; return whether it did."""
        if password == self.password:
            self.logged_in = True
            return True
        return False

    def logout(self) -> None:
        self.logged_in = False
"""Registry of all users and all tasks."""

from __future__ import annotations

from taskboard.console import Console
from taskboard.date import Date
from taskboard.task import Task
from taskboard.user import User

_TASK_RULE = "---------------------------------\n"
_USER_RULE = "----------------------------\n"


class UserNotFoundError(LookupError):
    """Raised when no user has the given id."""

    def __init__(self, uid: int) -> None:
        super().__init__(f"No user found with ID {uid}")
        self.uid = uid


class TaskManager:
    """Holds the users and every task created through them."""

    def __init__(self) -> None:
        self.users: list[User] = []
        self.tasks: list[Task] = []

    def find_user(self, uid: int) -> User:
        """Return the user with this id or raise UserNotFoundError."""
        for user in self.users:
            if user.uid == uid:
                return user
        raise UserNotFoundError(uid)

    def register_user(self, console: Console) -> int:
        """Ask for a name and password, register the user and return its id."""
        name = console.read_word("Enter name: ")
        entered = console.read_word("Enter password: ")
        user = User(name, entered)
        self.users.append(user)
        return user.uid

    def login(self, console: Console) -> int:
        """Ask for a user id and password and try to log that user in.

        Returns the id of the user that was found, whether or not the
        password matched. Raises UserNotFoundError for an unknown id and
        ValueError if the id is not a number.
        """
        uid = console.read_int("Enter User ID: ")
        entered = console.read_word("Enter password: ")
        user = self.find_user(uid)
        if user.login(entered):
            console.write("You are logged in\n")
        else:
            console.write("Incorrect password!\n")
        return user.uid

    def logout(self, uid: int) -> None:
        self.find_user(uid).logout()

    def add_task(self, uid: int, console: Console) -> Task:
        """Ask for the details of a new task, give it to the user and return it."""
        user = self.find_user(uid)
        title = console.read_line("Enter title: ")
        description = console.read_line("Enter description: ")
        deadline = Date.prompt(console)
        category = console.read_line("Enter category: ")
        task = Task(uid, title, description, deadline, category)
        task.choose_priority(console)
        task.choose_status(console)
        user.add_task(task)
        self.tasks.append(task)
        return task

    def delete_task(self, uid: int, task_id: int) -> Task:
        """Delete one of the user's tasks and return it.

        Raises UserNotFoundError or TaskNotFoundError.
        """
        task = self.find_user(uid).delete_task(task_id)
        for index, known in enumerate(self.tasks):
            if known.task_id == task_id:
                del self.tasks[index]
                break
        return task

    def edit_task(self, uid: int, task_id: int, console: Console) -> Task:
        """Run the edit menu for one of the user's tasks and return it."""
        return self.find_user(uid).edit_task(task_id, console)

    def display_task(self, uid: int) -> str:
        """Return the listing of the user's tasks."""
        return self.find_user(uid).list_tasks()

    def display_all_tasks(self) -> str:
        """Return the listing of every task."""
        if not self.tasks:
            return "There is no tasks yet!\n"
        return "".join(_TASK_RULE + task.describe() for task in self.tasks)

    def display_all_users(self) -> str:
        """Return the listing of every user's id and name."""
        if not self.users:
            return "No users registered yet!\n"
        return "".join(
            f"{_USER_RULE}  User ID - {user.uid}\n  Username - {user.name}\n"
            for user in self.users
        )
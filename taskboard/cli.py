"""Interactive main menu."""

from __future__ import annotations

from taskboard.console import Console
from taskboard.manager import TaskManager, UserNotFoundError
from taskboard.user import TaskNotFoundError

_MENU = (
    "\n=== Main Menu ===\n"
    "1) Register\n"
    "2) Login\n"
    "3) Logout\n"
    "4) Add Task\n"
    "5) Display My Tasks\n"
    "6) Edit a Task\n"
    "7) Delete a Task\n"
    "8) Display all tasks\n"
    "9) Display all users\n"
    "0) Exit\n"
    "Choice: "
)


def _read_task_id(console: Console, prompt: str) -> int | None:
    try:
        return console.read_int(prompt)
    except ValueError:
        console.write("Invalid task ID!\n")
        return None


def run(console: Console) -> TaskManager:
    """Run the main menu until the user chooses to exit; return the manager."""
    manager = TaskManager()
    current: int | None = None

    while True:
        try:
            choice = console.read_int(_MENU)
        except ValueError:
            console.write("Invalid choice!\n")
            continue

        if choice == 0:
            console.write("Exiting...\n")
            return manager
        if choice == 1:
            current = manager.register_user(console)
            console.write(f"User registered with ID {current}.\n")
        elif choice == 2:
            try:
                current = manager.login(console)
            except UserNotFoundError as error:
                console.write(f"{error}\n")
                current = None
            except ValueError:
                console.write("Invalid user ID!\n")
                current = None
        elif choice in (3, 4, 5, 6, 7) and current is None:
            console.write("No user logged in!\n" if choice == 3 else "Please log in first!\n")
        elif choice == 3:
            manager.logout(current)
            current = None
        elif choice == 4:
            manager.add_task(current, console)
        elif choice == 5:
            console.write(manager.display_task(current))
        elif choice == 6:
            console.write(manager.display_task(current))
            task_id = _read_task_id(console, "Enter the ID of the task to edit: ")
            if task_id is not None:
                try:
                    manager.edit_task(current, task_id, console)
                except TaskNotFoundError as error:
                    console.write(f"{error}\n")
        elif choice == 7:
            console.write(manager.display_task(current))
            task_id = _read_task_id(console, "Enter the ID of the task to delete: ")
            if task_id is not None:
                try:
                    manager.delete_task(current, task_id)
                except TaskNotFoundError:
                    console.write("Task not found !\n")
                else:
                    console.write(f"Task with ID {task_id} deleted successfully.\n")
        elif choice == 8:
            console.write(manager.display_all_tasks())
        elif choice == 9:
            console.write(manager.display_all_users())
        else:
            console.write("Invalid choice!\n")


def main(argv: list[str] | None = None) -> int:
    """Start the menu on standard input and output."""
    console = Console()
    try:
        run(console)
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
    return 0
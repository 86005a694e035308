# taskboard

An interactive console task manager. Several users can register, log in and
keep their own list of tasks. Each task has a title, a description, a
deadline, a category, a priority (low, mid, high, urgent) and a status
(not started, in progress, completed).

## Installation

```
pip install .
```

## Running

```
taskboard
```

The main menu offers:

```
1) Register
2) Login
3) Logout
4) Add Task
5) Display My Tasks
6) Edit a Task
7) Delete a Task
8) Display all tasks
9) Display all users
0) Exit
```

- Registering asks for a name and a password (the first word of each answer
  is used), creates the user, makes them the current user and prints their
  user ID. New users start logged in.
- Logging in asks for a user ID and a password. An unknown ID prints
  `No user found with ID ...` and leaves no current user. A known ID becomes
  the current user; the menu then prints either `You are logged in` or
  `Incorrect password!`.
- Adding a task asks for a title, a description, a deadline, a category, a
  priority (1–4) and a status (1–3). A priority or status outside its range
  falls back to LOW or NOT_STARTED.
- Deadlines are entered as a year (2020–2050), a month (1–12) and a day
  (1–31); answers out of range or not numbers are asked for again. They are
  shown as `year-month-day` without padding, for example `2025-3-7`.
- Editing a task opens a menu for the title, description, category, deadline,
  status and priority, until `7) Exit` is chosen.
- Menu entries 3 to 7 need a current user; otherwise the menu says so.

Task IDs and user IDs are handed out in order, starting from 1. The program
stops on `0`, or quietly at the end of input or on Ctrl-C.

## Using it from Python

The menu loop can be driven with any pair of text streams:

```python
import io

from taskboard.cli import run
from taskboard.console import Console

script = io.StringIO("1\nalice\npassword\n9\n0\n")
output = io.StringIO()
manager = run(Console(script, output))
print(output.getvalue())
print([user.name for user in manager.users])
```

`run` returns the `TaskManager` it used. If the input ends before `0` is
chosen, `run` raises `EOFError`.

The building blocks are:

- `taskboard.console.Console` – writes prompts and reads answers with
  `read_line`, `read_word` and `read_int` (the last raises `ValueError` for
  a non-number).
- `taskboard.date.Date` – a frozen year/month/day; `Date.prompt(console)`
  asks for one.
- `taskboard.task.Task`, with the `Prio` and `Status` enums – `edit`,
  `choose_priority`, `choose_status` and `describe`.
- `taskboard.user.User` – owns a list of tasks; `add_task`, `search_task`,
  `delete_task`, `edit_task`, `list_tasks`, `login` and `logout`.
- `taskboard.manager.TaskManager` – holds all users and tasks;
  `register_user`, `login`, `logout`, `add_task`, `delete_task`,
  `edit_task`, `display_task`, `display_all_tasks` and `display_all_users`.
  The `display_*` methods return text rather than printing it.

Looking up an unknown user raises `taskboard.manager.UserNotFoundError`; an
unknown task raises `taskboard.user.TaskNotFoundError`.

## What it does not do

- Nothing is saved. Users and tasks live in memory only and are gone when
  the program exits.
- Passwords are kept as plain text in memory and are checked only at the
  login prompt; the menu does not otherwise look at whether a user is
  logged in.

## Tests

```
pip install ".[test]"
pytest
```
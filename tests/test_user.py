import io

import pytest

from taskboard.console import Console
from taskboard.date import Date
from taskboard.task import Task
from taskboard.user import TaskNotFoundError, User

PASSWORD = "password"


def make_console(text=""):
    return Console(io.StringIO(text), io.StringIO())


def make_task(uid=0, title="Write report"):
    return Task(uid, title, "details", Date(2030, 5, 10), "work")


def test_name_is_kept():
    user = User("Unknown", PASSWORD)
    assert user.name == "Unknown"


def test_ids_increase_by_one():
    first = User("a", PASSWORD)
    second = User("b", PASSWORD)
    assert second.uid == first.uid + 1


def test_new_user_is_logged_in_and_can_log_out():
    user = User("a", PASSWORD)
    assert user.logged_in is True
    user.logout()
    assert user.logged_in is False


def test_login_checks_password():
    user = User("a", PASSWORD)
    user.logout()
    assert user.login("wrong") is False
    assert user.logged_in is False
    assert user.login(PASSWORD) is True
    assert user.logged_in is True


def test_search_finds_added_task():
    user = User("a", PASSWORD)
    task = make_task(user.uid)
    user.add_task(task)
    assert user.search_task(task.task_id) is task
    assert user.search_task(task.task_id + 1000) is None


def test_delete_removes_only_that_task():
    user = User("a", PASSWORD)
    kept, dropped = make_task(user.uid, "keep"), make_task(user.uid, "drop")
    user.add_task(kept)
    user.add_task(dropped)
    assert user.delete_task(dropped.task_id) is dropped
    assert user.tasks == [kept]
    assert user.search_task(dropped.task_id) is None


def test_delete_missing_task_raises():
    user = User("a", PASSWORD)
    with pytest.raises(TaskNotFoundError) as info:
        user.delete_task(123456)
    assert info.value.task_id == 123456
    assert "123456" in str(info.value)


def test_list_tasks_numbers_from_one():
    user = User("a", PASSWORD)
    first, second = make_task(user.uid, "one"), make_task(user.uid, "two")
    user.add_task(first)
    user.add_task(second)
    listing = user.list_tasks()
    assert listing == (
        "\n -Task 1-\n" + first.describe() + "\n -Task 2-\n" + second.describe()
    )


def test_list_tasks_empty():
    assert User("a", PASSWORD).list_tasks() == ""


def test_edit_task_runs_menu():
    user = User("a", PASSWORD)
    task = make_task(user.uid)
    user.add_task(task)
    console = make_console("1\nRenamed\n7\n")
    assert user.edit_task(task.task_id, console) is task
    assert task.title == "Renamed"


def test_edit_missing_task_raises():
    user = User("a", PASSWORD)
    with pytest.raises(TaskNotFoundError):
        user.edit_task(987654, make_console("7\n"))
"""Test fixtures for task-list tests."""

import pytest

from task_list.config import ENV_LOG_LEVEL, ENV_TASKS_FILE
from task_list.manager import TaskManager
from task_list.models import Task
from task_list.storage import TaskStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep tests independent of the caller's environment and cwd."""
    monkeypatch.delenv(ENV_TASKS_FILE, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def tasks_file(tmp_path):
    """Path of the task file used by tests."""
    return tmp_path / "tasks.txt"


@pytest.fixture
def config_file(tmp_path):
    """Path of a config file used by tests."""
    return tmp_path / "config" / "config.json"


@pytest.fixture
def store(tasks_file):
    """TaskStore over the test task file."""
    return TaskStore(tasks_file)


@pytest.fixture
def manager(store):
    """TaskManager with no persisted state."""
    return TaskManager(store)


@pytest.fixture
def sample_tasks():
    """Three tasks, the second one completed."""
    return [
        Task(id=1, description="buy milk"),
        Task(id=2, description="write report", completed=True),
        Task(id=5, description="call mom"),
    ]


@pytest.fixture
def populated_file(tasks_file):
    """Task file with three tasks, including a legacy line."""
    tasks_file.write_text(
        "1:-:buy milk\n"
        "2:x:write report\n"
        "5:call mom\n",
        encoding="utf-8",
    )
    return tasks_file

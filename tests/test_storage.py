"""Tests for task_list storage module."""

import logging

from task_list.models import Task
from task_list.storage import TaskStore, format_task, parse_task


class TestLineFormat:
    """Tests for task line parsing and formatting."""

    def test_format_open_and_done(self):
        assert format_task(Task(id=3, description="a")) == "3:-:a"
        assert format_task(Task(id=4, description="b", completed=True)) == "4:x:b"

    def test_parse_flagged(self):
        task = parse_task("2:x:write report")
        assert task.id == 2
        assert task.completed is True
        assert task.description == "write report"

    def test_parse_legacy_line(self):
        """Two-field lines load as open tasks."""
        task = parse_task("7:call mom")
        assert task.id == 7
        assert task.completed is False
        assert task.description == "call mom"

    def test_description_may_contain_colons(self):
        task = parse_task("1:-:meet at 10:30")
        assert task.description == "meet at 10:30"
        assert parse_task(format_task(task)) == task

    def test_malformed_lines(self):
        assert parse_task("") is None
        assert parse_task("   ") is None
        assert parse_task("no separator") is None
        assert parse_task(":leading colon") is None
        assert parse_task("abc:not a number") is None
        assert parse_task("0:-:zero id") is None
        assert parse_task("3:-:") is None


class TestTaskStore:
    """Tests for TaskStore class."""

    def test_missing_file_is_empty(self, store):
        assert store.load_tasks() == []
        assert store.load_history() == []

    def test_load(self, store, populated_file):
        tasks = store.load_tasks()
        assert [t.id for t in tasks] == [1, 2, 5]
        assert [t.completed for t in tasks] == [False, True, False]

    def test_save_then_load(self, store, sample_tasks, tasks_file):
        store.save_tasks(sample_tasks)

        assert tasks_file.read_text(encoding="utf-8") == "1:-:buy milk\n2:x:write report\n5:-:call mom\n"
        assert store.load_tasks() == sample_tasks

    def test_skips_malformed_lines(self, store, tasks_file, caplog):
        tasks_file.write_text("1:-:ok\n\ngarbage\nx:y\n2:-:also ok\n")

        with caplog.at_level(logging.WARNING):
            tasks = store.load_tasks()

        assert [t.id for t in tasks] == [1, 2]
        assert "garbage" in caplog.text
        assert "'x:y'" in caplog.text

    def test_duplicate_ids_first_wins(self, store, tasks_file, caplog):
        tasks_file.write_text("1:-:first\n1:-:second\n")

        with caplog.at_level(logging.WARNING):
            tasks = store.load_tasks()

        assert len(tasks) == 1
        assert tasks[0].description == "first"
        assert "duplicate task id 1" in caplog.text

    def test_delete_tasks(self, store, populated_file):
        store.delete_tasks()
        assert not populated_file.exists()

    def test_delete_missing_is_noop(self, store, tasks_file):
        store.delete_tasks()
        assert not tasks_file.exists()

    def test_default_history_file(self, tmp_path):
        store = TaskStore(tmp_path / "todo.txt")
        assert store.history_file == tmp_path / "todo.txt.history"

    def test_history_round_trip(self, store):
        store.save_history(["Added task 1: a", "Removed task 1: a"])
        assert store.load_history() == ["Added task 1: a", "Removed task 1: a"]


class TestLineBoundaries:
    """Only newlines separate records in the task file."""

    def test_unicode_separator_does_not_split_line(self, store, tasks_file, caplog):
        tasks_file.write_text("1:-:meet\u2028bob\n2:-:ok\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            tasks = store.load_tasks()

        # The odd line is dropped whole instead of half of it becoming a task
        assert [t.description for t in tasks] == ["ok"]
        assert "'bob'" not in caplog.text

    def test_invalid_utf8_is_not_fatal(self, store, tasks_file):
        tasks_file.write_bytes(b"1:-:caf\xff\n2:-:ok\n")

        tasks = store.load_tasks()

        assert [t.id for t in tasks] == [1, 2]
        assert tasks[0].description == "caf\ufffd"

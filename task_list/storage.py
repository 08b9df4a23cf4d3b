"""
Plain-text persistence for tasks and undo history.

Task file format, one task per line:

    <id>:<flag>:<description>

where flag is ``x`` for completed and ``-`` for open. Older two-field
lines (``<id>:<description>``) load as open tasks.
"""

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from task_list.file_utils import AtomicFileWriter
from task_list.models import Task


logger = logging.getLogger(__name__)

DONE_FLAG = "x"
OPEN_FLAG = "-"


def format_task(task: Task) -> str:
    """Serialize a task to a single line."""
    flag = DONE_FLAG if task.completed else OPEN_FLAG
    return f"{task.id}:{flag}:{task.description}"


def parse_task(line: str) -> Optional[Task]:
    """
    Parse one line of the task file.

    Returns:
        The task, or None if the line is blank or malformed
    """
    if not line.strip():
        return None

    sep = line.find(":")
    if sep <= 0:
        return None

    try:
        task_id = int(line[:sep])
    except ValueError:
        return None

    rest = line[sep + 1:]
    completed = False
    flag, colon, remainder = rest.partition(":")
    if colon and flag in (DONE_FLAG, OPEN_FLAG):
        completed = flag == DONE_FLAG
        rest = remainder

    try:
        return Task(id=task_id, description=rest, completed=completed)
    except ValidationError:
        return None


class TaskStore:
    """
    Reads and writes the task file and its undo history sidecar.

    Every save rewrites the whole file.
    """

    def __init__(self, tasks_file: Path, history_file: Optional[Path] = None):
        self.tasks_file = Path(tasks_file)
        self.history_file = (
            Path(history_file) if history_file
            else self.tasks_file.with_name(f"{self.tasks_file.name}.history")
        )

    def load_tasks(self) -> List[Task]:
        """Load tasks in file order, skipping malformed lines."""
        lines = AtomicFileWriter.read_lines(self.tasks_file)
        if lines is None:
            logger.debug(f"No task file at {self.tasks_file}")
            return []

        tasks: List[Task] = []
        seen = set()
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            task = parse_task(line)
            if task is None:
                logger.warning(f"{self.tasks_file}:{lineno}: skipping malformed line: {line!r}")
                continue
            if task.id in seen:
                logger.warning(f"{self.tasks_file}:{lineno}: skipping duplicate task id {task.id}")
                continue
            seen.add(task.id)
            tasks.append(task)

        logger.debug(f"Loaded {len(tasks)} tasks from {self.tasks_file}")
        return tasks

    def save_tasks(self, tasks: List[Task]) -> None:
        AtomicFileWriter.write_lines(self.tasks_file, (format_task(t) for t in tasks))
        logger.debug(f"Saved {len(tasks)} tasks to {self.tasks_file}")

    def delete_tasks(self) -> None:
        """Remove the task file if present."""
        if self.tasks_file.exists():
            self.tasks_file.unlink()
            logger.info(f"Deleted task file {self.tasks_file}")

    def load_history(self) -> List[str]:
        """Undo history, oldest first."""
        lines = AtomicFileWriter.read_lines(self.history_file)
        if lines is None:
            return []
        return [line for line in lines if line.strip()]

    def save_history(self, entries: List[str]) -> None:
        # Entries are single-line messages built from validated descriptions
        AtomicFileWriter.write_lines(self.history_file, entries)

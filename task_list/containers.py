"""
In-memory containers backing the task manager.

- TaskList: ordered tasks in display order
- TaskLookupTable: id -> task
- UndoStack: LIFO of action descriptions
- NotificationQueue: FIFO of event messages
"""

from collections import deque
from typing import Dict, Iterator, List, Optional

from task_list.models import Task


NOTHING_TO_UNDO = "Nothing to undo"


class TaskList:
    """Ordered task container (0-based indexes)."""

    def __init__(self, tasks: Optional[List[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def size(self) -> int:
        return len(self._tasks)

    def clear(self) -> None:
        self._tasks.clear()

    def index_of(self, task_id: int) -> Optional[int]:
        """Return the index of the task with this id, or None."""
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def next_id(self) -> int:
        """Next free id: highest existing id + 1."""
        return max((t.id for t in self._tasks), default=0) + 1

    def render(self, start: int = 0) -> List[str]:
        """
        Render tasks as numbered lines, beginning at index ``start``.

        Numbering is 1-based and matches the positions accepted by
        TaskManager.
        """
        return [
            f"{i + 1}. {task}"
            for i, task in enumerate(self._tasks)
            if i >= start
        ]

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise IndexError("Index out of range.")

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)


class TaskLookupTable:
    """Hash table of tasks keyed by id."""

    def __init__(self):
        self._task_map: Dict[int, Task] = {}

    def add_task(self, task: Task) -> None:
        self._task_map[task.id] = task

    def get_task(self, task_id: int) -> Optional[Task]:
        return self._task_map.get(task_id)

    def remove_task(self, task_id: int) -> None:
        self._task_map.pop(task_id, None)

    def clear(self) -> None:
        self._task_map.clear()

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._task_map

    def __len__(self) -> int:
        return len(self._task_map)


class UndoStack:
    """
    Unbounded LIFO log of human-readable action descriptions.

    Popping reports the last action; it does not reverse it.
    """

    def __init__(self, entries: Optional[List[str]] = None):
        self._stack: List[str] = list(entries or [])

    def push(self, action: str) -> None:
        self._stack.append(action)

    def pop(self) -> str:
        if not self._stack:
            return NOTHING_TO_UNDO
        return self._stack.pop()

    def peek(self) -> Optional[str]:
        return self._stack[-1] if self._stack else None

    def is_empty(self) -> bool:
        return not self._stack

    def entries(self) -> List[str]:
        """All entries, oldest first."""
        return list(self._stack)

    def __len__(self) -> int:
        return len(self._stack)


class NotificationQueue:
    """FIFO of event messages."""

    def __init__(self):
        self._notifications: deque = deque()

    def add_notification(self, message: str) -> None:
        self._notifications.append(message)

    def get_next_notification(self) -> Optional[str]:
        if not self._notifications:
            return None
        return self._notifications.popleft()

    def drain(self) -> Iterator[str]:
        """Yield pending messages in arrival order until empty."""
        while self._notifications:
            yield self._notifications.popleft()

    def __len__(self) -> int:
        return len(self._notifications)

"""
Task manager: in-memory bookkeeping over the task file.

Keeps the ordered list and the id lookup table in sync, records every
mutation on the undo stack, and queues a notification for the user.
Positions are 1-based, matching the numbers shown by ``list``.

The task file is written before the containers change, so a failed
write (OSError) leaves memory matching what is on disk.
"""

import logging
from typing import List, Optional

from task_list.containers import (
    NotificationQueue,
    TaskList,
    TaskLookupTable,
    UndoStack,
)
from task_list.models import EMPTY_EDIT_MESSAGE, Task, clean_description
from task_list.storage import TaskStore


logger = logging.getLogger(__name__)


class TaskManager:
    """
    Task list operations for the CLI and the interactive menu.

    Every mutating operation persists immediately.
    """

    def __init__(self, store: TaskStore):
        """
        Initialize the manager and load persisted state.

        Args:
            store: Storage for the task file and undo history
        """
        self.store = store
        self.tasks = TaskList()
        self.lookup = TaskLookupTable()
        self.undo_stack = UndoStack(store.load_history())
        self.notification_queue = NotificationQueue()

        for task in store.load_tasks():
            self.tasks.add(task)
            self.lookup.add_task(task)

    # Queries

    def list_tasks(self) -> List[Task]:
        return list(self.tasks)

    def render(self) -> List[str]:
        return self.tasks.render()

    def get(self, task_id: int) -> Optional[Task]:
        """Look up a task by id."""
        return self.lookup.get_task(task_id)

    def count(self) -> int:
        return self.tasks.size()

    # Mutations

    def add(self, description: str) -> Task:
        """
        Add a task at the end of the list.

        Raises:
            ValueError: If the description is empty
            OSError: If the task file can't be written (nothing is added)
        """
        description = clean_description(description)
        task = Task(id=self.tasks.next_id(), description=description)

        self.store.save_tasks(self.list_tasks() + [task])
        self.tasks.add(task)
        self.lookup.add_task(task)

        logger.info(f"Added task {task.id}")
        self._record(
            f"Added task {task.id}: {task.description}",
            f"Added: {task.description} (total: {self.tasks.size()})",
        )
        return task

    def complete(self, position: int) -> Task:
        """Mark the task at ``position`` as done."""
        task = self._at(position)

        if task.completed:
            self.notification_queue.add_notification(f"Already completed: {task.description}")
            return task

        task.mark_completed()
        try:
            self._save()
        except OSError:
            task.completed = False
            raise

        logger.info(f"Completed task {task.id}")
        self._record(
            f"Completed task {task.id}: {task.description}",
            f"Completed: {task.description}",
        )
        return task

    def edit(self, position: int, description: str) -> Task:
        """Replace the description of the task at ``position``."""
        task = self._at(position)
        new_description = clean_description(description, EMPTY_EDIT_MESSAGE)
        old_description = task.description

        task.rename(new_description)
        try:
            self._save()
        except OSError:
            task.rename(old_description)
            raise

        logger.info(f"Edited task {task.id}")
        self._record(
            f"Edited task {task.id}: {old_description} -> {new_description}",
            f"Edited: {new_description}",
        )
        return task

    def remove(self, position: int) -> Task:
        """
        Remove the task at ``position``.

        Raises:
            ValueError: If the list is empty
            IndexError: If position is out of range
        """
        if self.tasks.size() == 0:
            raise ValueError("No tasks to remove.")

        task = self._at(position)
        self.store.save_tasks([t for t in self.tasks if t is not task])
        self.tasks.remove(position - 1)
        self.lookup.remove_task(task.id)

        logger.info(f"Removed task {task.id}")
        self._record(
            f"Removed task {task.id}: {task.description}",
            f"Removed: {task.description}",
        )
        return task

    def clear(self) -> int:
        """Remove every task and delete the task file. Returns the count removed."""
        count = self.tasks.size()
        self.store.delete_tasks()
        self.tasks.clear()
        self.lookup.clear()

        self._record(f"Cleared {count} tasks", "All tasks cleared.")
        return count

    def undo(self) -> str:
        """
        Pop and report the most recent action.

        State is not reverted.
        """
        if self.undo_stack.is_empty():
            return self.undo_stack.pop()

        self.store.save_history(self.undo_stack.entries()[:-1])
        action = self.undo_stack.pop()
        logger.debug(f"Undo popped: {action}")
        return action

    def notifications(self) -> List[str]:
        """Drain pending notifications, oldest first."""
        return list(self.notification_queue.drain())

    # Helpers

    def _at(self, position: int) -> Task:
        if position < 1 or position > self.tasks.size():
            raise IndexError("Index out of range.")
        return self.tasks.get(position - 1)

    def _save(self) -> None:
        self.store.save_tasks(self.list_tasks())

    def _record(self, action: str, message: str) -> None:
        # The task change is already on disk; still tell the user about it
        self.notification_queue.add_notification(message)
        self.store.save_history(self.undo_stack.entries() + [action])
        self.undo_stack.push(action)

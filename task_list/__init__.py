"""
Task List - personal task manager with plain-text persistence.

Tasks live in a line-oriented text file:
- <id>:<flag>:<description>  - one task per line (flag x = done, - = open)
- <file>.history             - undo history, oldest first

Use one-shot commands (task-list add/list/done/...) or the interactive menu.
"""

__version__ = "1.0.0"

from task_list.models import Task, TaskListSettings, TaskListConfig
from task_list.containers import (
    TaskList,
    TaskLookupTable,
    UndoStack,
    NotificationQueue,
)
from task_list.config import ConfigManager, DEFAULT_CONFIG_FILE
from task_list.storage import TaskStore
from task_list.manager import TaskManager

__all__ = [
    # Models
    "Task",
    "TaskListSettings",
    "TaskListConfig",
    # Containers
    "TaskList",
    "TaskLookupTable",
    "UndoStack",
    "NotificationQueue",
    # Config
    "ConfigManager",
    "DEFAULT_CONFIG_FILE",
    # Components
    "TaskStore",
    "TaskManager",
]

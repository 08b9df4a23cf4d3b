"""
Data models for the task list.

Defines Pydantic models for tasks and configuration.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


EMPTY_ADD_MESSAGE = "No task provided to add."
EMPTY_EDIT_MESSAGE = "Task description cannot be empty."


def clean_description(v: str, empty_message: str = EMPTY_ADD_MESSAGE) -> str:
    """
    Strip and validate a task description.

    Anything str.splitlines() treats as a line boundary is rejected,
    since the description is stored as one line of the task file.
    """
    if v is None:
        raise ValueError(empty_message)
    v = str(v).strip()
    if not v:
        raise ValueError(empty_message)
    if len(v.splitlines()) != 1:
        raise ValueError("Task description must be a single line")
    return v


class Task(BaseModel):
    """
    A task in the list.

    Persisted as one line of the task file.
    """

    id: int = Field(..., gt=0, description="Unique task identifier")
    description: str = Field(..., description="Task text")
    completed: bool = Field(default=False, description="Whether the task is done")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v: str) -> str:
        return clean_description(v)

    def mark_completed(self) -> None:
        """Mark the task as done."""
        self.completed = True

    def rename(self, description: str) -> None:
        """Replace the description (same validation as creation)."""
        self.description = clean_description(description, EMPTY_EDIT_MESSAGE)

    def __str__(self) -> str:
        mark = "x" if self.completed else " "
        return f"[{mark}] {self.description}"


class TaskListSettings(BaseModel):
    """User settings."""

    tasks_file: str = Field(default="tasks.txt", description="Path to the task file")
    history_file: Optional[str] = Field(
        default=None,
        description="Path to the undo history file (defaults to <tasks_file>.history)"
    )
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def resolved_history_file(self) -> str:
        """History file path, derived from the task file when unset."""
        return self.history_file or f"{self.tasks_file}.history"


class TaskListConfig(BaseModel):
    """Complete configuration document."""

    version: str = "1.0"
    settings: TaskListSettings = Field(default_factory=TaskListSettings)

    # Metadata
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    updated_at: str = Field(default_factory=lambda: datetime.now().isoformat())

    def touch(self) -> None:
        self.updated_at = datetime.now().isoformat()

"""
Interactive text menu.

Runs a prompt loop over a TaskManager until the user quits or input
ends. User mistakes print a message and re-prompt.
"""

from typing import Callable, Optional

from task_list.manager import TaskManager


MENU = """
==== Task List ====
 1. List tasks
 2. Add task
 3. Complete task
 4. Edit task
 5. Remove task
 6. Undo
 7. Clear all tasks
 0. Quit"""


class InteractiveMenu:
    """Numbered menu loop over a TaskManager."""

    def __init__(
        self,
        manager: TaskManager,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.manager = manager
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.actions = {
            "1": self.show_tasks,
            "2": self.add_task,
            "3": self.complete_task,
            "4": self.edit_task,
            "5": self.remove_task,
            "6": self.undo,
            "7": self.clear_tasks,
        }

    def run(self) -> int:
        """Run until quit or EOF."""
        while True:
            self.output_fn(MENU)
            choice = self._ask("Choose an option: ")
            if choice is None or choice.lower() in ("0", "q", "quit"):
                self.output_fn("Goodbye.")
                return 0

            action = self.actions.get(choice)
            if action is None:
                self.output_fn(f"Invalid choice: {choice}")
                continue

            try:
                action()
            except (ValueError, IndexError) as e:
                self.output_fn(f"Error: {e}")
            except OSError as e:
                self.output_fn(f"I/O error: {e}")
            except EOFError:
                self.output_fn("Goodbye.")
                return 0

            for message in self.manager.notifications():
                self.output_fn(message)

    def show_tasks(self) -> None:
        lines = self.manager.render()
        if not lines:
            self.output_fn("No tasks found.")
            return
        for line in lines:
            self.output_fn(line)

    def add_task(self) -> None:
        self.manager.add(self._require("Task description: "))

    def complete_task(self) -> None:
        self.manager.complete(self._ask_position())

    def edit_task(self) -> None:
        position = self._ask_position()
        self.manager.edit(position, self._require("New description: "))

    def remove_task(self) -> None:
        self.manager.remove(self._ask_position())

    def undo(self) -> None:
        self.output_fn(self.manager.undo())

    def clear_tasks(self) -> None:
        answer = self._require("Remove all tasks? [y/N]: ")
        if answer.lower() in ("y", "yes"):
            self.manager.clear()
        else:
            self.output_fn("Cancelled.")

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self.input_fn(prompt).strip()
        except EOFError:
            return None

    def _require(self, prompt: str) -> str:
        value = self._ask(prompt)
        if value is None:
            raise EOFError
        return value

    def _ask_position(self) -> int:
        self.show_tasks()
        raw = self._require("Task number: ")
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"Invalid number format: {raw!r}")

"""
Command-line interface for task-list.

One-shot commands:
- add, list, done, edit, remove, clear, undo, show
- menu: interactive mode
- config: show, set
"""

import sys
import json
import logging
import argparse
from pathlib import Path

from task_list.config import ConfigManager
from task_list.manager import TaskManager
from task_list.menu import InteractiveMenu
from task_list.storage import TaskStore


log_format = "%(asctime)s [%(levelname)s] %(message)s"

logger = logging.getLogger("task-list")


def setup_logging(level: str) -> None:
    """Configure stderr logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def _build_manager(args) -> TaskManager:
    """Create a TaskManager from --file, environment, or config."""
    settings = args.settings
    if args.file:
        store = TaskStore(Path(args.file))
    else:
        store = TaskStore(
            Path(settings.tasks_file),
            Path(settings.resolved_history_file()),
        )
    logger.debug(f"Using task file {store.tasks_file}")
    return TaskManager(store)


def _join_words(words) -> str:
    return " ".join(words or []).strip()


def _parse_position(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid number format: {raw!r}")


def _print_notifications(manager: TaskManager) -> None:
    for message in manager.notifications():
        print(message)


# =============================================================================
# TASK COMMANDS
# =============================================================================

def cmd_add(args):
    """Add a task."""
    manager = _build_manager(args)
    manager.add(_join_words(args.description))
    _print_notifications(manager)
    return 0


def cmd_list(args):
    """List tasks."""
    manager = _build_manager(args)
    lines = manager.render()
    if not lines:
        print("No tasks found.")
        return 0
    for line in lines:
        print(line)
    return 0


def cmd_done(args):
    """Mark a task as completed."""
    manager = _build_manager(args)
    manager.complete(_parse_position(args.position))
    _print_notifications(manager)
    return 0


def cmd_edit(args):
    """Replace a task's description."""
    manager = _build_manager(args)
    manager.edit(_parse_position(args.position), _join_words(args.description))
    _print_notifications(manager)
    return 0


def cmd_remove(args):
    """Remove a task by 1-based position."""
    manager = _build_manager(args)
    manager.remove(_parse_position(args.position))
    _print_notifications(manager)
    return 0


def cmd_clear(args):
    """Remove all tasks."""
    manager = _build_manager(args)
    manager.clear()
    _print_notifications(manager)
    return 0


def cmd_undo(args):
    """Report the last recorded action."""
    manager = _build_manager(args)
    print(manager.undo())
    return 0


def cmd_show(args):
    """Show a task by id."""
    manager = _build_manager(args)
    task_id = _parse_position(args.task_id)
    task = manager.get(task_id)
    if task is None:
        print(f"Task {task_id} not found", file=sys.stderr)
        return 1
    print(f"{task.id}: {task}")
    return 0


def cmd_menu(args):
    """Run the interactive menu."""
    manager = _build_manager(args)
    return InteractiveMenu(manager).run()


# =============================================================================
# CONFIG COMMANDS
# =============================================================================

def cmd_config_show(args):
    """Show stored and effective settings."""
    print(f"Configuration: {args.config_manager.config_file}")
    print(json.dumps(args.settings.model_dump(), indent=2))
    return 0


def cmd_config_set(args):
    """Update a stored setting."""
    args.config_manager.update_settings(**{args.key: args.value})
    print(f"Set {args.key} = {args.value}")
    return 0


# =============================================================================
# MAIN
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-list",
        description="Personal task list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  task-list add buy milk
  task-list list
  task-list done 1
  task-list edit 1 buy oat milk
  task-list remove 1
  task-list undo
  task-list clear
  task-list menu
  task-list config set tasks_file ~/tasks.txt
        """
    )

    parser.add_argument("--config", type=Path, default=None, help="Path to configuration file")
    parser.add_argument("--file", default=None, help="Task file (overrides config and environment)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("description", nargs="*", help="Task description")
    add_parser.set_defaults(func=cmd_add)

    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.set_defaults(func=cmd_list)

    done_parser = subparsers.add_parser("done", help="Mark a task as completed")
    done_parser.add_argument("position", help="Task number as shown by list")
    done_parser.set_defaults(func=cmd_done)

    edit_parser = subparsers.add_parser("edit", help="Edit a task")
    edit_parser.add_argument("position", help="Task number as shown by list")
    edit_parser.add_argument("description", nargs="*", help="New description")
    edit_parser.set_defaults(func=cmd_edit)

    remove_parser = subparsers.add_parser("remove", help="Remove a task")
    remove_parser.add_argument("position", help="Task number as shown by list")
    remove_parser.set_defaults(func=cmd_remove)

    clear_parser = subparsers.add_parser("clear", help="Remove all tasks")
    clear_parser.set_defaults(func=cmd_clear)

    undo_parser = subparsers.add_parser("undo", help="Show the last action")
    undo_parser.set_defaults(func=cmd_undo)

    show_parser = subparsers.add_parser("show", help="Show a task by id")
    show_parser.add_argument("task_id", help="Task id")
    show_parser.set_defaults(func=cmd_show)

    menu_parser = subparsers.add_parser("menu", help="Interactive mode")
    menu_parser.set_defaults(func=cmd_menu)

    config_parser = subparsers.add_parser("config", help="Manage settings")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config commands")

    config_show_parser = config_subparsers.add_parser("show", help="Show settings")
    config_show_parser.set_defaults(func=cmd_config_show)

    config_set_parser = config_subparsers.add_parser("set", help="Update a setting")
    config_set_parser.add_argument("key", help="Setting name")
    config_set_parser.add_argument("value", help="New value")
    config_set_parser.set_defaults(func=cmd_config_set)

    return parser


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    try:
        args.config_manager = ConfigManager(args.config)
        args.settings = args.config_manager.effective_settings()
    except ValueError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else args.settings.log_level)

    try:
        return args.func(args)
    except (ValueError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"I/O error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.ports import TaskRepo
from ..tasks.task_models import Priority, Task
from .parsing import parse_add_args, parse_task_id, split_command

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND = "Unknown command. Type 'help' for available commands."
INVALID_TASK_ID = "Invalid task ID."
NO_TASKS = "No tasks found."
FAREWELL = "Goodbye!"

HELP_EXAMPLES = (
    "EXAMPLES:\n"
    '  add "Buy groceries" -p high\n'
    '  add "Walk the dog"\n'
    "  done 2\n"
)


@dataclass(frozen=True, slots=True)
class CommandResult:
    output: str | None = None
    exit: bool = False


CommandHandler = Callable[[TaskRepo, list[str]], CommandResult]


@dataclass(frozen=True, slots=True)
class _Entry:
    name: str
    usage: str
    help_text: str


class CommandRegistry:
    """Name -> handler table for the interactive commands (add, list, done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._entries: list[_Entry] = []

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        self._handlers[name] = handler
        self._entries.append(_Entry(name=name, usage=usage, help_text=help_text))
        for alias in aliases or []:
            self._handlers[alias] = handler

    def describe(self, usage: str, help_text: str) -> None:
        """Add a help-only line for a variant of an already registered command."""
        self._entries.append(_Entry(name=usage.split()[0], usage=usage, help_text=help_text))

    def handle(self, store: TaskRepo, line: str) -> CommandResult:
        """
        Tokenize `line` and run the matching handler.
        Blank lines produce an empty result.
        """
        if not line.strip():
            return CommandResult()

        tokens = split_command(line)
        if not tokens.ok:
            return CommandResult(f"Invalid input: {tokens.error}.")
        parts = tokens.value or []
        if not parts:
            return CommandResult()

        name, args = parts[0], parts[1:]
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            return CommandResult(UNKNOWN_COMMAND)
        return handler(store, args)

    def build_help(self) -> str:
        width = max((len(e.usage) for e in self._entries), default=0) + 2
        lines = [
            "",
            "COMMAND LINE TASK MANAGER",
            "--------------------------",
            "USAGE:",
        ]
        for e in self._entries:
            lines.append(f"  {e.usage.ljust(width)}{e.help_text}")
        return "\n".join(lines) + "\n\n" + HELP_EXAMPLES


def _with_save_warning(store: TaskRepo, message: str) -> str:
    if store.last_save_error is None:
        return message
    return f"{message}\nWarning: changes could not be saved to {store.path}."


def format_task(task: Task) -> str:
    status = "[DONE]" if task.completed else "[PENDING]"
    return f"ID: {task.id} | {status} | PRIORITY: {Priority(task.priority).label} | {task.description}"


def format_task_list(tasks: list[Task]) -> str:
    if not tasks:
        return NO_TASKS
    lines = ["", "TASK LIST", "---------"]
    lines.extend(format_task(t) for t in tasks)
    lines.append("")
    return "\n".join(lines)


def cmd_help(store: TaskRepo, args: list[str]) -> CommandResult:
    return CommandResult(registry.build_help())


def cmd_exit(store: TaskRepo, args: list[str]) -> CommandResult:
    return CommandResult(exit=True)


def cmd_add(store: TaskRepo, args: list[str]) -> CommandResult:
    parsed = parse_add_args(args)
    if not parsed.ok or parsed.value is None:
        return CommandResult(UNKNOWN_COMMAND)
    description, priority = parsed.value
    task_id = store.add(description, priority)
    return CommandResult(_with_save_warning(store, f"Task added with ID: {task_id}"))


def cmd_list(store: TaskRepo, args: list[str]) -> CommandResult:
    """
    list          -> all tasks
    list pending  -> incomplete tasks only
    """
    include_completed = not (args and args[0] == "pending")
    return CommandResult(format_task_list(store.list_tasks(include_completed)))


def _cmd_by_id(
    store: TaskRepo,
    args: list[str],
    action: Callable[[int], bool],
    success: str,
) -> CommandResult:
    if len(args) != 1:
        return CommandResult(UNKNOWN_COMMAND)
    parsed = parse_task_id(args[0])
    if not parsed.ok or parsed.value is None:
        return CommandResult(INVALID_TASK_ID)
    task_id = parsed.value
    if not action(task_id):
        return CommandResult(f"Task with ID {task_id} not found.")
    return CommandResult(_with_save_warning(store, success))


def cmd_done(store: TaskRepo, args: list[str]) -> CommandResult:
    return _cmd_by_id(store, args, store.complete, "Task marked as completed!")


def cmd_delete(store: TaskRepo, args: list[str]) -> CommandResult:
    return _cmd_by_id(store, args, store.delete, "Task deleted successfully!")


def build_registry() -> CommandRegistry:
    reg = CommandRegistry()
    reg.register("add", cmd_add, "add <description> [-p high|medium|low]", "Add a new task")
    reg.register("list", cmd_list, "list", "List all tasks")
    reg.describe("list pending", "List pending tasks only")
    reg.register("done", cmd_done, "done <id>", "Mark task as completed")
    reg.register("delete", cmd_delete, "delete <id>", "Delete a task")
    reg.register("help", cmd_help, "help", "Show this help message")
    reg.register("exit", cmd_exit, "exit", "Exit the program")
    return reg


registry = build_registry()


class CommandInterpreter:
    """
    Binds one task store to a command registry.

    The store is passed in explicitly and owned by the interpreter for the
    session; nothing else mutates it.
    """

    def __init__(self, store: TaskRepo, command_registry: CommandRegistry | None = None) -> None:
        self.store = store
        self.registry = command_registry or registry

    def help_text(self) -> str:
        return self.registry.build_help()

    def handle_line(self, line: str) -> CommandResult:
        return self.registry.handle(self.store, line)

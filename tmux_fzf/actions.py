"""
Turns a resolved Choice into one chained tmux call.
"""

import logging
from typing import Callable, List, Optional

from .models import Choice, ChoiceKind, Operation
from .tmux_controller import TmuxController

logger = logging.getLogger(__name__)

# tmux replaces these in new session names
_SESSION_NAME_REPLACED = (":", ".")


def tmux_session_name(name: str) -> str:
    """The name tmux gives a session created as `new-session -s <name>`."""
    for char in _SESSION_NAME_REPLACED:
        name = name.replace(char, "_")
    return name


def build_command_chain(operation: Operation, choice: Choice,
                        current_window: Optional[str] = None) -> List[List[str]]:
    """
    Commands for `operation` on `choice`, in execution order.

    A freshly created session starts with one placeholder window; when a
    window is moved into it the placeholder (its lowest-numbered window) is
    killed so only the moved window remains.
    """
    if choice.kind is ChoiceKind.CANCELLED or not choice.name:
        raise ValueError("a cancelled choice has no commands")

    is_new = choice.kind is ChoiceKind.NEW
    target = tmux_session_name(choice.name) if is_new else choice.name
    commands: List[List[str]] = []
    if is_new:
        commands.append(["new-session", "-d", "-s", target])

    if operation is Operation.SWITCH_FROM:
        commands.append(["switch-client", "-t", target])
        commands.append(["refresh-client", "-S"])
    elif operation is Operation.MOVE_WINDOW:
        if not current_window:
            raise ValueError("move-window needs the current window id")
        commands.append(["move-window", "-s", current_window, "-t", f"{target}:"])
        commands.append(["switch-client", "-t", target])
        if is_new:
            commands.append(["kill-window", "-t", f"{target}:^"])
        else:
            commands.append(["select-window", "-t", current_window])
    else:
        raise ValueError(f"unknown operation: {operation!r}")

    return commands


def execute(controller: TmuxController, operation: Operation, choice: Choice,
            current_window: Optional[str] = None,
            on_error: Optional[Callable[[str], None]] = None) -> bool:
    """Run the chain for `choice`. Returns False when there was nothing to do."""
    if choice.is_cancelled:
        logger.debug("%s cancelled; nothing to run", operation.value)
        return False

    commands = build_command_chain(operation, choice, current_window)
    controller.run_chain(commands, on_error=on_error)
    return True

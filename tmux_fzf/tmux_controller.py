#!/usr/bin/env python3
"""
Tmux Controller
Thin wrapper around the tmux client binary. Every tmux call made by tmux-fzf
goes through here.
"""

import logging
import subprocess
from typing import Callable, List, Optional, Sequence

from .deps import tmux_path
from .errors import CommandError, SpawnError, TmuxFzfError

logger = logging.getLogger(__name__)


class TmuxController:
    """Runs tmux commands and reports failures as exceptions."""

    # attached-flag (0 if attached else 1), last-attached epoch (0 if never), name
    SESSION_FORMAT = (
        "#{?session_attached,0,1} "
        "#{?session_last_attached,,0}#{session_last_attached} "
        "#{session_name}"
    )
    COMMAND_SEPARATOR = ";"

    def __init__(self, tmux: Optional[str] = None):
        self._tmux = tmux

    @property
    def tmux(self) -> str:
        return self._tmux or tmux_path()

    def _run_tmux_command(self, cmd_args: Sequence[str]) -> subprocess.CompletedProcess:
        argv = [self.tmux] + list(cmd_args)
        try:
            proc = subprocess.run(argv, capture_output=True, text=True, encoding="utf-8",
                                  errors="replace", check=False)
        except OSError as e:
            raise SpawnError(argv, e) from e
        logger.debug("tmux command: %s -> RC: %s", " ".join(argv), proc.returncode)
        if proc.stderr and proc.stderr.strip():
            logger.debug("tmux stderr: %s", proc.stderr.strip())
        return proc

    def run(self, cmd_args: Sequence[str]) -> str:
        """Run one tmux command and return its stdout. Nonzero exit raises CommandError."""
        proc = self._run_tmux_command(cmd_args)
        if proc.returncode != 0:
            raise CommandError([self.tmux] + list(cmd_args), proc.returncode, proc.stderr or "")
        return proc.stdout or ""

    def list_session_lines(self) -> List[str]:
        """Raw `list-sessions` output in SESSION_FORMAT, one session per line."""
        return self.run(["list-sessions", "-F", self.SESSION_FORMAT]).splitlines()

    def display_message(self, message: str) -> None:
        """Show `message` verbatim in the status line; `#` would otherwise start a format."""
        self.run(["display-message", message.replace("#", "##")])

    def run_chain(self, commands: Sequence[Sequence[str]],
                  on_error: Optional[Callable[[str], None]] = None) -> str:
        """
        Run several tmux commands in a single tmux invocation, joined with tmux's
        own command separator. The chain succeeds or fails as a whole.

        On failure `on_error` (if given) receives the stderr text before the
        CommandError propagates.
        """
        args: List[str] = []
        for i, command in enumerate(commands):
            if i:
                args.append(self.COMMAND_SEPARATOR)
            args.extend(command)

        try:
            return self.run(args)
        except CommandError as e:
            if on_error is not None:
                detail = e.stderr.strip() or str(e)
                try:
                    on_error(detail)
                except TmuxFzfError as display_error:
                    logger.warning("could not display error in tmux: %s", display_error)
            raise

#!/usr/bin/env python3
"""
fzf picker protocol.

fzf is started with --print-query, so its stdout always begins with the typed
query. A second line is the highlighted entry. The kill key destroys the
highlighted session and reloads the list by calling `tmux-fzf ls-switch-from`
again from inside fzf.
"""

import logging
import os
import shlex
import subprocess
import sys
from typing import Dict, List, Optional, Sequence

from .deps import fzf_path
from .errors import ProtocolError, SpawnError
from .models import Choice
from .sessions import ranked_session_names
from .tmux_controller import TmuxController

logger = logging.getLogger(__name__)

SWITCH_PROMPT = "switch to session> "
MOVE_PROMPT = "move window to> "
DEFAULT_KILL_KEY = "ctrl-x"
DEFAULT_QUERY_KEY = "alt-enter"
CANCELED_MESSAGE = "canceled"
CURRENT_SESSION_ENV = "TMUX_FZF_CURRENT"


def reload_command(python: Optional[str] = None) -> str:
    """
    Shell command fzf runs to reload its list: this same tool's ls-switch-from
    verb. The current session arrives through CURRENT_SESSION_ENV so fzf never
    sees the name and cannot expand placeholders like {q} inside it.
    """
    argv = shlex.join([python or sys.executable, "-m", "tmux_fzf", "ls-switch-from"])
    return f'{argv} "${CURRENT_SESSION_ENV}"'


def build_fzf_args(fzf: str, prompt: str, *, tmux: str,
                   kill_key: str = DEFAULT_KILL_KEY, query_key: str = DEFAULT_QUERY_KEY,
                   python: Optional[str] = None) -> List[str]:
    kill_binding = (
        f"{kill_key}:execute-silent({shlex.quote(tmux)} kill-session -t {{}})"
        f"+reload:{reload_command(python)}"
    )
    return [
        fzf,
        "--no-multi",
        "--prompt", prompt,
        "--print-query",
        "--bind", f"{query_key}:print-query",
        "--bind", kill_binding,
    ]


def parse_picker_output(stdout: str, returncode: int) -> Choice:
    """
    Turn fzf's output into a Choice.

    A successful exit with a selected line picks that entry. Anything else
    falls back to the query: a non-empty query asks for a new session, an
    empty one is a cancel.
    """
    lines = stdout.splitlines()
    if not lines:
        raise ProtocolError("fzf output is missing the query line")

    query = lines[0]
    selected = lines[1].strip() if len(lines) > 1 else ""

    if returncode == 0 and selected:
        return Choice.from_selection(selected)
    if not query:
        return Choice.cancelled()
    return Choice.new(query)


def fzf_environment(current_session: str) -> Dict[str, str]:
    return {**os.environ, CURRENT_SESSION_ENV: current_session}


def encode_candidates(names: Sequence[str]) -> str:
    return "".join(f"{name}\n" for name in names)


class FzfPicker:
    """Runs fzf over the ranked session list and resolves the user's choice."""

    def __init__(self, controller: TmuxController, *, fzf: Optional[str] = None,
                 kill_key: str = DEFAULT_KILL_KEY, query_key: str = DEFAULT_QUERY_KEY):
        self.controller = controller
        self._fzf = fzf
        self.kill_key = kill_key
        self.query_key = query_key

    @property
    def fzf(self) -> str:
        return self._fzf or fzf_path()

    def pick(self, prompt: str, current_session: str) -> Choice:
        names = ranked_session_names(self.controller, current_session)
        argv = build_fzf_args(self.fzf, prompt, tmux=self.controller.tmux,
                              kill_key=self.kill_key, query_key=self.query_key)

        # the whole list is built first and handed over in one write
        payload = encode_candidates(names)
        try:
            proc = subprocess.run(argv, input=payload, stdout=subprocess.PIPE, text=True,
                                  env=fzf_environment(current_session),
                                  encoding="utf-8", errors="replace", check=False)
        except OSError as e:
            raise SpawnError(argv, e) from e
        logger.debug("fzf exited with RC: %s", proc.returncode)

        choice = parse_picker_output(proc.stdout or "", proc.returncode)
        if choice.is_cancelled:
            self.controller.display_message(CANCELED_MESSAGE)
        logger.info("picker choice: %s %s", choice.kind.value, choice.name or "")
        return choice

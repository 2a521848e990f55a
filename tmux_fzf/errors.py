"""
Exception hierarchy for tmux-fzf.

Every error is fatal to the invocation; cli.main turns them into a message on
stderr and the exit code carried here.
"""

from typing import Sequence


class TmuxFzfError(Exception):
    exit_code = 1


class DependencyError(TmuxFzfError):
    def __init__(self, name: str):
        super().__init__(f"tmux-fzf: `{name}` not found in PATH")
        self.name = name


class UsageError(TmuxFzfError):
    pass


class SpawnError(TmuxFzfError):
    def __init__(self, argv: Sequence[str], error: OSError):
        super().__init__(f"spawn failed: {error}")
        self.argv = list(argv)
        self.error = error


class CommandError(TmuxFzfError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = ""):
        detail = stderr.strip()
        message = f"command failed (rc={returncode}): {' '.join(argv)}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr


class ProtocolError(TmuxFzfError):
    """Selector output broke its contract (no query line)."""

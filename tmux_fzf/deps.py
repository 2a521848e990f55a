"""
Executable discovery for the two external collaborators.

Each binary is looked up on PATH once and the absolute path is reused for the
rest of the process.
"""

import logging
import os
import shutil
from functools import lru_cache

from .errors import DependencyError

logger = logging.getLogger(__name__)

TMUX = "tmux"
FZF = "fzf"


def which(cmd: str):
    """Return the absolute path of an executable file named `cmd` on PATH, or None."""
    found = shutil.which(cmd, mode=os.F_OK | os.X_OK)
    if found and os.path.isfile(found):
        return os.path.abspath(found)
    return None


@lru_cache(maxsize=None)
def depends(name: str) -> str:
    """Resolve `name` or raise DependencyError. Memoized per binary."""
    path = which(name)
    if path is None:
        raise DependencyError(name)
    logger.debug("resolved %s -> %s", name, path)
    return path


def tmux_path() -> str:
    return depends(TMUX)


def fzf_path() -> str:
    return depends(FZF)


def resolve_all() -> None:
    """Resolve every required executable up front so a missing one fails fast."""
    tmux_path()
    fzf_path()

"""
Session listing and ranking.

tmux reports one session per line as `<attached-flag> <last-attached> <name>`.
Ranking puts sessions nobody is attached to first, then the most recently
attached; the current session and nameless records never appear.
"""

import logging
from typing import Iterable, List, Optional

from .models import SessionRecord
from .tmux_controller import TmuxController

logger = logging.getLogger(__name__)


def _parse_unsigned(field: Optional[str]) -> Optional[int]:
    if field is None:
        return None
    try:
        value = int(field)
    except ValueError:
        return None
    return value if value >= 0 else None


def parse_session_line(line: str) -> SessionRecord:
    """
    Parse one line of list-sessions output.

    Malformed fields fall back instead of failing: an unreadable attached-flag
    counts as attached, an unreadable timestamp as 0. Everything after the
    second field is the name, so names containing spaces survive.
    """
    fields = line.split(None, 2)
    flag = _parse_unsigned(fields[0] if len(fields) > 0 else None)
    last_attached = _parse_unsigned(fields[1] if len(fields) > 1 else None)
    name = fields[2].strip() if len(fields) > 2 else ""

    # the wire flag is 0 for attached sessions
    attached = flag is None or flag == 0
    return SessionRecord(attached=attached, last_attached=last_attached or 0, name=name)


def parse_session_list(lines: Iterable[str]) -> List[SessionRecord]:
    return [parse_session_line(line) for line in lines]


def rank_sessions(records: Iterable[SessionRecord], current: str) -> List[str]:
    """Order session names: unattached before attached, newest last-attached first."""
    kept = []
    for record in records:
        if not record.name:
            logger.debug("dropping session record without a name: %r", record)
            continue
        if record.name == current:
            continue
        kept.append(record)

    kept.sort(key=lambda r: (r.attached, -r.last_attached))
    return [r.name for r in kept]


def ranked_session_names(controller: TmuxController, current: str) -> List[str]:
    """Query tmux and return every other session name in ranked order."""
    records = parse_session_list(controller.list_session_lines())
    ranked = rank_sessions(records, current)
    logger.debug("ranked %d of %d sessions (current=%s)", len(ranked), len(records), current)
    return ranked

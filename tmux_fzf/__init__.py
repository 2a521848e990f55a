"""
tmux-fzf
Switch tmux sessions or move the current window by fuzzy-picking a session
with fzf.
"""

from .models import Choice, ChoiceKind, Operation, SessionRecord

__all__ = ['Choice', 'ChoiceKind', 'Operation', 'SessionRecord']
__version__ = '1.0.0'

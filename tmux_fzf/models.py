from enum import Enum
from typing import Optional

from pydantic import BaseModel


class SessionRecord(BaseModel):
    attached: bool
    last_attached: int = 0
    name: str


class Operation(str, Enum):
    SWITCH_FROM = "switch-from"
    MOVE_WINDOW = "move-window"


class ChoiceKind(str, Enum):
    FROM_SELECTION = "from-selection"
    NEW = "new"
    CANCELLED = "cancelled"


class Choice(BaseModel):
    """Outcome of one picker run.

    `name` is the highlighted entry for FROM_SELECTION, the typed query for
    NEW, and None when the user cancelled.
    """

    kind: ChoiceKind
    name: Optional[str] = None

    @classmethod
    def from_selection(cls, name: str) -> "Choice":
        return cls(kind=ChoiceKind.FROM_SELECTION, name=name)

    @classmethod
    def new(cls, name: str) -> "Choice":
        return cls(kind=ChoiceKind.NEW, name=name)

    @classmethod
    def cancelled(cls) -> "Choice":
        return cls(kind=ChoiceKind.CANCELLED)

    @property
    def is_cancelled(self) -> bool:
        return self.kind is ChoiceKind.CANCELLED

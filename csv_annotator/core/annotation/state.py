"""
State management for annotation sessions.

Contains data classes representing the records being annotated
and the state of the terminal session over them.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, List, Optional


class Mode(Enum):
    """Which view owns the keyboard."""

    LIST = "list"
    EDIT = "edit"


class Trigger(Enum):
    """Keys the session controller reacts to."""

    QUIT = "quit"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    FORWARD = "forward"
    BACKWARD = "backward"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


# Mode in which each trigger has a transition
TRIGGER_MODES = {
    Trigger.QUIT: Mode.LIST,
    Trigger.CONFIRM: Mode.LIST,
    Trigger.CANCEL: Mode.EDIT,
    Trigger.FORWARD: Mode.EDIT,
    Trigger.BACKWARD: Mode.EDIT,
    Trigger.PAGE_UP: Mode.EDIT,
    Trigger.PAGE_DOWN: Mode.EDIT,
}


@dataclass(frozen=True)
class Record:
    """A single row of the table being annotated."""

    position: int
    title: str
    source_text: str
    annotation: str = ""

    def with_annotation(self, annotation: str) -> "Record":
        """Copy of this record carrying a new annotation."""
        return replace(self, annotation=annotation)


class RecordStore:
    """
    Ordered, fixed-length collection of records.

    Only annotations change during a session; records are replaced
    by value so anything holding an old copy keeps a consistent snapshot.
    """

    def __init__(self, records: Iterable[Record] = ()):
        self._records: List[Record] = list(records)
        for index, record in enumerate(self._records):
            if record.position != index:
                raise ValueError(
                    f"record at index {index} has position {record.position}"
                )

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, position: int) -> Record:
        return self._records[position]

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def annotate(self, position: int, annotation: str) -> Record:
        """Store a new annotation for the record at ``position``."""
        record = self._records[position].with_annotation(annotation)
        self._records[position] = record
        return record

    def records(self) -> List[Record]:
        return list(self._records)


@dataclass(frozen=True)
class Layout:
    """Sizes handed to the views for a given terminal size."""

    list_width: int
    list_height: int
    pane_width: int
    pane_height: int


@dataclass
class SessionState:
    """Mutable state of the session controller."""

    mode: Mode = Mode.LIST
    cursor: Optional[int] = 0
    layout: Optional[Layout] = None
    finished: bool = False

    @property
    def is_editing(self) -> bool:
        return self.mode is Mode.EDIT

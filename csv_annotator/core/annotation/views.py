"""
View contracts driven by the session controller.

The controller only talks to views through these methods, so any
front end (Textual, a test double, ...) can host a session.
"""

from typing import Optional, Protocol, Sequence

from .state import Record


class ListView(Protocol):
    """Selectable, filterable list with one entry per record."""

    def build(self, records: Sequence[Record]) -> None:
        ...

    def set_highlighted(self, position: int) -> None:
        ...

    def replace_entry(self, position: int, record: Record) -> None:
        ...

    def current_highlighted(self) -> Optional[int]:
        ...

    def resize(self, width: int, height: int) -> None:
        ...

    def focus(self) -> None:
        ...


class DetailView(Protocol):
    """Read-only content pane paired with an editable draft pane."""

    def set_content(self, text: str) -> None:
        ...

    def set_draft(self, text: str) -> None:
        ...

    def draft_value(self) -> str:
        ...

    def set_progress(self, cursor: Optional[int], total: int) -> None:
        ...

    def scroll_page_up(self) -> None:
        ...

    def scroll_page_down(self) -> None:
        ...

    def resize(self, width: int, height: int) -> None:
        ...

    def focus(self) -> None:
        ...

    def refresh(self) -> None:
        ...

"""
Textual widgets implementing the list and detail view contracts.
"""

from typing import List, Optional, Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Input, OptionList, Static, TextArea
from textual.widgets.option_list import Option

from ..core.annotation.state import Record
from ..core.annotation.utils import (
    entry_description,
    entry_title,
    make_preview,
    matches_filter,
    progress_label,
)

# Rows/columns taken by the rounded border around each detail pane
PANE_BORDER = 2


class RecordList(Vertical):
    """Filterable list of records, one option per record."""

    DEFAULT_CSS = """
    RecordList {
        height: 1fr;
    }
    RecordList > #list-title {
        height: 1;
        padding: 0 1;
        text-style: bold;
    }
    RecordList > #list-filter {
        display: none;
    }
    RecordList.-filtering > #list-filter {
        display: block;
    }
    RecordList > #record-options {
        height: 1fr;
        border: none;
    }
    """

    BINDINGS = [
        Binding("slash", "start_filter", "Filter", show=False),
        Binding("escape", "clear_filter", "Clear filter", show=False),
    ]

    def __init__(self, heading: str = "", numbered: bool = True, **kwargs):
        super().__init__(**kwargs)
        self.heading = heading
        self.numbered = numbered
        self._records: List[Record] = []
        self._visible: List[int] = []
        self._query = ""

    def compose(self) -> ComposeResult:
        yield Static(self.heading, id="list-title")
        yield Input(placeholder="Filter by title", id="list-filter")
        yield OptionList(id="record-options")

    @property
    def options(self) -> OptionList:
        return self.query_one("#record-options", OptionList)

    @property
    def filter_input(self) -> Input:
        return self.query_one("#list-filter", Input)

    @property
    def visible_positions(self) -> List[int]:
        return list(self._visible)

    def build(self, records: Sequence[Record]) -> None:
        self._records = list(records)
        self._render_options()

    def set_highlighted(self, position: int) -> None:
        if position not in self._visible:
            self._set_query("")
        self.options.highlighted = self._visible.index(position)

    def replace_entry(self, position: int, record: Record) -> None:
        self._records[position] = record
        if position in self._visible:
            self.options.replace_option_prompt(str(position), self.render_entry(record))

    def current_highlighted(self) -> Optional[int]:
        index = self.options.highlighted
        if index is None or not 0 <= index < len(self._visible):
            return None
        return self._visible[index]

    def resize(self, width: int, height: int) -> None:
        self.styles.width = width
        self.styles.height = height

    def focus(self, scroll_visible: bool = True):
        return self.options.focus(scroll_visible)

    def render_entry(self, record: Record) -> Text:
        text = Text(entry_title(record, self.numbered), style="bold")
        description = entry_description(record)
        if description:
            text.append("\n")
            text.append(description, style="dim")
        if record.annotation:
            text.append("\n")
            text.append(f"✎ {make_preview(record.annotation)}", style="italic")
        return text

    def action_start_filter(self) -> None:
        self.add_class("-filtering")
        self.filter_input.focus()

    def action_clear_filter(self) -> None:
        if not self.has_class("-filtering") and not self._query:
            return
        self._set_query("")
        self.focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value != self._query:
            self._query = event.value
            self._render_options()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.focus()

    def _set_query(self, query: str) -> None:
        self._query = query
        self.filter_input.value = query
        if not query:
            self.remove_class("-filtering")
        self._render_options()

    def _render_options(self) -> None:
        previous = self.current_highlighted() if self._visible else None
        self._visible = [
            record.position
            for record in self._records
            if matches_filter(record, self._query)
        ]
        options = self.options
        options.clear_options()
        options.add_options(
            [
                Option(self.render_entry(self._records[position]), id=str(position))
                for position in self._visible
            ]
        )
        if self._visible:
            if previous in self._visible:
                options.highlighted = self._visible.index(previous)
            else:
                options.highlighted = 0


class RecordDetail(Vertical):
    """Source text on the left, annotation editor on the right."""

    DEFAULT_CSS = """
    RecordDetail {
        height: 1fr;
    }
    RecordDetail > #detail-header {
        height: 1;
        text-style: bold;
        color: #777777;
    }
    RecordDetail > #detail-panes {
        height: 1fr;
    }
    RecordDetail #content-pane, RecordDetail #draft-pane {
        border: round $primary;
    }
    RecordDetail #draft-pane:focus {
        border: round $accent;
    }
    """

    def __init__(self, placeholder: str = "", **kwargs):
        super().__init__(**kwargs)
        self.placeholder = placeholder
        self.progress_text = ""

    def compose(self) -> ComposeResult:
        yield Static("", id="detail-header")
        with Horizontal(id="detail-panes"):
            with VerticalScroll(id="content-pane"):
                yield Static("", id="content-text")
            draft = TextArea(id="draft-pane", soft_wrap=True)
            draft.placeholder = self.placeholder
            yield draft

    @property
    def content_pane(self) -> VerticalScroll:
        return self.query_one("#content-pane", VerticalScroll)

    @property
    def draft_pane(self) -> TextArea:
        return self.query_one("#draft-pane", TextArea)

    def set_content(self, text: str) -> None:
        self.query_one("#content-text", Static).update(Text(text))
        self.content_pane.scroll_home(animate=False)

    def set_draft(self, text: str) -> None:
        draft = self.draft_pane
        draft.load_text(text)
        draft.move_cursor(draft.document.end)

    def draft_value(self) -> str:
        return self.draft_pane.text

    def set_progress(self, cursor: Optional[int], total: int) -> None:
        self.progress_text = progress_label(cursor, total)
        self.query_one("#detail-header", Static).update(self.progress_text)

    def scroll_page_up(self) -> None:
        pane = self.content_pane
        pane.scroll_relative(y=-max(1, pane.size.height // 2), animate=False)

    def scroll_page_down(self) -> None:
        pane = self.content_pane
        pane.scroll_relative(y=max(1, pane.size.height // 2), animate=False)

    def resize(self, width: int, height: int) -> None:
        for pane in (self.content_pane, self.draft_pane):
            pane.styles.width = width + PANE_BORDER
            pane.styles.height = height + PANE_BORDER

    def focus(self, scroll_visible: bool = True):
        return self.draft_pane.focus(scroll_visible)

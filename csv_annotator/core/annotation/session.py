"""
Annotation session management.

Core logic for stepping through a table and annotating its rows.
UI-agnostic - drives any list/detail views implementing the
contracts in ``views``.
"""

import logging
from typing import Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

from .config import build_keymap, default_config
from .events import AnnotationEvent, EventEmitter, EventType
from .state import Layout, Mode, Record, RecordStore, SessionState, Trigger
from .utils import clamp_cursor, compute_layout
from .views import DetailView, ListView

logger = logging.getLogger(__name__)

DEFAULT_KEYMAP = build_keymap(default_config().keys)


class AnnotationSession:
    """
    Two-mode state machine binding a list view and a detail view
    to a record store.

    This class handles:
    - Mode transitions between the list and the editor
    - Committing the draft on every exit from a record
    - Keeping the list entries in sync after each commit
    - Layout changes and render ticks

    Keys it does not claim belong to whichever view has focus; the
    session moves focus on every mode change so that the editable
    pane only receives keystrokes while editing.
    """

    def __init__(
        self,
        records: Iterable[Record],
        list_view: ListView,
        detail_view: DetailView,
        keymap: Optional[Mapping[str, Union[Trigger, Sequence[Trigger]]]] = None,
        header_allowance: int = 4,
        border_allowance: int = 4,
    ):
        """
        Initialize annotation session.

        Args:
            records: Records loaded from the input table
            list_view: View listing every record
            detail_view: Content and draft panes for a single record
            keymap: Key name to the trigger, or triggers (one per mode),
                it fires
            header_allowance: Rows reserved above and around the panes
            border_allowance: Columns reserved around each pane
        """
        self.store = RecordStore(records)
        self.list_view = list_view
        self.detail_view = detail_view
        self.keymap: Dict[str, Tuple[Trigger, ...]] = {
            key: (triggers,) if isinstance(triggers, Trigger) else tuple(triggers)
            for key, triggers in (DEFAULT_KEYMAP if keymap is None else keymap).items()
        }
        self.header_allowance = header_allowance
        self.border_allowance = border_allowance

        self.state = SessionState(cursor=0 if len(self.store) else None)

        # Event emitter for UI notifications
        self.events = EventEmitter()

        self._transitions: Dict[Tuple[Mode, Trigger], Callable[[], None]] = {
            (Mode.LIST, Trigger.QUIT): self._quit,
            (Mode.LIST, Trigger.CONFIRM): self._open_highlighted,
            (Mode.EDIT, Trigger.CANCEL): self._close_editor,
            (Mode.EDIT, Trigger.FORWARD): self._next_record,
            (Mode.EDIT, Trigger.BACKWARD): self._previous_record,
            (Mode.EDIT, Trigger.PAGE_UP): self._scroll_up,
            (Mode.EDIT, Trigger.PAGE_DOWN): self._scroll_down,
        }

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def cursor(self) -> Optional[int]:
        return self.state.cursor

    @property
    def draft(self) -> Optional[str]:
        """Current editor contents, only while editing."""
        if self.state.is_editing:
            return self.detail_view.draft_value()
        return None

    def start(self):
        """Populate the list view; call once before the first event."""
        self.list_view.build(self.store.records())
        if self.state.cursor is not None:
            self.list_view.set_highlighted(self.state.cursor)
        self.list_view.focus()
        logger.debug("Session started with %d records", len(self.store))
        self.events.emit(
            AnnotationEvent(EventType.SESSION_STARTED, {"num_records": len(self.store)})
        )

    def can_fire(self, trigger: Trigger) -> bool:
        """Whether ``trigger`` has a transition in the current mode."""
        return (self.state.mode, trigger) in self._transitions

    def trigger_for(self, key: str) -> Optional[Trigger]:
        """Trigger a key would fire in the current mode, if any."""
        for trigger in self.keymap.get(key, ()):
            if self.can_fire(trigger):
                return trigger
        return None

    def claims(self, key: str) -> bool:
        return self.trigger_for(key) is not None

    def press(self, key: str) -> bool:
        """
        Handle a key press.

        Returns:
            True if the key caused a transition, False if it belongs
            to the focused view
        """
        trigger = self.trigger_for(key)
        if trigger is None:
            return False
        return self.fire(trigger)

    def fire(self, trigger: Trigger) -> bool:
        """
        Apply the transition for ``trigger`` in the current mode.

        Returns:
            True if a transition exists for the current mode
        """
        handler = self._transitions.get((self.state.mode, trigger))
        if handler is None:
            return False
        logger.debug("%s in %s mode", trigger.value, self.state.mode.value)
        handler()
        return True

    def resize(self, width: int, height: int) -> Layout:
        """Recompute and apply view sizes for a terminal of the given size."""
        layout = compute_layout(
            width, height, self.header_allowance, self.border_allowance
        )
        self.list_view.resize(layout.list_width, layout.list_height)
        self.detail_view.resize(layout.pane_width, layout.pane_height)
        if layout != self.state.layout:
            self.state.layout = layout
            self.events.emit(
                AnnotationEvent(
                    EventType.LAYOUT_CHANGED, {"width": width, "height": height}
                )
            )
        return layout

    def tick(self):
        """Periodic redraw of the editor (cursor blink). Never changes state."""
        if self.state.is_editing:
            self.detail_view.refresh()
        self.events.emit(AnnotationEvent(EventType.TICK))

    def commit(self) -> Optional[Record]:
        """Write the draft back to the store and refresh its list entry."""
        if not self.state.is_editing:
            return None
        position = self.state.cursor
        record = self.store.annotate(position, self.detail_view.draft_value())
        self.list_view.replace_entry(position, record)
        logger.debug("Committed annotation for record %d", position)
        self.events.emit(
            AnnotationEvent(
                EventType.RECORD_COMMITTED,
                {"position": position, "annotation": record.annotation},
            )
        )
        return record

    def records(self):
        """Records as they stand, for writing out after the session."""
        return self.store.records()

    # Transitions

    def _quit(self):
        self.state.finished = True
        self.events.emit(AnnotationEvent(EventType.QUIT_REQUESTED))

    def _open_highlighted(self):
        position = self.list_view.current_highlighted()
        if position is None or not len(self.store):
            return
        self.state.cursor = clamp_cursor(position, len(self.store))
        self._load_current()
        self._set_mode(Mode.EDIT)
        self.detail_view.focus()

    def _close_editor(self):
        self.commit()
        self.list_view.set_highlighted(self.state.cursor)
        self._set_mode(Mode.LIST)
        self.list_view.focus()

    def _next_record(self):
        self._step(1)

    def _previous_record(self):
        self._step(-1)

    def _scroll_up(self):
        self.detail_view.scroll_page_up()
        self.events.emit(AnnotationEvent(EventType.CONTENT_SCROLLED, {"direction": -1}))

    def _scroll_down(self):
        self.detail_view.scroll_page_down()
        self.events.emit(AnnotationEvent(EventType.CONTENT_SCROLLED, {"direction": 1}))

    def _step(self, delta: int):
        self.commit()
        target = clamp_cursor(self.state.cursor + delta, len(self.store))
        if target == self.state.cursor:
            return
        self.state.cursor = target
        self.list_view.set_highlighted(target)
        self._load_current()

    def _load_current(self):
        record = self.store[self.state.cursor]
        self.detail_view.set_content(record.source_text)
        self.detail_view.set_draft(record.annotation)
        self.detail_view.set_progress(self.state.cursor, len(self.store))
        self.events.emit(
            AnnotationEvent(EventType.CURSOR_MOVED, {"position": self.state.cursor})
        )

    def _set_mode(self, mode: Mode):
        previous, self.state.mode = self.state.mode, mode
        self.events.emit(
            AnnotationEvent(
                EventType.MODE_CHANGED, {"from": previous.value, "to": mode.value}
            )
        )

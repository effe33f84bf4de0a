"""
Textual application hosting an annotation session.
"""

import logging
from contextlib import contextmanager
from typing import Iterable, List, Optional

from easydict import EasyDict as edict
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.logging import TextualHandler
from textual.widgets import Input, OptionList

from ..core.annotation import (
    AnnotationEvent,
    AnnotationSession,
    EventType,
    Mode,
    Record,
    Trigger,
    build_keymap,
    default_config,
)
from .widgets import RecordDetail, RecordList

logger = logging.getLogger(__name__)


def binding_id(trigger: Trigger) -> str:
    return f"annotator.{trigger.value}"


class AnnotatorApp(App[List[Record]]):
    """Two-mode annotation UI; exits with the annotated records."""

    TITLE = "csv_annotator"

    CSS = """
    #detail-view {
        display: none;
    }
    """

    BINDINGS = [
        Binding(
            "q,ctrl+c", "trigger('quit')", "Quit",
            id=binding_id(Trigger.QUIT), priority=True,
        ),
        Binding(
            "escape,ctrl+c", "trigger('cancel')", "Back to list",
            id=binding_id(Trigger.CANCEL), priority=True,
        ),
        Binding(
            "tab", "trigger('forward')", "Next",
            id=binding_id(Trigger.FORWARD), priority=True,
        ),
        Binding(
            "shift+tab", "trigger('backward')", "Previous",
            id=binding_id(Trigger.BACKWARD), priority=True,
        ),
        Binding(
            "pageup", "trigger('page_up')", "Scroll up",
            id=binding_id(Trigger.PAGE_UP), priority=True,
        ),
        Binding(
            "pagedown", "trigger('page_down')", "Scroll down",
            id=binding_id(Trigger.PAGE_DOWN), priority=True,
        ),
    ]

    def __init__(self, records: Iterable[Record], config: Optional[edict] = None, **kwargs):
        super().__init__(**kwargs)
        self.config = config if config is not None else default_config()
        self._records = list(records)
        self.session: Optional[AnnotationSession] = None

    def compose(self) -> ComposeResult:
        yield RecordList(
            heading=self.config.list.title,
            numbered=self.config.list.numbered,
            id="list-view",
        )
        yield RecordDetail(
            placeholder=self.config.detail.placeholder,
            id="detail-view",
        )

    def on_mount(self) -> None:
        self.set_keymap(
            {
                binding_id(trigger): ",".join(self.config.keys[trigger.value])
                for trigger in Trigger
                if trigger.value in self.config.keys
            }
        )
        self.session = AnnotationSession(
            self._records,
            self.query_one(RecordList),
            self.query_one(RecordDetail),
            keymap=build_keymap(self.config.keys),
            header_allowance=self.config.detail.header_allowance,
            border_allowance=self.config.detail.border_allowance,
        )
        self.session.events.on(EventType.MODE_CHANGED, self._on_mode_changed)
        self.session.events.on(EventType.QUIT_REQUESTED, self._on_quit_requested)
        self.session.start()
        self.session.resize(self.size.width, self.size.height)
        self.set_interval(self.config.blink_interval, self.session.tick)

    def check_action(self, action: str, parameters) -> Optional[bool]:
        if action != "trigger":
            return True
        if self.session is None or isinstance(self.focused, Input):
            # Let the key reach the focused widget
            return False
        return self.session.can_fire(Trigger(parameters[0]))

    def action_trigger(self, name: str) -> None:
        self.session.fire(Trigger(name))

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        self.session.fire(Trigger.CONFIRM)

    def on_resize(self, event: events.Resize) -> None:
        if self.session is not None:
            self.session.resize(event.size.width, event.size.height)

    def _on_mode_changed(self, event: AnnotationEvent) -> None:
        editing = event.data["to"] == Mode.EDIT.value
        self.query_one(RecordDetail).display = editing
        self.query_one(RecordList).display = not editing

    def _on_quit_requested(self, event: AnnotationEvent) -> None:
        self.exit(self.session.records())


@contextmanager
def textual_logging():
    """Route log records through Textual while it owns the terminal."""
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers = [TextualHandler()]
    try:
        yield
    finally:
        root.handlers = saved


def run_annotator(records: Iterable[Record], config: Optional[edict] = None) -> List[Record]:
    """
    Run the interactive session until the user quits.

    Returns:
        Records with their committed annotations
    """
    app = AnnotatorApp(records, config)
    with textual_logging():
        result = app.run()
    if result is None:
        # Quit through the framework's own binding: keep what was committed
        logger.debug("Application closed without a quit request")
        return app.session.records() if app.session is not None else list(app._records)
    return result

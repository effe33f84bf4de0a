"""
Core annotation module - UI-agnostic annotation logic.

This module provides the session controller and record model for
annotating tabular data, usable with any front end that implements
the list and detail view contracts.
"""

from .session import AnnotationSession
from .events import AnnotationEvent, EventType, EventEmitter
from .state import Layout, Mode, Record, RecordStore, SessionState, Trigger
from .config import build_keymap, default_config

__all__ = [
    "AnnotationSession",
    "AnnotationEvent",
    "EventType",
    "EventEmitter",
    "Layout",
    "Mode",
    "Record",
    "RecordStore",
    "SessionState",
    "Trigger",
    "build_keymap",
    "default_config",
]

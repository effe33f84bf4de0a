"""
Interfaces module - terminal front end for the annotation core.

Provides Textual widgets implementing the list and detail view
contracts, and the application that hosts a session.
"""

from .tui import AnnotatorApp, run_annotator
from .widgets import RecordDetail, RecordList

__all__ = ["AnnotatorApp", "RecordDetail", "RecordList", "run_annotator"]

"""
Test fixtures and utilities for csv_annotator tests.

Provides in-memory list/detail views so the session controller can be
exercised without a terminal.
"""

from typing import List, Optional

import pytest

from csv_annotator.core.annotation import AnnotationSession, Record


class FakeListView:
    """List view double recording what the session asks of it."""

    def __init__(self):
        self.entries: List[Record] = []
        self.highlighted: Optional[int] = None
        self.size = None
        self.focused = False
        self.replaced: List[int] = []

    def build(self, records):
        self.entries = list(records)
        self.highlighted = 0 if self.entries else None

    def set_highlighted(self, position):
        self.highlighted = position

    def replace_entry(self, position, record):
        self.entries[position] = record
        self.replaced.append(position)

    def current_highlighted(self):
        return self.highlighted

    def resize(self, width, height):
        self.size = (width, height)

    def focus(self):
        self.focused = True


class FakeDetailView:
    """Detail view double; ``type`` stands in for keystrokes in the editor."""

    def __init__(self):
        self.content = ""
        self.draft = ""
        self.scroll = 0
        self.progress = None
        self.size = None
        self.focused = False
        self.refreshes = 0

    def set_content(self, text):
        self.content = text
        self.scroll = 0

    def set_draft(self, text):
        self.draft = text

    def draft_value(self):
        return self.draft

    def set_progress(self, cursor, total):
        self.progress = (cursor, total)

    def scroll_page_up(self):
        self.scroll = max(0, self.scroll - 1)

    def scroll_page_down(self):
        self.scroll += 1

    def resize(self, width, height):
        self.size = (width, height)

    def focus(self):
        self.focused = True

    def refresh(self):
        self.refreshes += 1

    def type(self, text):
        self.draft += text


def make_records(*rows):
    return [
        Record(position=i, title=title, source_text=text, annotation=annotation)
        for i, (title, text, annotation) in enumerate(rows)
    ]


@pytest.fixture
def records():
    return make_records(
        ("A", "hello", ""),
        ("B", "world", "seen"),
        ("C", "a much longer text\nspread over lines", ""),
    )


@pytest.fixture
def list_view():
    return FakeListView()


@pytest.fixture
def detail_view():
    return FakeDetailView()


@pytest.fixture
def session(records, list_view, detail_view):
    session = AnnotationSession(records, list_view, detail_view)
    session.start()
    return session


@pytest.fixture
def write_csv(tmp_path):
    """Write ``content`` to a CSV file under tmp_path and return its path."""

    def _write(content, name="input.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(name="make_records")
def make_records_fixture():
    return make_records


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: drives the full Textual application headlessly"
    )

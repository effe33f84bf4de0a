"""
Tests for reading and writing annotated tables.
"""

import pytest

from csv_annotator.core.annotation import Record
from csv_annotator.core.errors import ColumnNotFoundError, LoadError, SaveError
from csv_annotator.core.table import load_records, save_records


class TestLoadRecords:
    def test_loads_rows_in_order(self, write_csv):
        path = write_csv('title,text\n"A","hello"\n"B","world"\n')

        records = load_records(path, "text")

        assert records == [
            Record(position=0, title="A", source_text="hello", annotation=""),
            Record(position=1, title="B", source_text="world", annotation=""),
        ]

    def test_many_rows_have_contiguous_positions(self, write_csv):
        rows = "".join(f"t{i},body {i}\n" for i in range(50))
        records = load_records(write_csv("id,body\n" + rows), "body")

        assert [r.position for r in records] == list(range(50))
        assert records[49].title == "t49"

    def test_header_only(self, write_csv):
        assert load_records(write_csv("title,text\n"), "text") == []

    def test_first_column_is_title(self, write_csv):
        path = write_csv("id,extra,body\n1,x,first\n2,y,second\n")

        records = load_records(path, "body")

        assert [r.title for r in records] == ["1", "2"]
        assert [r.source_text for r in records] == ["first", "second"]

    def test_existing_annotations(self, write_csv):
        path = write_csv("title,text,label\nA,hello,greeting\nB,world,\n")

        records = load_records(path, "text", "label")

        assert [r.annotation for r in records] == ["greeting", ""]

    def test_unknown_annotation_column_starts_empty(self, write_csv):
        path = write_csv("title,text\nA,hello\n")

        records = load_records(path, "text", "label")

        assert records[0].annotation == ""

    def test_quoted_fields(self, write_csv):
        path = write_csv('title,text\n"A, B","line one\nline ""two"""\n')

        records = load_records(path, "text")

        assert records[0].title == "A, B"
        assert records[0].source_text == 'line one\nline "two"'

    def test_byte_order_mark(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes("title,text\nA,hello\n".encode("utf-8-sig"))

        assert load_records(path, "text")[0].title == "A"

    def test_blank_lines_are_skipped(self, write_csv):
        path = write_csv("title,text\nA,hello\n\nB,world\n")

        records = load_records(path, "text")

        assert [r.title for r in records] == ["A", "B"]
        assert [r.position for r in records] == [0, 1]

    def test_trailing_blank_line(self, write_csv):
        path = write_csv("title,text\nA,hello\n\n")

        assert [r.title for r in load_records(path, "text")] == ["A"]

    def test_leading_blank_line_before_header(self, write_csv):
        path = write_csv("\ntitle,text\nA,hello\n")

        assert [r.source_text for r in load_records(path, "text")] == ["hello"]

    def test_missing_text_column(self, write_csv):
        path = write_csv("title,body\nA,hello\n")

        with pytest.raises(ColumnNotFoundError) as excinfo:
            load_records(path, "text")

        assert isinstance(excinfo.value, LoadError)
        assert excinfo.value.column == "text"
        assert "no 'text' column" in str(excinfo.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError):
            load_records(tmp_path / "missing.csv", "text")

    def test_empty_file(self, write_csv):
        with pytest.raises(LoadError):
            load_records(write_csv(""), "text")

    def test_ragged_row(self, write_csv):
        path = write_csv("title,text\nA,hello\nB\n")

        with pytest.raises(LoadError, match="line 3"):
            load_records(path, "text")

    def test_ragged_row_after_multiline_field(self, write_csv):
        path = write_csv('title,text\nA,"one\ntwo\nthree"\n\nB\n')

        with pytest.raises(LoadError, match="line 6"):
            load_records(path, "text")


class TestSaveRecords:
    def test_writes_header_and_rows(self, tmp_path, make_records):
        path = tmp_path / "out.csv"
        records = make_records(("A", "hello", "hi"), ("B", "world", "bye"))

        assert save_records(path, records) == 2

        assert path.read_text(encoding="utf-8") == (
            "title,text,annotation\nA,hello,hi\nB,world,bye\n"
        )

    def test_custom_annotation_column(self, tmp_path, make_records):
        path = tmp_path / "out.csv"

        save_records(path, make_records(("A", "hello", "")), "label")

        assert path.read_text(encoding="utf-8") == "title,text,label\nA,hello,\n"

    def test_quotes_when_needed(self, tmp_path, make_records):
        path = tmp_path / "out.csv"
        records = make_records(("A, B", 'say "hi"', "multi\nline"))

        save_records(path, records)

        assert path.read_text(encoding="utf-8") == (
            'title,text,annotation\n"A, B","say ""hi""","multi\nline"\n'
        )

    def test_round_trip_annotations(self, tmp_path, make_records):
        path = tmp_path / "out.csv"
        records = make_records(("A", "x", 'a, "quoted"\nnote'), ("B", "y", "ünïcode"))

        save_records(path, records)
        loaded = load_records(path, "text", "annotation")

        assert [r.annotation for r in loaded] == [r.annotation for r in records]

    def test_unwritable_destination(self, tmp_path, make_records):
        path = tmp_path / "missing-dir" / "out.csv"

        with pytest.raises(SaveError):
            save_records(path, make_records(("A", "x", "")))

    def test_failed_save_leaves_no_partial_file(self, tmp_path, make_records):
        path = tmp_path / "out"
        path.mkdir()

        with pytest.raises(SaveError):
            save_records(path, make_records(("A", "x", "")))

        assert list(tmp_path.iterdir()) == [path]

"""
Load annotatable records from a CSV file.
"""

import csv
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from ..annotation.state import Record
from ..errors import ColumnNotFoundError, LoadError

logger = logging.getLogger(__name__)


def find_column(header: List[str], name: Optional[str]) -> Optional[int]:
    """Index of the last header cell equal to ``name``, or None."""
    if not name:
        return None
    index = None
    for i, cell in enumerate(header):
        if cell == name:
            index = i
    return index


def read_rows(f) -> Iterator[Tuple[int, List[str]]]:
    """Yield (starting line, fields) for each non-blank CSV record."""
    reader = csv.reader(f)
    while True:
        line = reader.line_num + 1
        try:
            row = next(reader)
        except StopIteration:
            return
        if row:
            yield line, row


def load_records(
    path: Union[str, Path],
    text_column: str,
    annotation_column: Optional[str] = None,
) -> List[Record]:
    """
    Read every data row of a CSV file as a record.

    Args:
        path: CSV file with a header row
        text_column: Header of the column holding the text to annotate
        annotation_column: Optional header of a column with existing
            annotations

    Returns:
        Records in file order; the first column supplies each title

    Raises:
        ColumnNotFoundError: ``text_column`` is not in the header
        LoadError: the file cannot be opened or parsed
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            rows = list(read_rows(f))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LoadError(f"error reading CSV {path}: {e}") from e

    if not rows:
        raise LoadError(f"error reading CSV {path}: no header row")

    (_, header), data = rows[0], rows[1:]
    text_index = find_column(header, text_column)
    if text_index is None:
        raise ColumnNotFoundError(text_column, header)

    annotation_index = find_column(header, annotation_column)
    if annotation_column and annotation_index is None:
        logger.warning(
            "Annotation column '%s' not found in %s, starting empty",
            annotation_column,
            path,
        )

    records = []
    for position, (line, row) in enumerate(data):
        if len(row) != len(header):
            raise LoadError(
                f"error reading CSV {path}: record on line {line} "
                f"has {len(row)} fields, expected {len(header)}"
            )
        records.append(
            Record(
                position=position,
                title=row[0],
                source_text=row[text_index],
                annotation=row[annotation_index] if annotation_index is not None else "",
            )
        )

    logger.info("Loaded %d records from %s", len(records), path)
    return records

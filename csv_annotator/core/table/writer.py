"""
Write annotated records to a CSV file.
"""

import csv
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Union

from ..annotation.state import Record
from ..errors import SaveError

logger = logging.getLogger(__name__)

OUTPUT_HEADER = ("title", "text")


def save_records(
    path: Union[str, Path],
    records: Iterable[Record],
    annotation_column: str = "annotation",
) -> int:
    """
    Write records as ``title,text,<annotation_column>`` rows.

    The file is written next to its destination and moved into place
    once complete, so a failed save never leaves a truncated table.

    Returns:
        Number of data rows written

    Raises:
        SaveError: the file cannot be created or written
    """
    path = Path(path)
    annotation_column = annotation_column or "annotation"
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
        )
        count = 0
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow([*OUTPUT_HEADER, annotation_column])
            for record in records:
                writer.writerow([record.title, record.source_text, record.annotation])
                count += 1
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except (OSError, csv.Error) as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise SaveError(f"error writing CSV {path}: {e}") from e

    logger.info("Wrote %d records to %s", count, path)
    return count

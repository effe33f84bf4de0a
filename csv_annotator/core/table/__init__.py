"""
Table I/O - reading records from and writing them back to CSV files.
"""

from .reader import load_records
from .writer import save_records, OUTPUT_HEADER

__all__ = ["load_records", "save_records", "OUTPUT_HEADER"]

"""
CSV Loader

Reads uploaded CSV text into raw records and validates uploads before
any analysis runs. The first row is the header; every cell is typed on
its own, so a column can mix numbers and text.
"""

from typing import Any, List, Optional
from pathlib import Path
import csv
import io
import logging
import os
import re

import pandas as pd

from moodboard.core.analysis_store import RawRecord

logger = logging.getLogger(__name__)

_FLOAT_PATTERN = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$")
_MAX_SAFE_INTEGER = 2 ** 53 - 1


class CSVAnalysisError(ValueError):
    """
    Raised when CSV content cannot be parsed or contains no rows.
    """


class UploadValidationError(ValueError):
    """
    Raised when an uploaded file is rejected before parsing.
    """


def coerce_cell(value: str) -> Any:
    """
    Convert one raw CSV cell to a typed scalar.

    "true"/"TRUE" and "false"/"FALSE" become booleans, numeric-looking
    text becomes int or float, empty cells become None. Anything else,
    including integers too large to represent exactly, stays text.
    """
    if value == "":
        return None
    if value in ("true", "TRUE"):
        return True
    if value in ("false", "FALSE"):
        return False
    if _FLOAT_PATTERN.match(value):
        stripped = value.strip()
        if re.fullmatch(r"-?\d+", stripped):
            number = int(stripped)
            return number if abs(number) <= _MAX_SAFE_INTEGER else value
        number = float(stripped)
        if abs(number) > _MAX_SAFE_INTEGER:
            return value
        return number
    return value


def _header_width(csv_text: str) -> int:
    """Number of fields in the first non-blank row."""
    for row in csv.reader(io.StringIO(csv_text)):
        if len(row) > 1 or (row and row[0].strip()):
            return len(row)
    return 0


def parse_csv(csv_text: str) -> List[RawRecord]:
    """
    Parse CSV text into raw records.

    Args:
        csv_text: Full CSV content, header row first

    Returns:
        One dict per non-blank data row, keyed by header in header order.
        Empty or header-only input yields an empty list.
    """
    if not csv_text or not csv_text.strip():
        return []

    width = _header_width(csv_text)
    if not width:
        return []

    # Rows longer than the header keep their leading cells
    df = pd.read_csv(
        io.StringIO(csv_text),
        header=None,
        names=list(range(width)),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
        on_bad_lines=lambda fields: fields[:width],
    )
    if df.empty:
        return []

    columns = [str(c) for c in df.iloc[0]]
    records: List[RawRecord] = []
    for values in df.iloc[1:].itertuples(index=False, name=None):
        records.append({
            column: coerce_cell(value) if isinstance(value, str) else None
            for column, value in zip(columns, values)
        })

    logger.debug(f"Parsed {len(records)} rows with columns: {columns}")
    return records


def decode_csv_bytes(data: bytes) -> str:
    """Decode uploaded bytes as UTF-8, falling back to latin-1."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.info("Upload is not valid UTF-8, decoding as latin-1")
        return data.decode("latin-1")


def format_size_limit(max_size: int) -> str:
    """Human-readable size limit, e.g. 5MB or 512KB."""
    mb = 1024 * 1024
    if max_size >= mb and max_size % mb == 0:
        return f"{max_size // mb}MB"
    return f"{max(1, round(max_size / 1024))}KB"


def validate_upload(filename: Optional[str], size: int, max_size: int) -> None:
    """
    Reject uploads that are not CSV, too large, or empty.

    Raises:
        UploadValidationError: with a user-facing message
    """
    if not filename or not filename.lower().endswith(".csv"):
        raise UploadValidationError("Please select a valid CSV file.")

    if size > max_size:
        raise UploadValidationError(f"File size must be less than {format_size_limit(max_size)}.")

    if size == 0:
        raise UploadValidationError("The selected file is empty.")


def read_csv_file(path: str, max_size: int) -> str:
    """
    Validate a CSV file on disk and return its text.

    Args:
        path: Path to the CSV file
        max_size: Maximum accepted size in bytes

    Returns:
        Decoded file content
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise UploadValidationError(f"File not found: {path}")

    validate_upload(file_path.name, os.path.getsize(file_path), max_size)

    return decode_csv_bytes(file_path.read_bytes())

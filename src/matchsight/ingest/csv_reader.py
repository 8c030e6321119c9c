"""CSV ingestion: raw text or bytes into a ``Table``.

Splitting is deliberately naive (plain commas, no quoting). Every value is
trimmed, and converted to ``float`` when it reads as a number.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from matchsight.domain.exceptions import IngestionError
from matchsight.domain.table import Cell, Table, parse_number
from matchsight.logging import logger

_LINE_SPLIT = re.compile(r"\r\n|\n")


@dataclass(frozen=True, slots=True)
class FileError:
    file_name: str
    reason: str

    @property
    def message(self) -> str:
        return f"Failed to parse {self.file_name}: {self.reason}"


@dataclass(frozen=True, slots=True)
class BatchResult:
    tables: list[Table] = field(default_factory=list)
    errors: list[FileError] = field(default_factory=list)


def coerce_cell(raw: str) -> Cell:
    value = raw.strip()
    if not value:
        return ""
    number = parse_number(value)
    return value if number is None else number


def parse_csv(text: str, name: str) -> Table:
    """Parse comma-delimited *text*; the first line is the header.

    Raises:
        IngestionError: empty text, or no data row after the header.
    """
    if not text or not text.strip():
        raise IngestionError(name, "File is empty.")

    lines = _LINE_SPLIT.split(text.strip())
    if len(lines) < 2:
        raise IngestionError(name, "CSV must have a header and at least one row of data.")

    headers = [h.strip() for h in lines[0].split(",")]
    records = []
    for line in lines[1:]:
        values = line.split(",")
        # Duplicate headers: the later column overwrites the earlier key.
        record: dict[str, Cell] = {}
        for index, header in enumerate(headers):
            record[header] = coerce_cell(values[index]) if index < len(values) else ""
        records.append(record)

    return Table.from_records(name, headers, records)


def read_csv_bytes(data: bytes, name: str) -> Table:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise IngestionError(name, f"Error reading file: {exc.reason}") from exc
    return parse_csv(text, name)


def read_csv_file(path: str | Path) -> Table:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise IngestionError(path.name, f"Error reading file: {exc.strerror or exc}") from exc
    return read_csv_bytes(data, path.name)


def parse_batch(files: Iterable[tuple[str, bytes]]) -> BatchResult:
    """Parse each ``(name, content)`` pair independently.

    A failing file becomes a ``FileError``; it never aborts the others.
    """
    result = BatchResult()
    for name, content in files:
        try:
            result.tables.append(read_csv_bytes(content, name))
        except IngestionError as exc:
            logger.warning("Skipping %s: %s", name, exc.reason)
            result.errors.append(FileError(file_name=name, reason=exc.reason))

    logger.info(
        "Parsed %d/%d file(s)", len(result.tables), len(result.tables) + len(result.errors),
    )
    return result

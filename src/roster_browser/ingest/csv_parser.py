import csv
import io
from dataclasses import dataclass

from roster_browser.ingest._csv_helpers import is_blank_row, strip_bom


class CsvFormatError(ValueError):
    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


@dataclass(frozen=True)
class CsvRow:
    line: int
    values: dict[str, str]


@dataclass(frozen=True)
class ParsedCsv:
    header: tuple[str, ...]
    rows: tuple[CsvRow, ...]


def decode_csv(data: bytes | str) -> str:
    if isinstance(data, str):
        return strip_bom(data)
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise CsvFormatError(f"Resource is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc


def _read_header(row: list[str], line: int) -> tuple[str, ...]:
    header = tuple(name.strip() for name in row)
    if any(name == "" for name in header):
        raise CsvFormatError("Header row contains a blank column name", line)
    duplicates = sorted({name for name in header if header.count(name) > 1})
    if duplicates:
        raise CsvFormatError(f"Header row repeats column(s): {', '.join(duplicates)}", line)
    return header


def parse_csv(data: bytes | str) -> ParsedCsv:
    """Parse delimited text whose first non-blank row names the columns.

    Blank lines are skipped. A row shorter than the header yields a record
    without its trailing fields; a longer row is an error.
    """
    text = decode_csv(data)
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    header: tuple[str, ...] | None = None
    rows: list[CsvRow] = []
    try:
        for row in reader:
            if is_blank_row(row):
                continue
            if header is None:
                header = _read_header(row, reader.line_num)
                continue
            if len(row) > len(header):
                raise CsvFormatError(
                    f"Row has {len(row)} fields but the header names {len(header)}", reader.line_num
                )
            rows.append(CsvRow(line=reader.line_num, values=dict(zip(header, row, strict=False))))
    except csv.Error as exc:
        raise CsvFormatError(str(exc), reader.line_num) from exc
    if header is None:
        raise CsvFormatError("Resource has no header row")
    return ParsedCsv(header=header, rows=tuple(rows))

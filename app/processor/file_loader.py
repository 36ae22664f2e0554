"""CSV file -> Table.

Cells are typed the way the anonymizer expects them: empty -> None,
integers -> int, reals -> float, everything else stays text.
"""

import csv
import io
import re
from pathlib import Path

from charset_normalizer import from_bytes

from app.logging.logger import Log
from app.processor.exceptions import TableParseError
from app.table.models import CellValue, Row, Table

_UTF8_BOM = b"\xef\xbb\xbf"
_DELIMITERS = ",;\t|"
_NUMBER_RE = re.compile(r"^-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?$")
# Leading zeros (zip codes, ids) would be lost by numeric conversion
_LEADING_ZERO_RE = re.compile(r"^-?0\d")


def parse_cell(raw: str) -> CellValue:
    """Convert one raw CSV field to a typed cell value."""
    text = raw.strip()
    if not text:
        return None
    if not _NUMBER_RE.match(text) or _LEADING_ZERO_RE.match(text):
        return raw
    if any(ch in text for ch in ".eE"):
        return float(text)
    return int(text)


class TableLoader:
    """Reads a CSV file with a header row into a Table."""

    def __init__(self, encoding: str | None = None) -> None:
        self._encoding = encoding

    def load(self, path: Path) -> Table:
        """Read and parse the CSV file at *path*.

        Raises:
            FileNotFoundError: if *path* does not exist.
            TableParseError: if the file cannot be read, decoded or parsed.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise TableParseError(f"Failed to read {path}: {exc}") from exc
        table = self.parse(raw)
        Log.info(f"Loaded {len(table)} rows x {len(table.headers)} columns from {path.name}")
        return table

    def parse(self, raw: bytes) -> Table:
        """Parse CSV bytes into a Table.

        Empty lines are skipped. Rows shorter than the header get None for
        the missing cells; longer rows are rejected.
        """
        text = self._decode(raw)
        try:
            records = list(csv.reader(io.StringIO(text, newline=""), self._sniff(text)))
        except csv.Error as exc:
            raise TableParseError(f"Failed to parse CSV: {exc}") from exc

        records = [r for r in records if any(cell.strip() for cell in r)]
        if not records:
            return Table()

        headers = tuple(cell.strip() for cell in records[0])
        rows: list[Row] = []
        for line_number, record in enumerate(records[1:], start=2):
            if len(record) > len(headers):
                raise TableParseError(
                    f"Failed to parse CSV: row {line_number} has {len(record)} fields, "
                    f"expected {len(headers)}"
                )
            cells = [parse_cell(cell) for cell in record]
            cells.extend([None] * (len(headers) - len(cells)))
            rows.append(dict(zip(headers, cells)))
        return Table(headers=headers, rows=rows)

    def _decode(self, raw: bytes) -> str:
        if self._encoding is not None:
            try:
                return raw.decode(self._encoding)
            except (UnicodeDecodeError, LookupError) as exc:
                raise TableParseError(
                    f"Failed to decode CSV as {self._encoding}: {exc}"
                ) from exc
        if not raw:
            return ""
        if raw.startswith(_UTF8_BOM):
            return raw.decode("utf-8-sig", errors="replace")

        match = from_bytes(raw).best()
        if match is None:
            raise TableParseError("Failed to parse CSV: unable to detect text encoding")
        Log.debug(f"Detected CSV encoding: {match.encoding}")
        return str(match)

    @staticmethod
    def _sniff(text: str) -> type[csv.Dialect] | csv.Dialect:
        try:
            return csv.Sniffer().sniff(text[:4096], delimiters=_DELIMITERS)
        except csv.Error:
            return csv.excel

from dataclasses import dataclass, field

from app.classification.models import ColumnTypeMap

CellValue = str | int | float | None
Row = dict[str, CellValue]


@dataclass(frozen=True)
class Table:
    """Ordered column schema plus rows keyed by column name.

    Rows keep their own key order; a key missing from a row means the cell
    is absent and it stays missing after anonymization.
    """

    headers: tuple[str, ...] = ()
    rows: list[Row] = field(default_factory=list)

    @classmethod
    def from_rows(cls, rows: list[Row]) -> "Table":
        """Build a table whose header order is the first row's key order."""
        headers = tuple(rows[0].keys()) if rows else ()
        return cls(headers=headers, rows=rows)

    def column(self, name: str) -> list[CellValue]:
        """All cells of *name* in row order, absent ones included as None."""
        return [row.get(name) for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)


@dataclass
class ResultBundle:
    """Output of one pipeline run."""

    original: Table
    anonymized: Table
    headers: list[str] = field(default_factory=list)
    column_types: ColumnTypeMap = field(default_factory=dict)

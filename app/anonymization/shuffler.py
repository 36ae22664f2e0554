import random

from app.table.models import CellValue, Table
from app.table.values import is_absent, to_text


class ValueShuffler:
    """Permutes a column's own values among its rows.

    The permutation is drawn from the injected random source so tests can
    pin it with a seeded ``random.Random``.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def permute(self, values: list[CellValue]) -> list[CellValue]:
        """Return a uniform Fisher-Yates permutation of *values* (input untouched)."""
        shuffled = list(values)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    @staticmethod
    def present_values(table: Table, column: str) -> list[CellValue]:
        """Non-absent cells of *column* in row order."""
        return [v for v in table.column(column) if not is_absent(v)]

    @staticmethod
    def lookup(
        text: str,
        originals: list[CellValue],
        shuffled: list[CellValue],
    ) -> CellValue:
        """Map *text* to the shuffled slot of its first occurrence.

        Lookup is by first occurrence, not by row: rows sharing an original
        value always land on the same shuffled value.
        """
        if not shuffled:
            return text
        position = next(
            (i for i, original in enumerate(originals) if to_text(original) == text),
            -1,
        )
        if position < 0:
            return text
        return shuffled[position % len(shuffled)]

    def shuffle_columns(self, table: Table, columns: list[str]) -> Table:
        """Permute whole *columns* across the table, leaving absent cells in place.

        Returns a new Table; values keep their original types.
        """
        rows = [dict(row) for row in table.rows]
        for column in columns:
            shuffled = self.permute(self.present_values(table, column))
            if not shuffled:
                continue
            index = 0
            for row in rows:
                if column in row and not is_absent(row[column]):
                    row[column] = shuffled[index % len(shuffled)]
                    index += 1
        return Table(headers=table.headers, rows=rows)

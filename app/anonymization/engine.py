"""Column-type driven table anonymizer.

Processing flow:
1. Create a fresh RunState (pseudonym maps, shuffle cache, numeric profiles).
2. Walk rows in order; absent cells are copied through untouched.
3. Dispatch every present cell by its column type:
   a. name / email / phone: synthesized replacement, cached per original value.
   b. date: generalized to ``Mon-YYYY``; a bare year becomes ``Jan-YYYY``.
   c. numeric: bucketed, or shuffled when the column is high-cardinality.
   d. anything else: shuffled within its own column.
4. Return a new Table with the same headers, row order and key order.
"""

from __future__ import annotations

import random
from typing import ClassVar

from app.anonymization.base import BaseValueGenerator
from app.anonymization.bucketing import bucket, should_shuffle
from app.anonymization.exceptions import AnonymizationError
from app.anonymization.mapper import ConsistentMapper
from app.anonymization.models import NumericProfile, RunState
from app.anonymization.shuffler import ValueShuffler
from app.classification.models import ColumnType, ColumnTypeMap
from app.logging.logger import Log
from app.table.models import Row, Table
from app.table.values import is_absent, parse_date, parse_number, parse_year, to_text


class AnonymizationEngine:
    """Produces an anonymized copy of a table from its column type map.

    All per-run memory lives in a RunState created inside ``anonymize``, so
    one engine can be reused and concurrent calls never share caches.
    """

    _MONTHS: ClassVar[tuple[str, ...]] = (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    )

    def __init__(
        self,
        generator: BaseValueGenerator,
        rng: random.Random | None = None,
    ) -> None:
        self._generator = generator
        self._shuffler = ValueShuffler(rng)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def anonymize(self, table: Table, column_types: ColumnTypeMap) -> Table:
        """Return a same-shape table with every present cell anonymized.

        Args:
            table: Parsed input table.
            column_types: One ColumnType per column; columns missing from the
                map are shuffled.

        Returns:
            New Table. ``result.rows[i][c]`` exists iff ``table.rows[i][c]`` does.

        Raises:
            AnonymizationError: on any unexpected failure.
        """
        try:
            return self._run(table, column_types)
        except AnonymizationError:
            raise
        except Exception as exc:
            raise AnonymizationError(f"Anonymization failed: {exc}") from exc

    def shuffle_columns(self, table: Table, columns: list[str]) -> Table:
        """Permute the named columns across the whole table."""
        return self._shuffler.shuffle_columns(table, columns)

    # ------------------------------------------------------------------
    # Row loop
    # ------------------------------------------------------------------

    def _run(self, table: Table, column_types: ColumnTypeMap) -> Table:
        state = RunState()
        rows: list[Row] = []
        for row in table.rows:
            anonymized: Row = {}
            for column, value in row.items():
                if is_absent(value):
                    anonymized[column] = value
                    continue
                anonymized[column] = self._anonymize_value(
                    to_text(value), column_types.get(column), column, table, state
                )
            rows.append(anonymized)

        Log.info(
            f"Anonymized {len(rows)} rows",
            names=len(state.names),
            emails=len(state.emails),
            phones=len(state.phones),
            shuffled_columns=len(state.shuffled),
        )
        return Table(headers=table.headers, rows=rows)

    def _anonymize_value(
        self,
        value: str,
        column_type: ColumnType | None,
        column: str,
        table: Table,
        state: RunState,
    ) -> str:
        if column_type == ColumnType.NAME:
            return self._anonymize_name(value, state)
        if column_type == ColumnType.EMAIL:
            return ConsistentMapper(state.emails).get_or_create(value, self._generator.email)
        if column_type == ColumnType.PHONE:
            return ConsistentMapper(state.phones).get_or_create(value, self._generator.phone)
        if column_type == ColumnType.DATE:
            return self._anonymize_date(value)
        if column_type == ColumnType.NUMERIC:
            return self._anonymize_numeric(value, column, table, state)
        return self._shuffle(value, column, table, state)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def _anonymize_name(self, value: str, state: RunState) -> str:
        if len(value.split()) >= 2:
            factory = self._generator.full_name
        else:
            factory = self._generator.first_name
        return ConsistentMapper(state.names).get_or_create(value, factory)

    def _anonymize_date(self, value: str) -> str:
        parsed = parse_date(value) or parse_year(value)
        if parsed is None:
            Log.debug(f"Unparseable date kept as is: {value!r}")
            return value
        return f"{self._MONTHS[parsed.month - 1]}-{parsed.year:04d}"

    def _anonymize_numeric(
        self,
        value: str,
        column: str,
        table: Table,
        state: RunState,
    ) -> str:
        number = parse_number(value)
        if number is None:
            Log.warning("Non-numeric value in numeric column kept as is", column=column)
            return value

        profile = state.numeric_profiles.get(column)
        if profile is None:
            profile = self._numeric_profile(table, column)
            state.numeric_profiles[column] = profile
            Log.debug(
                f"Column {column!r}: unique ratio {profile.unique_ratio:.2f} "
                f"over {profile.total} values"
            )

        if should_shuffle(profile):
            return self._shuffle(value, column, table, state)
        return bucket(number)

    def _shuffle(self, value: str, column: str, table: Table, state: RunState) -> str:
        originals = self._shuffler.present_values(table, column)
        shuffled = state.shuffled.get(column)
        if shuffled is None:
            shuffled = self._shuffler.permute(originals)
            state.shuffled[column] = shuffled
        return to_text(self._shuffler.lookup(value, originals, shuffled))

    @staticmethod
    def _numeric_profile(table: Table, column: str) -> NumericProfile:
        numbers = [
            number
            for number in (parse_number(v) for v in table.column(column) if not is_absent(v))
            if number is not None
        ]
        return NumericProfile(total=len(numbers), distinct=len(set(numbers)))

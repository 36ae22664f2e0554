"""Heuristic column type classifier.

Decision order (first match wins):
1. Column name contains a known indicator (name, email, phone, date).
2. Value shapes, each against a coverage threshold over present values:
   email, phone, date, numeric, categorical cardinality, proper-case names.
3. Fallback to categorical, which is anonymized by shuffling.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import ClassVar

from app.classification.models import ColumnType
from app.table.models import CellValue
from app.table.values import is_absent, parse_date, parse_number, to_text


class TypeClassifier:
    """Infers a ColumnType from a column name and its values. Stateless."""

    NAME_INDICATORS: ClassVar[tuple[str, ...]] = (
        "name", "first", "last", "fname", "lname", "fullname",
    )
    EMAIL_INDICATORS: ClassVar[tuple[str, ...]] = ("email", "mail", "e_mail")
    PHONE_INDICATORS: ClassVar[tuple[str, ...]] = (
        "phone", "mobile", "tel", "telephone", "contact",
    )
    DATE_INDICATORS: ClassVar[tuple[str, ...]] = (
        "date", "birth", "created", "updated", "time",
    )

    # Checked in this order; a name hit wins over everything else
    _NAME_RULES: ClassVar[list[tuple[ColumnType, tuple[str, ...]]]] = [
        (ColumnType.NAME, NAME_INDICATORS),
        (ColumnType.EMAIL, EMAIL_INDICATORS),
        (ColumnType.PHONE, PHONE_INDICATORS),
        (ColumnType.DATE, DATE_INDICATORS),
    ]

    _EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
    _PHONE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^\+?[1-9]\d{6,14}$"
        r"|^\(?\d{3}\)?[-.]?\d{3}[-.]?\d{4}$"
    )
    _DATE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}$"
        r"|^\d{4}[/\-]\d{1,2}[/\-]\d{1,2}$"
    )
    _NAME_PATTERNS: ClassVar[tuple[re.Pattern[str], ...]] = (
        re.compile(r"^[A-Z][a-z]+ [A-Z][a-z]+$"),  # First Last
        re.compile(r"^[A-Z][a-z]+$"),  # Single
        re.compile(r"^[A-Z][a-z]+, [A-Z][a-z]+$"),  # Last, First
    )
    _WHITESPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s")

    EMAIL_THRESHOLD: ClassVar[float] = 0.7
    PHONE_THRESHOLD: ClassVar[float] = 0.7
    DATE_THRESHOLD: ClassVar[float] = 0.6
    NUMERIC_THRESHOLD: ClassVar[float] = 0.9
    NAME_THRESHOLD: ClassVar[float] = 0.6
    CATEGORICAL_MIN_DISTINCT: ClassVar[int] = 10
    CATEGORICAL_DISTINCT_RATIO: ClassVar[float] = 0.5

    def classify(self, column_name: str, values: Iterable[CellValue]) -> ColumnType:
        """Return the semantic type of a column.

        Args:
            column_name: Header as it appears in the table.
            values: Every cell of the column; absent cells are ignored.

        Returns:
            Exactly one ColumnType. UNKNOWN only when no value is present.
        """
        present = [v for v in values if not is_absent(v)]
        if not present:
            return ColumnType.UNKNOWN

        by_name = self._classify_by_name(column_name)
        if by_name is not None:
            return by_name

        return self._classify_by_values(present)

    def _classify_by_name(self, column_name: str) -> ColumnType | None:
        clean = column_name.lower().strip()
        for column_type, indicators in self._NAME_RULES:
            if any(indicator in clean for indicator in indicators):
                return column_type
        return None

    def _classify_by_values(self, present: list[CellValue]) -> ColumnType:
        texts = [to_text(v) for v in present]

        if self._coverage(texts, self._looks_like_email) >= self.EMAIL_THRESHOLD:
            return ColumnType.EMAIL
        if self._coverage(texts, self._looks_like_phone) >= self.PHONE_THRESHOLD:
            return ColumnType.PHONE
        if self._coverage(texts, self._looks_like_date) >= self.DATE_THRESHOLD:
            return ColumnType.DATE
        if self._coverage(present, self._looks_like_number) >= self.NUMERIC_THRESHOLD:
            return ColumnType.NUMERIC

        distinct = len(set(texts))
        limit = max(self.CATEGORICAL_MIN_DISTINCT, len(texts) * self.CATEGORICAL_DISTINCT_RATIO)
        if 1 < distinct <= limit:
            return ColumnType.CATEGORICAL

        if self._coverage(texts, self._looks_like_name) >= self.NAME_THRESHOLD:
            return ColumnType.NAME

        return ColumnType.CATEGORICAL

    @staticmethod
    def _coverage(values: list, predicate: Callable[..., bool]) -> float:
        return sum(1 for v in values if predicate(v)) / len(values)

    @classmethod
    def _looks_like_email(cls, text: str) -> bool:
        return cls._EMAIL_RE.match(text) is not None

    @classmethod
    def _looks_like_phone(cls, text: str) -> bool:
        return cls._PHONE_RE.match(cls._WHITESPACE_RE.sub("", text)) is not None

    @classmethod
    def _looks_like_date(cls, text: str) -> bool:
        return cls._DATE_RE.match(text) is not None or parse_date(text) is not None

    @staticmethod
    def _looks_like_number(value: CellValue) -> bool:
        return parse_number(value) is not None

    @classmethod
    def _looks_like_name(cls, text: str) -> bool:
        stripped = text.strip()
        return any(p.match(stripped) for p in cls._NAME_PATTERNS)

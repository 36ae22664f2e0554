import random

import pytest

from app.anonymization.base import BaseValueGenerator
from app.anonymization.engine import AnonymizationEngine
from app.table.models import Table


class SequentialValueGenerator(BaseValueGenerator):
    """Predictable replacements: every call bumps a shared counter."""

    def __init__(self) -> None:
        self.calls = 0

    def _next(self) -> int:
        self.calls += 1
        return self.calls

    def first_name(self) -> str:
        return f"First{self._next()}"

    def full_name(self) -> str:
        n = self._next()
        return f"First{n} Last{n}"

    def email(self) -> str:
        return f"user{self._next()}@example.com"

    def phone(self) -> str:
        return f"555-000-{self._next():04d}"


@pytest.fixture()
def generator() -> SequentialValueGenerator:
    return SequentialValueGenerator()


@pytest.fixture()
def engine(generator: SequentialValueGenerator) -> AnonymizationEngine:
    return AnonymizationEngine(generator, rng=random.Random(7))


@pytest.fixture()
def people_rows() -> list[dict[str, object]]:
    """Ten rows covering every column type, with a few absent cells."""
    return [
        {"full_name": "John Smith", "email": "john@corp.com", "phone": "555-123-4567",
         "signup_date": "2021-03-15", "age": 34, "salary": 52000, "department": "Sales"},
        {"full_name": "Jane Doe", "email": "jane@corp.com", "phone": "555-987-6543",
         "signup_date": "2021-04-02", "age": 34, "salary": 52000, "department": "IT"},
        {"full_name": "John Smith", "email": "john@corp.com", "phone": "555-123-4567",
         "signup_date": "2020-11-30", "age": 45, "salary": 61000, "department": "Sales"},
        {"full_name": "Madonna", "email": "m@music.org", "phone": None,
         "signup_date": "2019-07-04", "age": 45, "salary": 61000, "department": "HR"},
        {"full_name": "Alan Turing", "email": "alan@corp.com", "phone": "555-222-3333",
         "signup_date": None, "age": 29, "salary": 75000, "department": "IT"},
        {"full_name": "Ada Lovelace", "email": None, "phone": "555-444-5555",
         "signup_date": "2022-01-10", "age": 29, "salary": 75000, "department": "IT"},
        {"full_name": None, "email": "anon@corp.com", "phone": "555-666-7777",
         "signup_date": "2022-02-20", "age": 34, "salary": 52000, "department": "Sales"},
        {"full_name": "Grace Hopper", "email": "grace@navy.mil", "phone": "555-888-9999",
         "signup_date": "2018-09-09", "age": 45, "salary": 61000, "department": None},
        {"full_name": "Linus Torvalds", "email": "linus@kernel.org", "phone": "555-101-2020",
         "signup_date": "2017-05-05", "age": 29, "salary": 75000, "department": "HR"},
        {"full_name": "Jane Doe", "email": "jane@corp.com", "phone": "555-987-6543",
         "signup_date": "2021-04-02", "age": None, "salary": 52000, "department": "Sales"},
    ]


@pytest.fixture()
def people_table(people_rows: list[dict[str, object]]) -> Table:
    return Table.from_rows(people_rows)  # type: ignore[arg-type]

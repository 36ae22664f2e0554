import random

from app.anonymization.shuffler import ValueShuffler
from app.table.models import Table


class TestPermute:
    def test_keeps_the_same_values(self) -> None:
        values = ["a", "b", "c", "d", "e", "a"]
        shuffled = ValueShuffler(random.Random(1)).permute(values)
        assert sorted(shuffled) == sorted(values)

    def test_does_not_mutate_input(self) -> None:
        values = [1, 2, 3, 4]
        ValueShuffler(random.Random(1)).permute(values)
        assert values == [1, 2, 3, 4]

    def test_same_seed_same_permutation(self) -> None:
        values = list(range(20))
        first = ValueShuffler(random.Random(42)).permute(values)
        second = ValueShuffler(random.Random(42)).permute(values)
        assert first == second

    def test_empty_and_single(self) -> None:
        shuffler = ValueShuffler(random.Random(1))
        assert shuffler.permute([]) == []
        assert shuffler.permute(["only"]) == ["only"]


class TestLookup:
    def test_uses_first_occurrence_position(self) -> None:
        originals = ["a", "b", "a"]
        shuffled = ["b", "a", "a"]
        assert ValueShuffler.lookup("a", originals, shuffled) == "b"
        assert ValueShuffler.lookup("b", originals, shuffled) == "a"

    def test_matches_numbers_by_text(self) -> None:
        originals = [1500.0, 20]
        shuffled = [20, 1500.0]
        assert ValueShuffler.lookup("1500", originals, shuffled) == 20

    def test_unknown_value_returned_unchanged(self) -> None:
        assert ValueShuffler.lookup("zzz", ["a"], ["a"]) == "zzz"

    def test_empty_column_returns_value(self) -> None:
        assert ValueShuffler.lookup("x", [], []) == "x"


class TestPresentValues:
    def test_skips_absent_cells_in_row_order(self) -> None:
        table = Table.from_rows([{"c": "x"}, {"c": None}, {"c": ""}, {"c": 3}])
        assert ValueShuffler.present_values(table, "c") == ["x", 3]


class TestShuffleColumns:
    def _table(self) -> Table:
        return Table.from_rows(
            [
                {"id": 1, "city": "Oslo", "zone": "A"},
                {"id": 2, "city": None, "zone": "B"},
                {"id": 3, "city": "Rome", "zone": "C"},
                {"id": 4, "city": "Lima", "zone": "D"},
                {"id": 5, "city": "Kyiv", "zone": "E"},
            ]
        )

    def test_absent_cells_stay_absent(self) -> None:
        result = ValueShuffler(random.Random(3)).shuffle_columns(self._table(), ["city"])
        assert result.rows[1]["city"] is None

    def test_column_values_are_permuted(self) -> None:
        table = self._table()
        result = ValueShuffler(random.Random(3)).shuffle_columns(table, ["city", "id"])
        assert sorted(r["city"] for r in result.rows if r["city"]) == ["Kyiv", "Lima", "Oslo", "Rome"]
        assert sorted(r["id"] for r in result.rows) == [1, 2, 3, 4, 5]

    def test_other_columns_untouched(self) -> None:
        table = self._table()
        result = ValueShuffler(random.Random(3)).shuffle_columns(table, ["city"])
        assert [r["zone"] for r in result.rows] == ["A", "B", "C", "D", "E"]

    def test_input_table_not_modified(self) -> None:
        table = self._table()
        ValueShuffler(random.Random(3)).shuffle_columns(table, ["city", "zone"])
        assert [r["city"] for r in table.rows] == ["Oslo", None, "Rome", "Lima", "Kyiv"]

    def test_keeps_value_types(self) -> None:
        result = ValueShuffler(random.Random(3)).shuffle_columns(self._table(), ["id"])
        assert all(isinstance(r["id"], int) for r in result.rows)

    def test_unknown_column_is_ignored(self) -> None:
        table = self._table()
        result = ValueShuffler(random.Random(3)).shuffle_columns(table, ["missing"])
        assert result.rows == table.rows
        assert result.headers == table.headers

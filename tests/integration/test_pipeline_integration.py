from datetime import date
from pathlib import Path

import pytest

from app.classification.models import ColumnType
from app.config.settings import Settings
from app.main import main
from app.processor.exporter import TableExporter, export_filename
from app.processor.file_loader import TableLoader
from app.processor.processor import build_processor

CSV_TEXT = """full_name,email,phone,signup_date,age,salary,department
John Smith,john@corp.com,555-123-4567,2021-03-15,34,52000,Sales
Jane Doe,jane@corp.com,555-987-6543,2021-04-02,34,52000,IT
John Smith,john@corp.com,555-123-4567,2020-11-30,45,61000,Sales
Madonna,m@music.org,,2019-07-04,45,61000,HR
Alan Turing,alan@corp.com,555-222-3333,,29,75000,IT
Ada Lovelace,,555-444-5555,2022-01-10,29,75000,IT
"""


@pytest.fixture()
def people_csv(tmp_path: Path) -> Path:
    path = tmp_path / "people.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


@pytest.mark.integration
class TestPipelineRoundTrip:
    def test_load_process_export(self, people_csv: Path, tmp_path: Path) -> None:
        table = TableLoader().load(people_csv)
        bundle = build_processor(Settings(random_seed=21)).process(table.rows)

        assert bundle.headers == list(table.headers)
        assert bundle.column_types["full_name"] == ColumnType.NAME
        assert bundle.column_types["salary"] == ColumnType.NUMERIC

        destination = tmp_path / "out.csv"
        TableExporter().write(bundle.anonymized, destination)
        reloaded = TableLoader().load(destination)

        assert reloaded.headers == table.headers
        assert len(reloaded) == len(table)
        for original, anonymized in zip(table.rows, reloaded.rows):
            for column in table.headers:
                assert (original[column] is None) == (anonymized[column] is None)

    def test_identifiers_are_replaced(self, people_csv: Path) -> None:
        table = TableLoader().load(people_csv)
        bundle = build_processor(Settings(random_seed=21)).process(table.rows)
        originals = {r["email"] for r in table.rows if r["email"]}
        anonymized = [r["email"] for r in bundle.anonymized.rows]
        assert not originals & set(anonymized)
        assert anonymized[0] == anonymized[2]
        assert bundle.anonymized.rows[0]["signup_date"] == "Mar-2021"


@pytest.mark.integration
class TestMain:
    def test_writes_anonymized_file(
        self, people_csv: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RANDOM_SEED", "5")
        out_dir = tmp_path / "exports"

        exit_code = main([str(people_csv), "--output-dir", str(out_dir)])

        assert exit_code == 0
        written = out_dir / export_filename("people.csv", date.today())
        assert written.exists()
        lines = written.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "full_name,email,phone,signup_date,age,salary,department"
        assert len(lines) == 7

    def test_missing_input_returns_error_code(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "nope.csv")]) == 1

    def test_unwritable_output_returns_error_code(
        self, people_csv: Path, tmp_path: Path
    ) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        assert main([str(people_csv), "--output-dir", str(blocker / "exports")]) == 1

    def test_malformed_input_returns_error_code(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("a,b\n1,2\n3,4,5\n", encoding="utf-8")
        assert main([str(path)]) == 1

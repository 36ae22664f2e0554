import csv
import io
from datetime import date
from pathlib import Path

from app.logging.logger import Log
from app.table.models import Table
from app.table.values import is_absent, to_text


def export_filename(source_name: str, today: date | None = None) -> str:
    """``people.csv`` -> ``people_anonymized_2024-05-01.csv``"""
    day = today if today is not None else date.today()
    return f"{Path(source_name).stem}_anonymized_{day.isoformat()}.csv"


class TableExporter:
    """Serializes a Table back to CSV, header row first in table order."""

    def render(self, table: Table) -> str:
        buf = io.StringIO(newline="")
        writer = csv.writer(buf)
        writer.writerow(table.headers)
        for row in table.rows:
            writer.writerow(
                "" if is_absent(row.get(h)) else to_text(row.get(h))
                for h in table.headers
            )
        return buf.getvalue()

    def write(self, table: Table, destination: Path) -> Path:
        """Write *table* to *destination*, creating parent directories."""
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(self.render(table), encoding="utf-8", newline="")
        Log.info(f"Exported {len(table)} rows to {destination}")
        return destination

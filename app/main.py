import argparse
from pathlib import Path

from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.exceptions import ProcessorError
from app.processor.exporter import TableExporter, export_filename
from app.processor.file_loader import TableLoader
from app.processor.processor import build_processor


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="anonymize-csv",
        description="Write a privacy-preserving copy of a CSV file.",
    )
    parser.add_argument("input", type=Path, help="CSV file to anonymize")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the anonymized file (default: OUTPUT_DIR or next to input)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load CSV -> classify + anonymize -> export."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    Log.debug("Starting anonymizer", env=settings.app_env, seed=settings.random_seed)

    loader = TableLoader(encoding=settings.csv_encoding)
    processor = build_processor(settings)
    exporter = TableExporter()

    output_dir = args.output_dir or settings.output_dir or args.input.parent
    destination = output_dir / export_filename(args.input.name)

    try:
        table = loader.load(args.input)
        bundle = processor.process(table.rows)
        for header in bundle.headers:
            Log.info(f"{header}: {bundle.column_types[header].value}")
        exporter.write(bundle.anonymized, destination)
    except (OSError, ProcessorError) as exc:
        Log.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from app.anonymization.factory import AnonymizerFactory
from app.classification.classifier import TypeClassifier
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.exceptions import ProcessingError, ProcessorError
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import AnonymizeStep, ClassifyColumnsStep, DeriveHeadersStep
from app.table.models import ResultBundle, Row


class Processor:
    """Runs the table pipeline: derive headers -> classify -> anonymize."""

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, rows: list[Row]) -> ResultBundle:
        """Anonymize parsed rows and bundle them with the originals.

        Raises:
            ProcessingError: if any step fails; no partial result is returned.
        """
        context = PipelineContext(rows=rows)
        try:
            for step in self._steps:
                context = step.run(context)
        except ProcessorError:
            raise
        except Exception as exc:
            Log.error(f"Failed to process table: {exc}")
            raise ProcessingError(f"Failed to process table: {exc}") from exc

        if context.anonymized is None:
            raise ProcessingError("Pipeline finished without an anonymized table")

        return ResultBundle(
            original=context.table,
            anonymized=context.anonymized,
            headers=context.headers,
            column_types=context.column_types,
        )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the configured classifier and engine."""
    engine = AnonymizerFactory.create(settings)
    return Processor(
        steps=[
            DeriveHeadersStep(),
            ClassifyColumnsStep(TypeClassifier()),
            AnonymizeStep(engine),
        ]
    )

from app.anonymization.engine import AnonymizationEngine
from app.classification.classifier import TypeClassifier
from app.logging.logger import Log
from app.processor.pipeline import PipelineContext, PipelineStep
from app.table.models import Table


class DeriveHeadersStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.table = Table.from_rows(context.rows)
        context.headers = list(context.table.headers)
        Log.info(f"Received {len(context.rows)} rows with {len(context.headers)} columns")
        return context


class ClassifyColumnsStep(PipelineStep):
    def __init__(self, classifier: TypeClassifier) -> None:
        self._classifier = classifier

    def run(self, context: PipelineContext) -> PipelineContext:
        column_types = {
            header: self._classifier.classify(header, context.table.column(header))
            for header in context.headers
        }
        context.column_types = column_types
        for header, column_type in column_types.items():
            Log.debug(f"Column {header!r} classified as {column_type.value}")
        return context


class AnonymizeStep(PipelineStep):
    def __init__(self, engine: AnonymizationEngine) -> None:
        self._engine = engine

    def run(self, context: PipelineContext) -> PipelineContext:
        context.anonymized = self._engine.anonymize(context.table, context.column_types)
        return context

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.classification.models import ColumnTypeMap
from app.table.models import Row, Table


@dataclass(slots=True)
class PipelineContext:
    rows: list[Row]
    table: Table = field(default_factory=Table)
    headers: list[str] = field(default_factory=list)
    column_types: ColumnTypeMap = field(default_factory=dict)
    anonymized: Table | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

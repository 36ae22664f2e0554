from dataclasses import dataclass, field

from app.table.models import CellValue


@dataclass(frozen=True)
class NumericProfile:
    """Column statistics that decide between bucketing and shuffling."""

    total: int
    distinct: int

    @property
    def unique_ratio(self) -> float:
        return self.distinct / self.total if self.total else 0.0


@dataclass
class RunState:
    """Mutable caches for a single anonymization pass.

    Created fresh by every ``AnonymizationEngine.anonymize`` call and dropped
    when it returns.
    """

    names: dict[str, str] = field(default_factory=dict)
    emails: dict[str, str] = field(default_factory=dict)
    phones: dict[str, str] = field(default_factory=dict)
    shuffled: dict[str, list[CellValue]] = field(default_factory=dict)
    numeric_profiles: dict[str, NumericProfile] = field(default_factory=dict)

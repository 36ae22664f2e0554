from enum import Enum


class ColumnType(str, Enum):
    """Semantic category assigned to a column before anonymization."""

    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    DATE = "date"
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    UNKNOWN = "unknown"


ColumnTypeMap = dict[str, ColumnType]

class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class TableParseError(ProcessorError):
    """Raised when raw input cannot be read or parsed into a table."""


class ProcessingError(ProcessorError):
    """Raised when classification or anonymization of a parsed table fails."""

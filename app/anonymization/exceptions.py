class AnonymizationError(Exception):
    """Raised when a table cannot be anonymized."""

from collections.abc import Callable


class ConsistentMapper:
    """Pseudonymizes values through a per-run cache.

    The first time an original value is seen a replacement is produced by
    *factory*; every later occurrence gets the same replacement.

    Usage:
        mapper = ConsistentMapper(state.names)
        mapper.get_or_create("John Smith", generator.full_name)  # "Ada Lowe"
        mapper.get_or_create("John Smith", generator.full_name)  # "Ada Lowe"
    """

    def __init__(self, cache: dict[str, str]) -> None:
        self._cache = cache

    def get_or_create(self, original: str, factory: Callable[[], str]) -> str:
        existing = self._cache.get(original)
        if existing is not None:
            return existing
        anonymized = factory()
        self._cache[original] = anonymized
        return anonymized

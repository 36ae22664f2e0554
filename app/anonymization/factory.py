import random

from app.anonymization.engine import AnonymizationEngine
from app.anonymization.faker_generator import FakerValueGenerator
from app.config.settings import Settings


class AnonymizerFactory:
    """Creates the configured anonymization engine."""

    @classmethod
    def create(cls, settings: Settings) -> AnonymizationEngine:
        """Create a Faker-backed engine, seeded when ``random_seed`` is set."""
        generator = FakerValueGenerator(
            locale=settings.faker_locale,
            seed=settings.random_seed,
        )
        return AnonymizationEngine(generator, rng=random.Random(settings.random_seed))

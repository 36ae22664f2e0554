from faker import Faker

from app.anonymization.base import BaseValueGenerator


class FakerValueGenerator(BaseValueGenerator):
    """Synthesizes replacement values with Faker."""

    PHONE_FORMAT = "###-###-####"

    def __init__(self, locale: str = "en_US", seed: int | None = None) -> None:
        self._fake = Faker(locale)
        if seed is not None:
            self._fake.seed_instance(seed)

    def first_name(self) -> str:
        return self._fake.first_name()

    def full_name(self) -> str:
        return f"{self._fake.first_name()} {self._fake.last_name()}"

    def email(self) -> str:
        return self._fake.email()

    def phone(self) -> str:
        return self._fake.numerify(self.PHONE_FORMAT)

from abc import ABC, abstractmethod


class BaseValueGenerator(ABC):
    """Contract for synthetic replacement values.

    Only the shape of the output matters: a first name is one token, a full
    name is two tokens, an email has ``local@domain.tld`` form and a phone
    number follows ``###-###-####``.
    """

    @abstractmethod
    def first_name(self) -> str:
        """Return a plausible single given name."""

    @abstractmethod
    def full_name(self) -> str:
        """Return a plausible ``First Last`` pair."""

    @abstractmethod
    def email(self) -> str:
        """Return a plausible email address unrelated to any input."""

    @abstractmethod
    def phone(self) -> str:
        """Return a phone number formatted as ``###-###-####``."""

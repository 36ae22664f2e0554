from app.anonymization.base import BaseValueGenerator
from app.anonymization.engine import AnonymizationEngine
from app.anonymization.factory import AnonymizerFactory

__all__ = ["AnonymizationEngine", "AnonymizerFactory", "BaseValueGenerator"]

"""
Database module

Contains both data models (schemas) and the in-memory stores.
"""

# Export schemas
from app.database.schemas import (
    FormDraft,
    Learner,
    ValidationResult,
    LearnerStats,
    WizardSessionState,
)

# Export stores
from app.database.storage import LearnerStore
from app.database.cache import WizardSessionRegistry

__all__ = [
    # Schemas
    "FormDraft",
    "Learner",
    "ValidationResult",
    "LearnerStats",
    "WizardSessionState",
    # Stores
    "LearnerStore",
    "WizardSessionRegistry",
]

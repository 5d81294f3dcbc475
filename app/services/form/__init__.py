"""
Learner form wizard module
"""

from app.services.form.fields import (
    FormError,
    UnknownFieldError,
    IncompleteDraftError,
    create_empty_draft,
    draft_from_record,
    materialize,
)
from app.services.form.validation import validate_section, validate_all
from app.services.form.derivation import calculate_age, apply_derivations
from app.services.form.wizard import WizardSession

__all__ = [
    "FormError",
    "UnknownFieldError",
    "IncompleteDraftError",
    "create_empty_draft",
    "draft_from_record",
    "materialize",
    "validate_section",
    "validate_all",
    "calculate_age",
    "apply_derivations",
    "WizardSession",
]

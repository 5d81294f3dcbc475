"""
Learner field model

Maps between the editable FormDraft and the canonical Learner record.
"""
import logging
import uuid
from datetime import date
from typing import Any, Dict, Optional

from pydantic import ValidationError

from app.core import config
from app.core.options import OTHERS_SPECIFY
from app.database.schemas import FormDraft, Learner
from app.services.form.derivation import calculate_age
from app.services.form.validation import parse_distance, validate_all

logger = logging.getLogger(__name__)

# Fields set from configuration or derived; apply_edit never writes them
READ_ONLY_FIELDS = frozenset({"region", "division", "district", "calendar_year", "age"})

EDITABLE_FIELDS = frozenset(FormDraft.model_fields) - READ_ONLY_FIELDS

# Draft Yes/No selections stored as booleans on the record
BOOLEAN_FIELDS = ("is_blp", "is_ip", "is_4ps_member")


class FormError(Exception):
    """Base class for learner form errors"""


class UnknownFieldError(FormError):
    """Raised when an edit targets a field that is not user-editable"""

    def __init__(self, field: str):
        super().__init__(f"'{field}' is not an editable learner field")
        self.field = field


class IncompleteDraftError(FormError):
    """
    Raised when a draft cannot be turned into a valid learner record

    Section validation should have prevented this; it signals a bug in
    the wizard flow, not a user mistake.
    """

    def __init__(self, errors: Dict[str, str]):
        fields = ", ".join(sorted(errors)) or "unknown"
        super().__init__(f"Draft is incomplete: {fields}")
        self.errors = errors


def _clean(value: Optional[str]) -> Optional[str]:
    """Trimmed text, or None when nothing is left"""
    if value is None:
        return None
    value = value.strip()
    return value or None


def create_empty_draft(today: Optional[date] = None) -> FormDraft:
    """
    New draft with administrative fields pre-filled and everything else empty
    """
    today = today or date.today()
    return FormDraft(
        region=config.REGION,
        division=config.DIVISION,
        district=config.DISTRICT,
        calendar_year=today.year,
    )


def draft_from_record(record: Learner) -> FormDraft:
    """
    Seed a draft from an existing learner

    Booleans become "Yes"/"No", the distance becomes text and missing
    optional text becomes "".
    """
    values: Dict[str, Any] = {}
    for name, field in FormDraft.model_fields.items():
        value = getattr(record, name)
        if name in BOOLEAN_FIELDS:
            value = "Yes" if value else "No"
        elif name == "distance_km":
            value = str(value)
        elif value is None and field.annotation is str:
            value = ""
        values[name] = value
    return FormDraft(**values)


def materialize(
    draft: FormDraft,
    existing_id: Optional[str] = None,
    today: Optional[date] = None,
) -> Learner:
    """
    Build the canonical learner record from a validated draft

    Args:
        draft: Draft that passed every section validator
        existing_id: Id of the learner being edited; a new id is generated when None
        today: Reference date for the age and future-birthdate checks (defaults to today)

    Returns:
        Learner with trimmed text, boolean flags, parsed distance and
        gated fields cleared

    Raises:
        IncompleteDraftError: if any required value is missing or invalid
    """
    today = today or date.today()
    result = validate_all(draft)
    if not result.is_valid:
        raise IncompleteDraftError(result.errors)

    is_blp = draft.is_blp == "Yes"
    is_ip = draft.is_ip == "Yes"
    other_reason = draft.reason_for_not_attending == OTHERS_SPECIFY

    payload = {
        "id": existing_id or str(uuid.uuid4()),
        "region": draft.region,
        "division": draft.division,
        "district": draft.district,
        "calendar_year": draft.calendar_year,
        "last_name": draft.last_name.strip(),
        "first_name": draft.first_name.strip(),
        "middle_name": draft.middle_name.strip(),
        "name_extension": _clean(draft.name_extension),
        "sex": draft.sex,
        "civil_status": draft.civil_status,
        "birthdate": draft.birthdate,
        "age": calculate_age(draft.birthdate, today),
        "mother_tongue": _clean(draft.mother_tongue),
        "ip_ethnic_group": _clean(draft.ip_ethnic_group),
        "religion": _clean(draft.religion),
        "occupation_type": draft.occupation_type,
        "employment_status": _clean(draft.employment_status),
        "monthly_income": draft.monthly_income.strip(),
        "is_blp": is_blp,
        "reason_for_not_attending": draft.reason_for_not_attending,
        "reason_for_not_attending_other": _clean(draft.reason_for_not_attending_other) if other_reason else None,
        "currently_studying": _clean(draft.currently_studying),
        "last_grade_completed": _clean(draft.last_grade_completed),
        "interested_in_als": _clean(draft.interested_in_als),
        "contact_number": draft.contact_number.strip(),
        "barangay": draft.barangay,
        "complete_address": draft.complete_address.strip(),
        "role_in_family": draft.role_in_family,
        "father_name": _clean(draft.father_name),
        "mother_name": _clean(draft.mother_name),
        "guardian_name": _clean(draft.guardian_name),
        "guardian_occupation": _clean(draft.guardian_occupation),
        "is_ip": is_ip,
        "ip_tribe": _clean(draft.ip_tribe) if is_ip else None,
        "is_4ps_member": draft.is_4ps_member == "Yes",
        "distance_km": parse_distance(draft.distance_km),
        "travel_time": draft.travel_time.strip(),
        "transport_mode": draft.transport_mode,
        "preferred_session_time": draft.preferred_session_time,
        "mapped_by": draft.mapped_by.strip(),
        "date_mapped": draft.date_mapped,
    }

    try:
        return Learner.model_validate(payload, context={"today": today})
    except ValidationError as exc:
        errors = {
            str(error["loc"][0]) if error["loc"] else "__root__": error["msg"]
            for error in exc.errors()
        }
        logger.error("Learner record rejected after section validation passed: %s", errors)
        raise IncompleteDraftError(errors) from exc

"""
Section validators for the learner form wizard

One pure function per section. Each receives the whole draft and returns
a ValidationResult; nothing here raises for bad user input.
"""
import math
from typing import Callable, Dict, List

from app.core.options import OCCUPATION_NONE, OTHERS_SPECIFY
from app.database.schemas import FormDraft, ValidationResult


def _result(errors: Dict[str, str]) -> ValidationResult:
    return ValidationResult(is_valid=not errors, errors=errors)


def _blank(value: str) -> bool:
    return not (value or "").strip()


def parse_distance(value: str) -> float:
    """
    Parse the distance entered on the form

    Returns 0.0 for anything that is not a finite number so callers can
    apply the "> 0" rule uniformly.
    """
    try:
        distance = float((value or "").strip())
    except ValueError:
        return 0.0
    if not math.isfinite(distance):
        return 0.0
    return distance


def validate_personal_info(draft: FormDraft) -> ValidationResult:
    """
    Section 0 - Personal Information
    """
    errors: Dict[str, str] = {}

    if _blank(draft.last_name):
        errors["last_name"] = "Last name is required"
    if _blank(draft.first_name):
        errors["first_name"] = "First name is required"
    if _blank(draft.middle_name):
        errors["middle_name"] = "Middle name is required"
    if not draft.sex:
        errors["sex"] = "Sex is required"
    if not draft.civil_status:
        errors["civil_status"] = "Civil status is required"
    # Future dates are refused when entered, not here
    if draft.birthdate is None:
        errors["birthdate"] = "Birthdate is required"
    if not draft.occupation_type:
        errors["occupation_type"] = "Occupation type is required"
    if draft.occupation_type != OCCUPATION_NONE and not draft.employment_status:
        errors["employment_status"] = "Employment status is required"
    if _blank(draft.monthly_income):
        errors["monthly_income"] = "Monthly income is required"

    return _result(errors)


def validate_education(draft: FormDraft) -> ValidationResult:
    """
    Section 1 - Education Background

    BLP learners skip currently_studying, last_grade_completed and
    interested_in_als. contact_number is required either way.
    """
    errors: Dict[str, str] = {}

    if not draft.is_blp:
        errors["is_blp"] = "Please indicate if learner is for BLP"

    if not draft.reason_for_not_attending:
        errors["reason_for_not_attending"] = "Reason for not attending is required"
    if draft.reason_for_not_attending == OTHERS_SPECIFY and _blank(draft.reason_for_not_attending_other):
        errors["reason_for_not_attending_other"] = "Please specify the reason"

    if draft.is_blp != "Yes":
        if not draft.currently_studying:
            errors["currently_studying"] = "Please indicate if currently studying"
        if not draft.last_grade_completed:
            errors["last_grade_completed"] = "Last grade completed is required"
        if not draft.interested_in_als:
            errors["interested_in_als"] = "Please indicate interest in ALS A&E Program"

    if _blank(draft.contact_number):
        errors["contact_number"] = "Contact number is required"

    return _result(errors)


def validate_address(draft: FormDraft) -> ValidationResult:
    """
    Section 2 - Address
    """
    errors: Dict[str, str] = {}

    if not draft.barangay:
        errors["barangay"] = "Barangay is required"
    if _blank(draft.complete_address):
        errors["complete_address"] = "Complete address is required"

    return _result(errors)


def validate_family(draft: FormDraft) -> ValidationResult:
    """
    Section 3 - Family Information
    """
    errors: Dict[str, str] = {}

    if not draft.role_in_family:
        errors["role_in_family"] = "Role in the family is required"
    if draft.is_ip == "Yes" and _blank(draft.ip_tribe):
        errors["ip_tribe"] = "Please specify the tribe / ethnic group"

    return _result(errors)


def validate_logistics(draft: FormDraft) -> ValidationResult:
    """
    Section 4 - Logistics & Schedule
    """
    errors: Dict[str, str] = {}

    if parse_distance(draft.distance_km) <= 0:
        errors["distance_km"] = "Valid distance is required"
    if _blank(draft.travel_time):
        errors["travel_time"] = "Travel time is required"
    if not draft.transport_mode:
        errors["transport_mode"] = "Transport mode is required"
    if not draft.preferred_session_time:
        errors["preferred_session_time"] = "Preferred session time is required"
    if _blank(draft.mapped_by):
        errors["mapped_by"] = "Mapper / facilitator name is required"
    if draft.date_mapped is None:
        errors["date_mapped"] = "Date mapped is required"

    return _result(errors)


SECTION_VALIDATORS: List[Callable[[FormDraft], ValidationResult]] = [
    validate_personal_info,
    validate_education,
    validate_address,
    validate_family,
    validate_logistics,
]


def validate_section(section_index: int, draft: FormDraft) -> ValidationResult:
    """
    Run the validator for a 0-based section index

    An index outside the wizard is vacuously valid.
    """
    if 0 <= section_index < len(SECTION_VALIDATORS):
        return SECTION_VALIDATORS[section_index](draft)
    return ValidationResult(is_valid=True, errors={})


def validate_all(draft: FormDraft) -> ValidationResult:
    """
    Run every section validator and merge the error maps
    """
    errors: Dict[str, str] = {}
    for validator in SECTION_VALIDATORS:
        errors.update(validator(draft).errors)
    return _result(errors)

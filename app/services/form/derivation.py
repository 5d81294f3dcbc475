"""
Derivation rules

Each rule recomputes or clears dependent draft fields after one driving
field changes. Rules mutate the draft in place and return the names of the
fields they touched. Running a rule twice gives the same state as once.
"""
from datetime import date
from typing import Callable, Dict, Optional, Tuple

from app.core.options import OTHERS_SPECIFY
from app.database.schemas import FormDraft

BLP_GATED_FIELDS = ("currently_studying", "last_grade_completed", "interested_in_als")


def calculate_age(birthdate: date, today: Optional[date] = None) -> int:
    """
    Full years elapsed since birthdate

    One year is subtracted while this year's birthday is still ahead.
    """
    today = today or date.today()
    return today.year - birthdate.year - (
        (today.month, today.day) < (birthdate.month, birthdate.day)
    )


def derive_age(draft: FormDraft, today: Optional[date] = None) -> Tuple[str, ...]:
    if draft.birthdate is None:
        draft.age = None
    else:
        draft.age = calculate_age(draft.birthdate, today)
    return ("age",)


def clear_blp_gated_fields(draft: FormDraft, today: Optional[date] = None) -> Tuple[str, ...]:
    if draft.is_blp != "Yes":
        return ()
    for field in BLP_GATED_FIELDS:
        setattr(draft, field, "")
    return BLP_GATED_FIELDS


def clear_reason_other(draft: FormDraft, today: Optional[date] = None) -> Tuple[str, ...]:
    if draft.reason_for_not_attending == OTHERS_SPECIFY:
        return ()
    draft.reason_for_not_attending_other = ""
    return ("reason_for_not_attending_other",)


def clear_ip_tribe(draft: FormDraft, today: Optional[date] = None) -> Tuple[str, ...]:
    if draft.is_ip != "No":
        return ()
    draft.ip_tribe = ""
    return ("ip_tribe",)


# Driving field -> rule
DERIVATION_RULES: Dict[str, Callable[[FormDraft, Optional[date]], Tuple[str, ...]]] = {
    "birthdate": derive_age,
    "is_blp": clear_blp_gated_fields,
    "reason_for_not_attending": clear_reason_other,
    "is_ip": clear_ip_tribe,
}


def apply_derivations(draft: FormDraft, field: str, today: Optional[date] = None) -> Tuple[str, ...]:
    """
    Run the rule keyed to field, if any

    Returns the dependent fields that were recomputed or cleared.
    """
    rule = DERIVATION_RULES.get(field)
    if rule is None:
        return ()
    return rule(draft, today)

"""
Derivation rule tests
"""
from datetime import date

from app.services.form.derivation import (
    apply_derivations,
    calculate_age,
    clear_blp_gated_fields,
    clear_ip_tribe,
    clear_reason_other,
)


def test_calculate_age_birthday_rule():
    birthdate = date(2000, 6, 15)
    assert calculate_age(birthdate, today=date(2024, 6, 14)) == 23
    assert calculate_age(birthdate, today=date(2024, 6, 15)) == 24
    assert calculate_age(birthdate, today=date(2024, 12, 1)) == 24


def test_calculate_age_leap_day():
    birthdate = date(2004, 2, 29)
    assert calculate_age(birthdate, today=date(2023, 2, 28)) == 18
    assert calculate_age(birthdate, today=date(2023, 3, 1)) == 19


def test_age_follows_birthdate(complete_draft):
    complete_draft.birthdate = date(2005, 3, 10)
    assert apply_derivations(complete_draft, "birthdate", date(2024, 3, 9)) == ("age",)
    assert complete_draft.age == 18

    complete_draft.birthdate = None
    apply_derivations(complete_draft, "birthdate", date(2024, 3, 9))
    assert complete_draft.age is None


def test_blp_yes_clears_gated_fields(complete_draft):
    complete_draft.is_blp = "Yes"
    touched = apply_derivations(complete_draft, "is_blp")
    assert touched == ("currently_studying", "last_grade_completed", "interested_in_als")
    assert complete_draft.currently_studying == ""
    assert complete_draft.last_grade_completed == ""
    assert complete_draft.interested_in_als == ""


def test_blp_no_keeps_gated_fields(complete_draft):
    complete_draft.is_blp = "No"
    assert apply_derivations(complete_draft, "is_blp") == ()
    assert complete_draft.last_grade_completed == "High School Graduate"


def test_reason_other_cleared_unless_others(complete_draft):
    complete_draft.reason_for_not_attending = "Others (Specify)"
    complete_draft.reason_for_not_attending_other = "Needed at the farm"
    apply_derivations(complete_draft, "reason_for_not_attending")
    assert complete_draft.reason_for_not_attending_other == "Needed at the farm"

    complete_draft.reason_for_not_attending = "High cost of education"
    apply_derivations(complete_draft, "reason_for_not_attending")
    assert complete_draft.reason_for_not_attending_other == ""


def test_ip_no_clears_tribe(complete_draft):
    complete_draft.is_ip = "Yes"
    complete_draft.ip_tribe = "Higaonon"
    apply_derivations(complete_draft, "is_ip")
    assert complete_draft.ip_tribe == "Higaonon"

    complete_draft.is_ip = "No"
    apply_derivations(complete_draft, "is_ip")
    assert complete_draft.ip_tribe == ""


def test_gate_rules_are_idempotent(complete_draft):
    complete_draft.is_blp = "Yes"
    complete_draft.is_ip = "No"
    complete_draft.ip_tribe = "Talaandig"
    complete_draft.reason_for_not_attending_other = "stale"

    for rule in (clear_blp_gated_fields, clear_ip_tribe, clear_reason_other):
        rule(complete_draft, None)
        once = complete_draft.model_dump()
        rule(complete_draft, None)
        assert complete_draft.model_dump() == once


def test_field_without_rule_is_untouched(complete_draft):
    before = complete_draft.model_dump()
    assert apply_derivations(complete_draft, "barangay") == ()
    assert complete_draft.model_dump() == before

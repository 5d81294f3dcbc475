"""
Section validator tests
"""
import pytest

from app.services.form.validation import (
    validate_section,
    validate_all,
    validate_personal_info,
    validate_education,
    validate_address,
    validate_family,
    validate_logistics,
)


def test_complete_draft_passes_every_section(complete_draft):
    for index in range(5):
        result = validate_section(index, complete_draft)
        assert result.is_valid, (index, result.errors)
        assert result.errors == {}
    assert validate_all(complete_draft).is_valid


@pytest.mark.parametrize("index", [-1, 5, 42])
def test_out_of_range_section_is_valid(index, complete_draft):
    complete_draft.last_name = ""
    result = validate_section(index, complete_draft)
    assert result.is_valid
    assert result.errors == {}


def test_personal_info_requires_trimmed_names(complete_draft):
    complete_draft.last_name = "   "
    complete_draft.middle_name = ""
    result = validate_personal_info(complete_draft)
    assert not result.is_valid
    assert set(result.errors) == {"last_name", "middle_name"}


def test_personal_info_employment_status_only_when_occupied(complete_draft):
    complete_draft.employment_status = ""
    assert validate_personal_info(complete_draft).is_valid

    complete_draft.occupation_type = "Farming"
    result = validate_personal_info(complete_draft)
    assert result.errors == {"employment_status": "Employment status is required"}

    complete_draft.employment_status = "Seasonal"
    assert validate_personal_info(complete_draft).is_valid


def test_personal_info_missing_birthdate_and_income(complete_draft):
    complete_draft.birthdate = None
    complete_draft.monthly_income = " "
    result = validate_personal_info(complete_draft)
    assert set(result.errors) == {"birthdate", "monthly_income"}


def test_education_blp_skips_gated_fields(complete_draft):
    complete_draft.is_blp = "Yes"
    complete_draft.currently_studying = ""
    complete_draft.last_grade_completed = ""
    complete_draft.interested_in_als = ""
    result = validate_section(1, complete_draft)
    assert result.is_valid
    assert result.errors == {}


def test_education_non_blp_requires_gated_fields(complete_draft):
    complete_draft.currently_studying = ""
    complete_draft.last_grade_completed = ""
    complete_draft.interested_in_als = ""
    result = validate_education(complete_draft)
    assert set(result.errors) == {"currently_studying", "last_grade_completed", "interested_in_als"}


def test_education_others_requires_specified_reason(complete_draft):
    complete_draft.reason_for_not_attending = "Others (Specify)"
    complete_draft.reason_for_not_attending_other = ""
    result = validate_section(1, complete_draft)
    assert not result.is_valid
    assert "reason_for_not_attending_other" in result.errors

    complete_draft.reason_for_not_attending_other = "Needed at the farm"
    assert validate_section(1, complete_draft).is_valid


def test_education_contact_number_required_even_for_blp(complete_draft):
    complete_draft.is_blp = "Yes"
    complete_draft.contact_number = "  "
    result = validate_education(complete_draft)
    assert result.errors == {"contact_number": "Contact number is required"}


def test_education_requires_blp_answer(complete_draft):
    complete_draft.is_blp = ""
    result = validate_education(complete_draft)
    assert "is_blp" in result.errors


def test_address_rules(complete_draft):
    complete_draft.barangay = ""
    complete_draft.complete_address = "\n  "
    result = validate_address(complete_draft)
    assert set(result.errors) == {"barangay", "complete_address"}


def test_family_ip_requires_tribe(complete_draft):
    complete_draft.is_ip = "Yes"
    complete_draft.ip_tribe = " "
    assert validate_family(complete_draft).errors == {"ip_tribe": "Please specify the tribe / ethnic group"}

    complete_draft.ip_tribe = "Higaonon"
    assert validate_family(complete_draft).is_valid


def test_family_requires_role(complete_draft):
    complete_draft.role_in_family = ""
    assert "role_in_family" in validate_family(complete_draft).errors


@pytest.mark.parametrize("distance, valid", [
    ("0", False),
    ("0.1", True),
    ("-3", False),
    ("", False),
    ("abc", False),
    ("nan", False),
    (" 4 ", True),
])
def test_logistics_distance_must_be_positive(distance, valid, complete_draft):
    complete_draft.distance_km = distance
    result = validate_logistics(complete_draft)
    assert result.is_valid is valid
    assert ("distance_km" in result.errors) is not valid


def test_logistics_requires_remaining_fields(complete_draft):
    complete_draft.travel_time = ""
    complete_draft.transport_mode = ""
    complete_draft.preferred_session_time = ""
    complete_draft.mapped_by = " "
    complete_draft.date_mapped = None
    result = validate_logistics(complete_draft)
    assert set(result.errors) == {
        "travel_time",
        "transport_mode",
        "preferred_session_time",
        "mapped_by",
        "date_mapped",
    }

"""
Shared fixtures for learner form tests
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.database.cache import WizardSessionRegistry
from app.database.storage import LearnerStore
from app.services.form import create_empty_draft


PERSONAL = {
    "last_name": "Dela Cruz",
    "first_name": "Juan",
    "middle_name": "Santos",
    "sex": "Male",
    "civil_status": "Single",
    "birthdate": date(2005, 3, 10),
    "occupation_type": "None",
    "monthly_income": "0",
}

EDUCATION = {
    "is_blp": "No",
    "reason_for_not_attending": "High cost of education",
    "currently_studying": "No",
    "last_grade_completed": "High School Graduate",
    "interested_in_als": "Yes",
    "contact_number": "09171234567",
}

ADDRESS = {
    "barangay": "Tankulan",
    "complete_address": "Purok 3, Tankulan, Manolo Fortich",
}

FAMILY = {
    "role_in_family": "Daughter/Son",
    "mother_name": "Ana Dela Cruz",
    "is_ip": "No",
    "is_4ps_member": "Yes",
}

LOGISTICS = {
    "distance_km": "2.5",
    "travel_time": "15 minutes",
    "transport_mode": "Habal-habal",
    "preferred_session_time": "Morning (8:00 AM – 12:00 PM)",
    "mapped_by": "Maria Reyes",
    "date_mapped": date(2024, 6, 1),
}

SECTIONS = [PERSONAL, EDUCATION, ADDRESS, FAMILY, LOGISTICS]


@pytest.fixture
def section_values():
    """Valid values for each wizard section, in section order"""
    return [dict(values) for values in SECTIONS]


@pytest.fixture
def complete_draft(section_values):
    """Draft that passes every section validator"""
    draft = create_empty_draft(date(2024, 6, 1))
    for values in section_values:
        for field, value in values.items():
            setattr(draft, field, value)
    return draft


@pytest.fixture
def client():
    """Test client with an empty learner store and no open sessions"""
    app.state.learner_store = LearnerStore()
    app.state.wizard_sessions = WizardSessionRegistry(ttl_seconds=60)
    return TestClient(app)

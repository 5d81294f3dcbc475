"""
Fixed option lists for every enumerated form field

Values are compared literally, so the strings here are the ones stored on
drafts and learner records.
"""
from typing import Dict, List

OTHERS_SPECIFY = "Others (Specify)"
OCCUPATION_NONE = "None"

YES_NO_OPTIONS: List[str] = ["Yes", "No"]

SEX_OPTIONS: List[str] = ["Male", "Female"]

CIVIL_STATUS_OPTIONS: List[str] = [
    "Single",
    "Married",
    "Widow/er",
    "Separated",
    "Live-in",
]

MOTHER_TONGUE_OPTIONS: List[str] = [
    "Tagalog",
    "Kapampangan",
    "Pangasinense",
    "Iloko",
    "Bikol",
    "Cebuano",
    "Hiligaynon",
    "Waray",
    "Tausug",
    "Maguindanaoan",
    "Maranao",
    "Chabacano",
    "Ybanag",
    "Ivatan",
    "Samal",
    "Aklanon",
    "Kinaray-a",
    "Yakan",
    "Surigaonon",
]

OCCUPATION_TYPE_OPTIONS: List[str] = [
    OCCUPATION_NONE,
    "Farming",
    "Fishing",
    "Vending",
    "Laborer",
    "Household Helper",
    "Driver",
    "Others",
]

EMPLOYMENT_STATUS_OPTIONS: List[str] = [
    "Permanent",
    "Contractual",
    "Seasonal",
    "Self-employed",
]

REASON_OPTIONS: List[str] = [
    "Schools are very far",
    "No school within the barangay",
    "No regular transportation",
    "High cost of education",
    "Illness / Disability",
    "Housekeeping / Housework",
    "Employment / Looking for work",
    "Lack of personal interest",
    "Cannot cope with school work",
    OTHERS_SPECIFY,
]

GRADE_LEVELS: List[str] = [
    "G1 – G6 (Elementary)",
    "1st Year HS / Grade 7",
    "2nd Year HS / Grade 8",
    "3rd Year HS / Grade 9",
    "4th Year HS / Grade 10",
    "High School Graduate",
    "Grade 11 Vocational",
    "Senior HS Graduate",
]

BARANGAY_OPTIONS: List[str] = [
    "Ticala",
    "Santo Niño",
    "Dicklum",
    "Tankulan",
    "Lingion",
    "San Miguel",
]

FAMILY_ROLE_OPTIONS: List[str] = [
    "Head",
    "Spouse",
    "Daughter/Son",
    "Stepson/Stepdaughter",
    "Son-in-law/Daughter-in-law",
    "Grandson/Granddaughter",
    "Father/Mother",
    "Brother/Sister",
    "Uncle/Aunt",
    "Nephew/Niece",
    "Houseboy/Housegirl",
    "Others (Non-relative/Boarder)",
]

TRANSPORT_OPTIONS: List[str] = [
    "Walking",
    "Tricycle",
    "Habal-habal",
    "Jeepney",
    "Multicab",
    "Private Vehicle",
    "Bicycle",
]

SESSION_TIME_OPTIONS: List[str] = [
    "Morning (8:00 AM – 12:00 PM)",
    "Afternoon (1:00 PM – 5:00 PM)",
    "Evening (6:00 PM – 9:00 PM)",
    "Weekends Only",
]

# Wizard section titles, in presentation order
FORM_SECTIONS: List[str] = [
    "Personal Information",
    "Education Background",
    "Address",
    "Family Information",
    "Logistics & Schedule",
]

# Draft field name -> allowed values ("" is always accepted as "not chosen")
FIELD_OPTIONS: Dict[str, List[str]] = {
    "sex": SEX_OPTIONS,
    "civil_status": CIVIL_STATUS_OPTIONS,
    "mother_tongue": MOTHER_TONGUE_OPTIONS,
    "occupation_type": OCCUPATION_TYPE_OPTIONS,
    "employment_status": EMPLOYMENT_STATUS_OPTIONS,
    "is_blp": YES_NO_OPTIONS,
    "reason_for_not_attending": REASON_OPTIONS,
    "currently_studying": YES_NO_OPTIONS,
    "last_grade_completed": GRADE_LEVELS,
    "interested_in_als": YES_NO_OPTIONS,
    "barangay": BARANGAY_OPTIONS,
    "role_in_family": FAMILY_ROLE_OPTIONS,
    "is_ip": YES_NO_OPTIONS,
    "is_4ps_member": YES_NO_OPTIONS,
    "transport_mode": TRANSPORT_OPTIONS,
    "preferred_session_time": SESSION_TIME_OPTIONS,
}

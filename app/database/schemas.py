"""
Learner data models

- FormDraft is the mutable in-progress form state (one per wizard session)
- Learner is the canonical record kept in the store
- Pydantic provides type checking at assignment time for drafts
- Yes/No selections on the draft become booleans on the record
"""
from typing import Optional, Dict, Any, List, Literal, Tuple
from datetime import date
from pydantic import BaseModel, Field, field_validator, ConfigDict, ValidationInfo


class FormDraft(BaseModel):
    """
    In-progress learner form

    Empty strings mean "not answered"; dates and age use None.
    Field names form a closed set (extra="forbid").
    """
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    # Administrative (pre-filled, not user-edited)
    region: str                          = Field("", description="Region name")
    division: str                        = Field("", description="Schools division name")
    district: str                        = Field("", description="District name")
    calendar_year: int                   = Field(..., description="Calendar year of the mapping")

    # Personal information
    last_name: str                       = Field("", description="Last name")
    first_name: str                      = Field("", description="First name")
    middle_name: str                     = Field("", description="Middle name")
    name_extension: str                  = Field("", description="Name extension (Jr., Sr., III)")
    sex: str                             = Field("", description="Sex (Male/Female)")
    civil_status: str                    = Field("", description="Civil status")
    birthdate: Optional[date]            = Field(None, description="Birthdate (never in the future)")
    age: Optional[int]                   = Field(None, description="Derived from birthdate")
    mother_tongue: str                   = Field("", description="Mother tongue")
    ip_ethnic_group: str                 = Field("", description="IP / ethnic group")
    religion: str                        = Field("", description="Religion")
    occupation_type: str                 = Field("", description="Occupation type")
    employment_status: str               = Field("", description="Employment status (when occupation is not None)")
    monthly_income: str                  = Field("", description="Monthly income")

    # Education background
    is_blp: str                          = Field("", description="For Basic Literacy Program (Yes/No)")
    reason_for_not_attending: str        = Field("", description="Reason for not attending school")
    reason_for_not_attending_other: str  = Field("", description="Free-text reason when 'Others (Specify)'")
    currently_studying: str              = Field("", description="Currently studying (Yes/No)")
    last_grade_completed: str            = Field("", description="Last grade / level completed")
    interested_in_als: str               = Field("", description="Interested in ALS A&E program (Yes/No)")
    contact_number: str                  = Field("", description="Contact number")

    # Address
    barangay: str                        = Field("", description="Barangay")
    complete_address: str                = Field("", description="Complete address (multi-line)")

    # Family
    role_in_family: str                  = Field("", description="Role in family / household")
    father_name: str                     = Field("", description="Father's name")
    mother_name: str                     = Field("", description="Mother's name")
    guardian_name: str                   = Field("", description="Guardian's name")
    guardian_occupation: str             = Field("", description="Guardian's occupation")
    is_ip: str                           = Field("", description="Member of indigenous peoples (Yes/No)")
    ip_tribe: str                        = Field("", description="Tribe / ethnic group when IP")
    is_4ps_member: str                   = Field("", description="4P's member (Yes/No)")

    # Logistics & schedule
    distance_km: str                     = Field("", description="Distance to nearest ALS venue in km, as entered")
    travel_time: str                     = Field("", description="Estimated travel time")
    transport_mode: str                  = Field("", description="Transport mode")
    preferred_session_time: str          = Field("", description="Preferred session time slot")
    mapped_by: str                       = Field("", description="Mapper / facilitator name")
    date_mapped: Optional[date]          = Field(None, description="Date the learner was mapped")


class Learner(BaseModel):
    """
    Canonical learner record

    The id is assigned on first save and never changes.
    """
    model_config = ConfigDict(frozen=True)

    id: str                                         = Field(...,  description="Learner unique identifier")

    region: str                                     = Field(...,  description="Region name")
    division: str                                   = Field(...,  description="Schools division name")
    district: str                                   = Field(...,  description="District name")
    calendar_year: int                              = Field(...,  description="Calendar year of the mapping")

    last_name: str                                  = Field(...,  min_length=1, description="Last name")
    first_name: str                                 = Field(...,  min_length=1, description="First name")
    middle_name: str                                = Field(...,  min_length=1, description="Middle name")
    name_extension: Optional[str]                   = Field(None, description="Name extension")
    sex: Literal["Male", "Female"]                  = Field(...,  description="Sex")
    civil_status: str                               = Field(...,  min_length=1, description="Civil status")
    birthdate: date                                 = Field(...,  description="Birthdate")
    age: int                                        = Field(...,  ge=0, description="Age in full years at save time")
    mother_tongue: Optional[str]                    = Field(None, description="Mother tongue")
    ip_ethnic_group: Optional[str]                  = Field(None, description="IP / ethnic group")
    religion: Optional[str]                         = Field(None, description="Religion")
    occupation_type: str                            = Field(...,  min_length=1, description="Occupation type")
    employment_status: Optional[str]                = Field(None, description="Employment status")
    monthly_income: str                             = Field(...,  min_length=1, description="Monthly income")

    is_blp: bool                                    = Field(...,  description="For Basic Literacy Program")
    reason_for_not_attending: str                   = Field(...,  min_length=1, description="Reason for not attending school")
    reason_for_not_attending_other: Optional[str]   = Field(None, description="Free-text reason")
    currently_studying: Optional[str]               = Field(None, description="Currently studying (Yes/No)")
    last_grade_completed: Optional[str]             = Field(None, description="Last grade / level completed")
    interested_in_als: Optional[str]                = Field(None, description="Interested in ALS A&E (Yes/No)")
    contact_number: str                             = Field(...,  min_length=1, description="Contact number")

    barangay: str                                   = Field(...,  min_length=1, description="Barangay")
    complete_address: str                           = Field(...,  min_length=1, description="Complete address")

    role_in_family: str                             = Field(...,  min_length=1, description="Role in family")
    father_name: Optional[str]                      = Field(None, description="Father's name")
    mother_name: Optional[str]                      = Field(None, description="Mother's name")
    guardian_name: Optional[str]                    = Field(None, description="Guardian's name")
    guardian_occupation: Optional[str]              = Field(None, description="Guardian's occupation")
    is_ip: bool                                     = Field(...,  description="Member of indigenous peoples")
    ip_tribe: Optional[str]                         = Field(None, description="Tribe / ethnic group")
    is_4ps_member: bool                             = Field(...,  description="4P's member")

    distance_km: float                              = Field(...,  gt=0, description="Distance to nearest ALS venue (km)")
    travel_time: str                                = Field(...,  min_length=1, description="Estimated travel time")
    transport_mode: str                             = Field(...,  min_length=1, description="Transport mode")
    preferred_session_time: str                     = Field(...,  min_length=1, description="Preferred session time")
    mapped_by: str                                  = Field(...,  min_length=1, description="Mapper / facilitator name")
    date_mapped: date                               = Field(...,  description="Date mapped")

    @field_validator("birthdate")
    @classmethod
    def validate_birthdate(cls, value: date, info: ValidationInfo) -> date:
        # Callers may pass {"today": date} as validation context
        today = (info.context or {}).get("today") or date.today()
        if value > today:
            raise ValueError("birthdate cannot be in the future")
        return value


class ValidationResult(BaseModel):
    """
    Outcome of validating one wizard section
    """
    is_valid: bool            = Field(..., description="True when no field failed")
    errors: Dict[str, str]    = Field(default_factory=dict, description="Field name -> error message")


class SessionCreate(BaseModel):
    """
    Start a wizard session, optionally editing an existing learner
    """
    learner_id: Optional[str] = Field(None, description="Learner to edit; omit to add a new learner")


class FieldEdit(BaseModel):
    """
    One field edit coming from the form
    """
    field: str                = Field(..., description="Draft field name (snake_case)")
    value: Any                = Field(None, description="Raw value entered or selected")


class FinalizeRequest(BaseModel):
    """
    Save confirmation
    """
    confirmed: bool           = Field(False, description="User confirmed the save prompt")


class WizardSessionState(BaseModel):
    """
    Wizard session as rendered by the client
    """
    session_id: str                      = Field(..., description="Wizard session identifier")
    state: str                           = Field(..., description="section_0 .. section_4 or ready_to_save")
    current_section_index: int           = Field(..., description="0-based section index")
    section_title: str                   = Field(..., description="Title of the current section")
    is_editing: bool                     = Field(..., description="Editing an existing learner")
    is_ready_to_save: bool               = Field(..., description="All sections passed validation")
    original_id: Optional[str]           = Field(None, description="Id of the learner being edited")
    accepted: Optional[bool]             = Field(None, description="Whether the last field edit was stored")
    errors: Dict[str, str]               = Field(default_factory=dict, description="Field name -> error message")
    draft: FormDraft                     = Field(..., description="Current draft")


class LearnerStats(BaseModel):
    """
    Summary statistics over all mapped learners
    """
    total: int                                  = Field(0, description="Number of learners")
    male: int                                   = Field(0, description="Male learners")
    female: int                                 = Field(0, description="Female learners")
    four_ps: int                                = Field(0, description="4P's members")
    ip: int                                     = Field(0, description="Indigenous peoples members")
    studying: int                               = Field(0, description="Currently studying")
    not_studying: int                           = Field(0, description="Not currently studying")
    by_barangay: Dict[str, int]                 = Field(default_factory=dict, description="Learners per barangay")
    youth: int                                  = Field(0, description="Aged 6-17")
    adult: int                                  = Field(0, description="Aged 18-59")
    senior: int                                 = Field(0, description="Aged 60 and above")
    top_mother_tongues: List[Tuple[str, int]]   = Field(default_factory=list, description="Five most common mother tongues")
    grade_distribution: List[Tuple[str, int]]   = Field(default_factory=list, description="Learners per last grade completed")

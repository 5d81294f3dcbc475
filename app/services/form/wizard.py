"""
Learner form wizard controller

Holds one draft while a field worker walks through the five sections.
Sections are validated one at a time on advance; moving back is never
blocked. Nothing reaches the learner store until finalize is called.
"""
import logging
from datetime import date
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from app.core.options import FIELD_OPTIONS, FORM_SECTIONS
from app.database.schemas import FormDraft, Learner
from app.services.form.derivation import apply_derivations
from app.services.form.fields import (
    EDITABLE_FIELDS,
    UnknownFieldError,
    create_empty_draft,
    draft_from_record,
    materialize,
)
from app.services.form.validation import validate_section

logger = logging.getLogger(__name__)

LAST_SECTION_INDEX = len(FORM_SECTIONS) - 1

READY_TO_SAVE = "ready_to_save"


class WizardSession:
    """
    State of one add or edit session

    Attributes:
        draft: Form values entered so far
        current_section_index: 0-based index of the visible section
        errors: Field name -> message for the visible section
        is_editing: True when seeded from an existing learner
        original_id: Id of the learner being edited
        is_ready_to_save: Set once the last section passes validation
    """

    def __init__(
        self,
        draft: FormDraft,
        is_editing: bool = False,
        original_id: Optional[str] = None,
        clock: Optional[Callable[[], date]] = None,
    ):
        self.draft = draft
        self.current_section_index = 0
        self.errors: Dict[str, str] = {}
        self.is_editing = is_editing
        self.original_id = original_id
        self.is_ready_to_save = False
        self._today = clock or date.today

    @classmethod
    def initialize(
        cls,
        existing_record: Optional[Learner] = None,
        clock: Optional[Callable[[], date]] = None,
    ) -> "WizardSession":
        """
        Start a session for a new learner, or for editing existing_record
        """
        if existing_record is not None:
            return cls(
                draft_from_record(existing_record),
                is_editing=True,
                original_id=existing_record.id,
                clock=clock,
            )
        clock = clock or date.today
        return cls(create_empty_draft(clock()), clock=clock)

    @property
    def state(self) -> str:
        if self.is_ready_to_save:
            return READY_TO_SAVE
        return f"section_{self.current_section_index}"

    @property
    def section_title(self) -> str:
        return FORM_SECTIONS[self.current_section_index]

    def _reject(self, field: str, message: str) -> bool:
        self.errors[field] = message
        return False

    def apply_edit(self, field: str, value: Any) -> bool:
        """
        Store one field value and run its derivation rule

        A value of the wrong type, outside the field's option list, or a
        birthdate after today is refused: the draft keeps its previous
        value and the reason is put in errors under that field. Every edit
        is refused once the session is ready to save.

        Returns:
            True if the value was stored

        Raises:
            UnknownFieldError: if field is not an editable draft field
        """
        if field not in EDITABLE_FIELDS:
            raise UnknownFieldError(field)

        # Every section has passed; the draft is frozen until finalize
        if self.is_ready_to_save:
            return self._reject(field, "The form is ready to save and can no longer be changed")

        candidate = self.draft.model_copy()
        try:
            setattr(candidate, field, value)
        except ValidationError as exc:
            return self._reject(field, exc.errors()[0]["msg"])

        new_value = getattr(candidate, field)
        options = FIELD_OPTIONS.get(field)
        if options is not None and new_value and new_value not in options:
            return self._reject(field, f"'{new_value}' is not a valid option")

        today = self._today()
        if field == "birthdate" and new_value is not None and new_value > today:
            logger.info("Refused future birthdate %s", new_value.isoformat())
            return self._reject(field, "Birthdate cannot be in the future")

        self.draft = candidate
        touched = apply_derivations(self.draft, field, today)
        for name in (field, *touched):
            self.errors.pop(name, None)
        return True

    def advance(self) -> bool:
        """
        Validate the current section and move forward

        On the last section a successful validation marks the session
        ready to save instead of moving. Returns False when the section
        has errors (they are left in errors).
        """
        if self.is_ready_to_save:
            return True

        result = validate_section(self.current_section_index, self.draft)
        if not result.is_valid:
            self.errors = dict(result.errors)
            return False

        self.errors = {}
        if self.current_section_index >= LAST_SECTION_INDEX:
            self.is_ready_to_save = True
        else:
            self.current_section_index += 1
        return True

    def retreat(self) -> bool:
        """
        Move back one section without validating
        """
        if self.is_ready_to_save or self.current_section_index == 0:
            return False
        self.errors = {}
        self.current_section_index -= 1
        return True

    def finalize(self) -> Learner:
        """
        Materialize the draft into a learner record

        Raises:
            IncompleteDraftError: if the draft does not satisfy the record invariants
        """
        existing_id = self.original_id if self.is_editing else None
        return materialize(self.draft, existing_id, self._today())

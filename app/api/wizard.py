"""
Learner form wizard endpoints

One session per add/edit flow. The client sends field edits as the user
types or selects, then advance/retreat for the navigation buttons, and
finalize once the user confirms the save prompt.
"""
import logging

from fastapi import APIRouter, HTTPException, Request

from app.database.schemas import (
    FieldEdit,
    FinalizeRequest,
    Learner,
    SessionCreate,
    WizardSessionState,
)
from app.services.form import IncompleteDraftError, UnknownFieldError, WizardSession
from app.api.utils import (
    get_learner_store,
    get_session_registry,
    get_wizard_session,
    session_state,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/wizard/sessions", response_model=WizardSessionState)
async def start_session(body: SessionCreate, request: Request):
    """
    Start adding a new learner, or editing one when learner_id is given
    """
    existing = None
    if body.learner_id:
        existing = get_learner_store(request).find_by_id(body.learner_id)
        if existing is None:
            raise HTTPException(status_code=404, detail="Learner not found")

    session = WizardSession.initialize(existing)
    session_id = get_session_registry(request).add(session)
    logger.info("Started wizard session %s (editing=%s)", session_id, session.is_editing)
    return session_state(session_id, session)


@router.get("/wizard/sessions/{session_id}", response_model=WizardSessionState)
async def get_session(session_id: str, request: Request):
    """
    Current section, errors and draft of a session
    """
    session = get_wizard_session(request, session_id)
    return session_state(session_id, session)


@router.patch("/wizard/sessions/{session_id}/fields", response_model=WizardSessionState)
async def edit_field(session_id: str, edit: FieldEdit, request: Request):
    """
    Apply one field edit

    A refused value (wrong type, not in the option list, future birthdate,
    or any edit once the form is ready to save) is not an HTTP error: the
    response has accepted=false and the message under errors[field].
    """
    session = get_wizard_session(request, session_id)
    try:
        accepted = session.apply_edit(edit.field, edit.value)
    except UnknownFieldError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return session_state(session_id, session, accepted=accepted)


@router.post("/wizard/sessions/{session_id}/advance", response_model=WizardSessionState)
async def advance(session_id: str, request: Request):
    """
    Validate the current section and move to the next one
    """
    session = get_wizard_session(request, session_id)
    session.advance()
    return session_state(session_id, session)


@router.post("/wizard/sessions/{session_id}/retreat", response_model=WizardSessionState)
async def retreat(session_id: str, request: Request):
    """
    Go back one section (never validated)
    """
    session = get_wizard_session(request, session_id)
    session.retreat()
    return session_state(session_id, session)


@router.post("/wizard/sessions/{session_id}/finalize", response_model=Learner)
async def finalize(session_id: str, body: FinalizeRequest, request: Request):
    """
    Save the learner after the user confirmed

    New learners are appended to the store; edits replace the record with
    the same id. The session is closed afterwards.
    """
    session = get_wizard_session(request, session_id)
    if not body.confirmed:
        raise HTTPException(status_code=400, detail="Save must be confirmed before the learner is stored")
    if not session.is_ready_to_save:
        raise HTTPException(
            status_code=409,
            detail=f"All sections must pass validation before saving (currently at section {session.current_section_index})"
        )

    registry = get_session_registry(request)
    try:
        learner = session.finalize()
    except IncompleteDraftError as exc:
        registry.discard(session_id)
        logger.error("Wizard session %s abandoned: %s (%s)", session_id, exc, exc.errors)
        raise HTTPException(status_code=500, detail="Learner could not be saved; the form session was abandoned")

    get_learner_store(request).upsert(learner)
    registry.discard(session_id)
    return learner


@router.delete("/wizard/sessions/{session_id}")
async def cancel_session(session_id: str, request: Request):
    """
    Discard a session without saving anything
    """
    if not get_session_registry(request).discard(session_id):
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return {"message": "Wizard session cancelled"}

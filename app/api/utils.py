"""
Utility functions for API endpoints
"""
from typing import Optional

from fastapi import Request, HTTPException

from app.database.cache import WizardSessionRegistry
from app.database.schemas import WizardSessionState
from app.database.storage import LearnerStore
from app.services.form.wizard import WizardSession


def get_learner_store(request: Request) -> LearnerStore:
    """
    Learner store owned by the running app
    """
    return request.app.state.learner_store


def get_session_registry(request: Request) -> WizardSessionRegistry:
    """
    Open wizard sessions owned by the running app
    """
    return request.app.state.wizard_sessions


def get_wizard_session(request: Request, session_id: str) -> WizardSession:
    """
    Look up an open wizard session

    Raises HTTPException with 404 status if the session is unknown or expired
    """
    session = get_session_registry(request).get(session_id)
    if session is None:
        raise HTTPException(
            status_code=404,
            detail=f"Wizard session {session_id} not found. It may have been saved, cancelled or expired."
        )
    return session


def session_state(session_id: str, session: WizardSession, accepted: Optional[bool] = None) -> WizardSessionState:
    """
    Build the response payload for a wizard session
    """
    return WizardSessionState(
        session_id=session_id,
        state=session.state,
        current_section_index=session.current_section_index,
        section_title=session.section_title,
        is_editing=session.is_editing,
        is_ready_to_save=session.is_ready_to_save,
        original_id=session.original_id,
        accepted=accepted,
        errors=dict(session.errors),
        draft=session.draft,
    )

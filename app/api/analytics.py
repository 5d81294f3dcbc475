"""
Analytics and form option endpoints
"""
from fastapi import APIRouter, Request

from app.core import config, options
from app.database.schemas import LearnerStats
from app.services.analytics import compute_learner_stats
from app.api.utils import get_learner_store

router = APIRouter()


@router.get("/analytics", response_model=LearnerStats)
async def get_analytics(request: Request):
    """
    Summary statistics over every stored learner
    """
    return compute_learner_stats(get_learner_store(request).list_all())


@router.get("/options")
async def get_options():
    """
    Dropdown options, section titles and administrative defaults for the form
    """
    return {
        "sections": options.FORM_SECTIONS,
        "fields": options.FIELD_OPTIONS,
        "administrative": {
            "region": config.REGION,
            "division": config.DIVISION,
            "district": config.DISTRICT,
        },
    }

"""
Learner list endpoints
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request

from app.database.schemas import Learner
from app.api.utils import get_learner_store

router = APIRouter()


@router.get("/learners", response_model=List[Learner])
async def list_learners(request: Request, q: Optional[str] = None):
    """
    All learners in the order they were added

    q filters by "last first middle" name, case-insensitive.
    """
    store = get_learner_store(request)
    if q:
        return store.search(q)
    return store.list_all()


@router.get("/learners/{learner_id}", response_model=Learner)
async def get_learner(learner_id: str, request: Request):
    learner = get_learner_store(request).find_by_id(learner_id)
    if learner is None:
        raise HTTPException(status_code=404, detail="Learner not found")
    return learner


@router.delete("/learners/{learner_id}")
async def delete_learner(learner_id: str, request: Request):
    """
    Delete a learner

    Deleting an id that is not stored is not an error; deleted tells the
    caller whether anything was removed.
    """
    deleted = get_learner_store(request).delete_by_id(learner_id)
    return {"deleted": deleted}

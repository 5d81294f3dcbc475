# API routes
from fastapi import APIRouter
from app.api.learners import router as learners_router
from app.api.wizard import router as wizard_router
from app.api.analytics import router as analytics_router

# Combine all routers
router = APIRouter()
router.include_router(learners_router)
router.include_router(wizard_router)
router.include_router(analytics_router)

__all__ = ["router"]

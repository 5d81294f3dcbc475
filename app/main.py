"""
FastAPI app

- Learner mapping wizard and learner list for the ALS field app
- CORS configured for mobile app development
- Learner store and wizard sessions held in memory on app.state
- Basic health check
"""
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file before reading config
project_root = Path(__file__).parent.parent
load_dotenv(dotenv_path=project_root / '.env')

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import router
from app.core.config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT, WIZARD_SESSION_TTL_SECONDS
from app.api.middleware import TimingMiddleware
from app.database.cache import WizardSessionRegistry
from app.database.storage import LearnerStore

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="ALS Learner Mapping")

# Records are lost when the process exits
app.state.learner_store = LearnerStore()
app.state.wizard_sessions = WizardSessionRegistry(ttl_seconds=WIZARD_SESSION_TTL_SECONDS)

# Add timing middleware for performance monitoring
app.add_middleware(TimingMiddleware)

# CORS middleware configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,  # Uses CORS_ORIGINS from config (env var)
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """
    Basic health check
    """
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)

"""
Basic configuration

- Administrative defaults pre-filled on every learner form
- CORS origins for development and production
- Supports environment variables for deployment-specific values
"""
import os

# Administrative fields (ALS Form 1, Manolo Fortich District I)
REGION = os.getenv("ALS_REGION", "Region X (Northern Mindanao)")
DIVISION = os.getenv("ALS_DIVISION", "Bukidnon Division")
DISTRICT = os.getenv("ALS_DISTRICT", "Manolo Fortich District I")

# Open wizard sessions are discarded after this many idle seconds
WIZARD_SESSION_TTL_SECONDS = int(os.getenv("WIZARD_SESSION_TTL_SECONDS", "3600"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Bind address for `python -m app.main`
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# Default localhost origins for development
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8081",
    "http://localhost:19006",
]

# Get additional CORS origins from environment variable
ADDITIONAL_CORS_ORIGINS = os.getenv("CORS_ORIGINS", "").split(",") if os.getenv("CORS_ORIGINS") else []

# Filter out empty strings from split
ADDITIONAL_CORS_ORIGINS = [origin.strip() for origin in ADDITIONAL_CORS_ORIGINS if origin.strip()]

# Combine default and additional origins
CORS_ORIGINS = DEFAULT_CORS_ORIGINS + ADDITIONAL_CORS_ORIGINS

"""
Municipal Draft Engine - Configuration
Environment-driven settings read once at import.
"""
import os

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma-separated list; "*" allows any origin
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

# Ending clause appended to every standard draft body
DRAFT_ENDING_ID = os.getenv("DRAFT_ENDING_ID", "END_STD")

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8001"))

"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from importlib import metadata
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Must run before modules that read env vars at construction time
load_dotenv()

# main.py is at src/api/main.py, so src is two levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.routes import dictionary, health
from utils.logging import setup_structured_logging

setup_structured_logging()

logger = logging.getLogger(__name__)

SERVICE_NAME = "Dictionary Lookup API"
DISTRIBUTION_NAME = "dictionary-lookup"


def _read_version() -> str:
    """Version from pyproject.toml in a checkout, else from installed metadata."""
    pyproject = _src_path.parent / "pyproject.toml"
    if pyproject.exists():
        with open(pyproject, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    return metadata.version(DISTRIBUTION_NAME)


VERSION = _read_version()

app = FastAPI(
    title=SERVICE_NAME,
    description="Looks up English words in the Free Dictionary API and returns structured entries",
    version=VERSION,
)

# CORS_ORIGINS="*" cannot be combined with credentials; explicit lists can
cors_origins_env = os.getenv("CORS_ORIGINS", "*")

if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
    logger.warning(
        "CORS configured with wildcard origin ('*'). "
        "For production, set CORS_ORIGINS to specific domains (e.g., 'https://app.example.com')"
    )
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info("CORS configured with specific origins", extra={"origins": cors_origins})

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(dictionary.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )

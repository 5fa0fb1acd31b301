"""
Version Check Service - Main FastAPI Application

This module contains the main FastAPI application for the version check service.
It reports whether a caller's version is behind the latest GitHub release
(or tag) of the configured repository.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from datetime import datetime
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
import uvicorn

from managers.config_manager import ConfigManager
from service_info import SERVICE_NAME, SERVICE_VERSION

# Configure logging to write to both console and file
# Create logs directory if it doesn't exist
logs_dir = Path(os.environ.get("LOG_DIR", "logs"))
logs_dir.mkdir(parents=True, exist_ok=True)

# Create log filename with timestamp
log_filename = logs_dir / f"version-check-{datetime.now().strftime('%Y-%m-%d')}.log"

# Configure logging with both console and file handlers
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        # Console handler
        logging.StreamHandler(),
        # File handler with rotation (max 10MB per file, keep 10 backup files)
        RotatingFileHandler(
            log_filename,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=10,
            encoding='utf-8'
        )
    ]
)
logger = logging.getLogger(__name__)


# ==================== Lifespan Events ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler for startup and shutdown
    """
    # Startup
    logger.info(f"{SERVICE_NAME} starting up...")

    # Configuration is read per request; only report what is set
    for env_key, state in ConfigManager().Describe().items():
        logger.info(f"{env_key}: {state}")

    logger.info("Server startup complete")

    yield

    # Shutdown
    logger.info(f"{SERVICE_NAME} shutting down...")


# ==================== FastAPI Application ====================

app = FastAPI(
    title=SERVICE_NAME,
    description="Reports whether a version is behind the latest GitHub release or tag",
    version=SERVICE_VERSION,
    lifespan=lifespan
)


# ==================== Import Routers ====================

from routes import status, version


# ==================== Include Routers ====================

app.include_router(status.router)
app.include_router(version.router)


# ==================== Main Entry Point ====================

def main():
    """
    Run the server using uvicorn
    """
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))

    logger.info(f"Starting {SERVICE_NAME} on {host}:{port}...")

    # reload=False: Auto-reload disabled, restart the server after code changes
    uvicorn.run(
        "server:app",
        host=host,
        port=port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()

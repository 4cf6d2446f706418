"""Batch Fraud Scanner API.

Scans sets of financial transactions for two fraud heuristics: unusually
large amounts, and several transactions on one account within a short
time window. Transaction sets are split into batches that are evaluated
concurrently.

Run with:
    python3 -m uvicorn app.main:app --host 0.0.0.0 --port 8000
"""

import json
import logging
from pathlib import Path
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.detection.engine import validate_config
from app.errors import InvalidConfigurationError
from app.models import DetectionConfig
from app.routes import config, detection
from app.storage.memory import RunStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Resolve the data/ directory relative to this file so the server works
# regardless of which directory uvicorn is launched from.
DATA_DIR = Path(__file__).parent.parent / "data"

app = FastAPI(
    title="Batch Fraud Scanner API",
    description=(
        "Concurrent batch scanning of financial transactions for "
        "high amounts and rapid succession on the same account."
    ),
    version="1.0.0",
)


def load_config(path: Path = DATA_DIR / "detection_config.json") -> DetectionConfig:
    """Load detection thresholds from a JSON file, or use defaults."""
    if path.exists():
        with open(path, "r") as f:
            detection_config = DetectionConfig(**json.load(f))
    else:
        detection_config = DetectionConfig()
    validate_config(detection_config)
    return detection_config


@app.on_event("startup")
async def startup() -> None:
    """Load the detection config and initialize the run store."""
    app.state.config = load_config()
    app.state.store = RunStore()
    logger.info("Loaded detection config: %s", app.state.config)


@app.exception_handler(InvalidConfigurationError)
async def invalid_configuration_handler(
    request: Request, exc: InvalidConfigurationError
) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# Mount all API routers
app.include_router(detection.router)
app.include_router(config.router)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "healthy"}

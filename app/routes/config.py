"""Configuration endpoints for reading and updating detection thresholds."""

from fastapi import APIRouter, Request

from app.detection.engine import validate_config
from app.models import DetectionConfig

router = APIRouter(prefix="/api")


@router.get("/config", response_model=DetectionConfig)
async def get_config(request: Request) -> DetectionConfig:
    """Return the current detection configuration."""
    return request.app.state.config


@router.put("/config", response_model=DetectionConfig)
async def update_config(
    new_config: DetectionConfig,
    request: Request,
) -> DetectionConfig:
    """Replace the detection configuration.

    The new config is validated first; an invalid one leaves the current
    config in place. Runs started afterwards use the new thresholds.
    """
    validate_config(new_config)
    request.app.state.config = new_config
    return new_config

"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()


class DiffLimitsUpdate(BaseModel):
    """Partial update of the diff size ceiling"""

    maxLines: int | None = None
    maxCells: int | None = None


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    diff: DiffLimitsUpdate | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    diff: dict
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        diff=config.get("diff", {}),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    if request.diff:
        updates = request.diff.model_dump(exclude_none=True)
        for name, value in updates.items():
            if value < 0:
                raise HTTPException(status_code=400, detail=f"{name} must not be negative")
        current_config["diff"] = {**current_config.get("diff", {}), **updates}

    config_manager.save_config(current_config)

    return {
        "status": "success",
        "message": "Configuration updated",
        "diff": current_config.get("diff", {}),
    }

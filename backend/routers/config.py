"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from services.config_manager import ConfigManager

router = APIRouter()


class ServerSettings(BaseModel):
    host: str | None = None
    port: int | None = Field(default=None, ge=1, le=65535)


class StorageSettings(BaseModel):
    upload_dir: str | None = None
    temp_dir: str | None = None


class CSVSettings(BaseModel):
    preview_rows: int | None = Field(default=None, ge=0)


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    server: ServerSettings | None = None
    storage: StorageSettings | None = None
    csv: CSVSettings | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    server: dict
    storage: dict
    csv: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        server=config.get("server", {}),
        storage=config.get("storage", {}),
        csv=config.get("csv", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    # Update only provided fields
    update = {
        section: values
        for section, values in request.model_dump(exclude_none=True).items()
        if values
    }
    if not update:
        raise HTTPException(status_code=400, detail="no configuration values provided")

    try:
        ConfigManager.get_instance().save_config(update)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}

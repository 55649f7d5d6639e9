"""System schemas for API request/response."""

from pydantic import BaseModel, Field


class ServiceHealth(BaseModel):
    """Individual service health status."""

    status: str  # "connected", "error"
    latency_ms: float | None = Field(None, alias="latencyMs")
    message: str | None = None

    model_config = {"populate_by_name": True}


class SystemHealthResponse(BaseModel):
    """System health check response."""

    healthy: bool
    database: ServiceHealth

    model_config = {"populate_by_name": True}


class UploadConfig(BaseModel):
    """Public parameters for unsigned uploads to the media host."""

    cloud_name: str = Field(..., alias="cloudName")
    upload_preset: str | None = Field(None, alias="uploadPreset")
    upload_url: str = Field(..., alias="uploadUrl")

    model_config = {"populate_by_name": True}

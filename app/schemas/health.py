"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service and store status; 'degraded' when the database or a table is unreachable."""

    status: Literal["ok", "degraded"] = Field(description="Overall service status")
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"]
    tables: dict[str, bool] = Field(
        description="Per-table readability, keyed by table name (users, products)",
    )

"""Pydantic schemas for request bodies."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

REQUIRED_REPORT_FIELDS = ("name", "location", "imageKey")


class CreateItemRequest(BaseModel):
    """Body of a create-item request."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    description: Optional[str] = None


class LocationSchema(BaseModel):
    """Coordinates of a report."""

    model_config = ConfigDict(extra="ignore", strict=True)

    lat: float = Field(ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(ge=-180, le=180, allow_inf_nan=False)


class CreateReportRequest(BaseModel):
    """Body of a create-report request.

    ``reportId``, ``createdAt`` and ``status`` are server-owned and ignored
    if a client sends them.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(min_length=1)
    contact: Optional[str] = None
    location: LocationSchema
    image_key: str = Field(alias="imageKey", min_length=1)

"""
Core data models for Tornado Watch.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AlertRecord(BaseModel):
    """The subset of an NWS alert's properties used for filtering and display."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    event: Optional[str] = Field(None, description="Alert event type")
    severity: Optional[str] = Field(None, description="Alert severity")
    urgency: Optional[str] = Field(None, description="Alert urgency")
    area_desc: Optional[str] = Field(None, alias="areaDesc", description="Affected area description")
    effective: Optional[str] = Field(None, description="Alert effective timestamp (ISO-8601 with offset)")


class Feature(BaseModel):
    """One GeoJSON feature of the alert feed."""

    model_config = ConfigDict(extra="ignore")

    properties: AlertRecord = Field(default_factory=AlertRecord)


class AlertFeed(BaseModel):
    """Decoded alert feed document."""

    model_config = ConfigDict(extra="ignore")

    features: List[Feature] = Field(..., description="Alert features in feed order")


class FeedResponse(BaseModel):
    """Result of fetching the alert feed; ``body`` is None when the fetch failed."""

    body: Optional[str] = Field(None, description="Raw response body")
    status_code: Optional[int] = Field(None, description="HTTP status code, if a response arrived")
    error: Optional[str] = Field(None, description="Reason the fetch produced no data")

    @property
    def ok(self) -> bool:
        return self.body is not None


class PassResult(BaseModel):
    """Outcome of one fetch/parse/filter/emit/persist pass."""

    started_at: datetime = Field(..., description="Local wall-clock time the pass started")
    summary: str = Field(..., description="Console summary for the pass")
    new_alerts: List[str] = Field(default_factory=list, description="Formatted lines for new alerts")
    saved: bool = Field(False, description="Whether the seen-set was persisted")

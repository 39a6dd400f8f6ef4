from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ReleaseStatement(BaseModel):
    model_config = ConfigDict(frozen=True)

    release_date: Optional[date] = None
    release_notes: Optional[str] = None
    status: Optional[str] = None
    engine: Optional[str] = None
    engine_version: Optional[str] = None


class BrowserStatement(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    type: Optional[str] = None
    releases: Dict[str, ReleaseStatement] = Field(default_factory=dict)

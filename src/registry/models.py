"""
Pydantic models for act identity records.

An ActIdentity is supplied by the act registry (see act_index.py) and is only
read by the parsers: its fields are copied onto the ParsedAct aggregate.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ActStatus(str, Enum):
    """Lifecycle status of an act."""

    IN_FORCE = "in_force"
    AMENDED = "amended"
    REPEALED = "repealed"
    NOT_YET_IN_FORCE = "not_yet_in_force"


class ActIdentity(BaseModel):
    """Identity record of a single act."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable act id (ex: computer-law-1995)")
    law_name: Optional[str] = Field(None, description="English law name (ex: Computers Law)")
    year: int = Field(..., ge=1800, le=2100, description="Year of enactment")
    title: str = Field(..., description="Title in the local language")
    title_en: str = Field(..., description="English title")
    abbreviation: str = Field(..., description="Short name (ex: CL)")
    status: ActStatus = Field(ActStatus.IN_FORCE, description="Lifecycle status")
    issued_date: str = Field("", description="Issuance date (YYYY-MM-DD)")
    in_force_date: str = Field("", description="Effective date (YYYY-MM-DD)")
    url: str = Field("", description="Source URL of the text")

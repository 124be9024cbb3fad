# models.py
"""
Wire models shared by the extension surfaces and the backend.
ProfileData keeps the camelCase field names the extension sends.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Platform(str, Enum):
    LINKEDIN = "linkedin"
    INSTAGRAM = "instagram"
    UNKNOWN = "unknown"


class ProfileData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    platform: Platform = Platform.UNKNOWN
    name: str = ""
    headline: str = ""
    job_title: str = Field("", alias="jobTitle")
    company: str = ""
    location: str = ""
    interests: str = ""
    recent_activity: str = Field("", alias="recentActivity")

    @field_validator("platform", mode="before")
    @classmethod
    def coerce_platform(cls, v: Any) -> Platform:
        try:
            return Platform(v)
        except ValueError:
            return Platform.UNKNOWN

    @field_validator(
        "name", "headline", "job_title", "company", "location", "interests", "recent_activity",
        mode="before",
    )
    @classmethod
    def never_null(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class _Item(BaseModel):
    @field_validator("*", mode="before")
    @classmethod
    def stringify(cls, v: Any) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)


class Connection(_Item):
    title: str = ""
    subtitle: str = ""
    link: str = ""


class CommunicationStarter(_Item):
    prompt: str = ""


class InterestExpansion(_Item):
    topic: str = ""
    why: str = ""


class AnalysisResult(BaseModel):
    """Structured networking suggestions returned by the completion API."""

    model_config = ConfigDict(extra="forbid")

    connections: List[Connection]
    communication_starters: List[CommunicationStarter]
    interest_expansions: List[InterestExpansion]

    def to_wire(self) -> dict:
        return self.model_dump(mode="json")


class Envelope(BaseModel):
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Any) -> dict:
        return {"success": True, "data": data}

    @classmethod
    def fail(cls, error: str) -> dict:
        return {"success": False, "error": error or "Unknown error"}

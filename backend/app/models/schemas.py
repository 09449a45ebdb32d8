import re
from typing import Literal
from pydantic import BaseModel, Field, field_validator

from backend.app.services.relevance import OVERVIEW_TOPIC
from shared.config import settings

_CRATE_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")

class TopicLookupRequest(BaseModel):
    topic: str = Field(default=OVERVIEW_TOPIC, description="Topic to look up")

    @field_validator("topic", mode="before")
    @classmethod
    def _default_blank_topic(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return OVERVIEW_TOPIC
        return v

class SvelteLookupRequest(TopicLookupRequest):
    type: Literal["svelte", "sveltekit"] = Field(
        default="svelte", description="Type of documentation: svelte or sveltekit"
    )

    @field_validator("type", mode="before")
    @classmethod
    def _default_type(cls, v):
        return v or "svelte"

class CrateLookupRequest(BaseModel):
    crate_name: str = Field(default_factory=lambda: settings.default_crate)

    @field_validator("crate_name", mode="before")
    @classmethod
    def _check_crate_name(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return settings.default_crate
        if not isinstance(v, str):
            return v
        v = v.strip()
        if not _CRATE_NAME_RE.match(v):
            raise ValueError(f"Invalid crate name: {v!r}")
        return v

class LookupResponse(BaseModel):
    text: str
    is_error: bool = False

class PingRequest(BaseModel):
    message: str = "No message provided"

class PingResponse(BaseModel):
    reply: str

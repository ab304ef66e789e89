from __future__ import annotations

from pydantic import BaseModel, Field, HttpUrl

from app.domain.enums import Alignment


class PolicyIn(BaseModel):
    topic: str = Field(min_length=2, max_length=120)
    stance: str = Field(min_length=2, max_length=300)
    proposal: str | None = Field(default=None, max_length=4000)


class CandidateIn(BaseModel):
    name: str = Field(min_length=2, max_length=200)
    party: str = Field(min_length=1, max_length=200)
    alignment: Alignment
    bio: str | None = Field(default=None, max_length=4000)
    image_url: HttpUrl | None = None
    policies: list[PolicyIn] = Field(default_factory=list, max_length=50)

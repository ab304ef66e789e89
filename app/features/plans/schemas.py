from __future__ import annotations

from pydantic import BaseModel, Field


class PlanIn(BaseModel):
    candidate_name: str = Field(min_length=2, max_length=200)
    party: str = Field(min_length=1, max_length=200)
    summary: str | None = Field(default=None, max_length=4000)
    topics: list[str] = Field(default_factory=list, max_length=50)
    proposals: str | None = None

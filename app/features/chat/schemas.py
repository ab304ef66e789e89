from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class MessageIn(BaseModel):
    role: Literal["user", "assistant"]
    content: str = Field(min_length=1, max_length=8000)


class ChatIn(BaseModel):
    messages: list[MessageIn] = Field(min_length=1, max_length=50)
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)

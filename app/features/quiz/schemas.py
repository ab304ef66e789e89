from __future__ import annotations

from pydantic import BaseModel, Field

from app.domain.enums import Alignment


class OptionIn(BaseModel):
    option_id: str = Field(min_length=1, max_length=10)
    text: str = Field(min_length=2, max_length=500)
    alignment: Alignment


class QuestionIn(BaseModel):
    question: str = Field(min_length=5, max_length=500)
    position: int | None = Field(default=None, ge=1)
    options: list[OptionIn] = Field(min_length=2, max_length=10)


class AnswerIn(BaseModel):
    question_id: int
    option_id: str = Field(min_length=1, max_length=10)


class SubmissionIn(BaseModel):
    participant: str = Field(default="anonymous", min_length=1, max_length=120)
    answers: list[AnswerIn] = Field(default_factory=list, max_length=200)

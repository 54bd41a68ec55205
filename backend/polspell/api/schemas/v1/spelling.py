from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class TokenInput(BaseModel):
    text: str
    start: int = Field(..., ge=0)


class SpellingCheckRequest(BaseModel):
    tokens: list[TokenInput] = Field(default_factory=list)


class SpellingMatchItem(BaseModel):
    start: int
    end: int
    word: str
    message_kind: Literal["spelling"]
    rule_id: str
    suggestions: list[str] = Field(default_factory=list)


class SpellingCheckResponse(BaseModel):
    matches: list[SpellingMatchItem]
    accepted_compounds: list[str] = Field(default_factory=list)


class CompoundRequest(BaseModel):
    word: str


class CompoundSplitItem(BaseModel):
    first: str
    second: str
    reason: Literal["prefix", "tags"]


class CompoundResponse(BaseModel):
    word: str
    is_compound: bool
    evidence: list[CompoundSplitItem] = Field(default_factory=list)

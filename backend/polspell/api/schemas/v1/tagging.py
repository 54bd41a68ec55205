from __future__ import annotations

from pydantic import BaseModel, Field


class TagRequest(BaseModel):
    tokens: list[str] = Field(default_factory=list)


class ReadingItem(BaseModel):
    lemma: str | None
    tag: str | None
    start: int | None = None


class TaggedToken(BaseModel):
    token: str
    readings: list[ReadingItem]
    is_unknown: bool


class TagResponse(BaseModel):
    tokens: list[TaggedToken]

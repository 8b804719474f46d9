from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class CharsetInfo(BaseModel):
    mib_enum: int
    primary_name: str
    preferred_mime_name: Optional[str] = Field(default=None, examples=["ISO-8859-1"])
    mime_text_suitable: bool
    aliases: List[str] = Field(default_factory=list)


class DecodeResponse(BaseModel):
    charset: CharsetInfo
    text: str
    length: int
    sha256: str


class HealthResponse(BaseModel):
    ok: bool = True

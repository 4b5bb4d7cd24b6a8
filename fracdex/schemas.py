from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
    requestId: Optional[str] = None


class Health(BaseModel):
    status: str = "ok"


class Version(BaseModel):
    version: str


# Empty or missing bounds mean "unbounded" on that side.


class KeyBetweenIn(BaseModel):
    before: Optional[str] = Field(default=None, max_length=4096)
    after: Optional[str] = Field(default=None, max_length=4096)


class KeyOut(BaseModel):
    key: str


class KeysBatchIn(KeyBetweenIn):
    count: int = Field(ge=0)


class KeysOut(BaseModel):
    keys: list[str]


class ValidateIn(BaseModel):
    key: str = Field(min_length=1, max_length=4096)


class ValidateOut(BaseModel):
    key: str
    valid: bool
    error: Optional[str] = None

from __future__ import annotations

from pydantic import BaseModel, Field


class SuffixRequest(BaseModel):
    value: str | None = Field(default=None, max_length=253)
    section: str = "unknown"
    ascii_idna_option: int | None = Field(default=None, ge=0)
    unicode_idna_option: int | None = Field(default=None, ge=0)


class SuffixResponse(BaseModel):
    public_suffix: str | None
    labels: list[str]
    section: str
    label_count: int
    ascii: str | None
    unicode: str | None
    is_known: bool
    is_icann: bool
    is_private: bool
    is_resolvable: bool
    is_transitional_different: bool
    ascii_idna_option: int
    unicode_idna_option: int

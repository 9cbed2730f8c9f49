"""Account DTOs (Pydantic v2, immutable)."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_email(email: str) -> str:
    return email.strip().lower()


class RegisterDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password: str

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return normalize_email(v)


class OtpEntryDTO(BaseModel):
    """What the OTP store keeps per ``(purpose, email)``."""

    code: str
    expires_at: datetime
    attempts: int = 0
    payload: Dict[str, Any] = Field(default_factory=dict)

"""Product DTOs for the Service Layer.

Framework-agnostic, immutable (``frozen=True``) Pydantic v2 contracts
between the API layer and ``ProductService``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class AttachVideoDTO(BaseModel):
    """Input for attaching a video to a listing.

    Both fields are required and must not be blank.
    """

    model_config = ConfigDict(frozen=True)

    product_id: str
    video_url: str

    @field_validator("product_id", "video_url")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty.")
        return v.strip()

"""Media DTOs for the Service Layer.

Multipart forms deliver ``sizes`` and ``existingCovers`` either as JSON
strings or as repeated fields; the ``mode="before"`` validators accept
both so the services only ever see lists.
"""

from __future__ import annotations

import json
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_sizes(raw: Any) -> List[str]:
    """``'["S","M"]'``, ``["S", "M"]`` and ``"S"`` are all accepted."""
    if raw is None or raw == "":
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            return [raw]
    if isinstance(raw, (list, tuple)):
        return [str(size) for size in raw]
    return [str(raw)]


def parse_cover_refs(raw: Any) -> List[str]:
    """Reduce ``existingCovers`` to the list of ``publicId`` values it names.

    Entries may be ``{"url": ..., "publicId": ...}`` objects or bare ids.
    Malformed JSON raises, so a broken form never reads as "keep nothing".
    """
    if isinstance(raw, str):
        raw = json.loads(raw) if raw.strip() else []
    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        raise ValueError("existingCovers must be a list.")

    public_ids = []
    for entry in raw:
        if isinstance(entry, dict):
            entry = entry.get("publicId")
        if not entry or not isinstance(entry, str):
            raise ValueError("Every existing cover needs a publicId.")
        public_ids.append(entry)
    return public_ids


class StoredAssetDTO(BaseModel):
    """What the media host returned for an upload."""

    model_config = ConfigDict(frozen=True)

    url: str
    public_id: str

    def as_cover(self) -> dict:
        return {"url": self.url, "publicId": self.public_id}


class AssetCleanupErrorDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    public_id: str
    error: str

    def as_response(self) -> dict:
        return {"publicId": self.public_id, "error": self.error}


class CreateLongVideoDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    category: str = ""
    price: float = 0
    discount: float = 0
    sizes: List[str] = Field(default_factory=list)

    @field_validator("sizes", mode="before")
    @classmethod
    def coerce_sizes(cls, v: Any) -> List[str]:
        return parse_sizes(v)


class UpdateLongVideoDTO(BaseModel):
    """Partial update: only explicitly supplied fields are applied.

    ``existing_covers`` of ``None`` keeps every stored cover; a list
    (even empty) is the exact set of stored covers to retain.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = None
    discount: Optional[float] = None
    sizes: Optional[List[str]] = None
    existing_covers: Optional[List[str]] = None

    @field_validator("sizes", mode="before")
    @classmethod
    def coerce_sizes(cls, v: Any) -> Optional[List[str]]:
        return None if v is None else parse_sizes(v)

    @field_validator("existing_covers", mode="before")
    @classmethod
    def coerce_cover_refs(cls, v: Any) -> Optional[List[str]]:
        if v is None:
            return None
        try:
            return parse_cover_refs(v)
        except json.JSONDecodeError as exc:
            raise ValueError("existingCovers is not valid JSON.") from exc

    def field_changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"existing_covers"})

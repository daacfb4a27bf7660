"""Data models for pools and visit records."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from .dates import date_key, display_date


class Location(BaseModel):
    """A pool from the static catalog. Never modified by the engine."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str
    name: str
    lat: float = Field(validation_alias=AliasChoices("lat", "latitude"))
    lng: float = Field(validation_alias=AliasChoices("lng", "lon", "longitude"))
    stamp_image: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("stamp", "stampImage", "stamp_image")
    )
    suburb: Optional[str] = None

    @field_validator("id", "name", mode="before")
    @classmethod
    def strip_text(cls, v):
        # Catalogs may use numeric ids; the ledger keys them as text
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("must not be blank")
        return v

    @property
    def stamp_src(self) -> str:
        """Stamp image path, derived from the id when the catalog gives none."""
        return self.stamp_image or f"stamps/{self.id}.png"


class ClaimDate(BaseModel):
    """A stored claim date with its sort key and display form worked out once."""

    model_config = ConfigDict(frozen=True)

    raw: str = ""
    sort_key: str = ""
    display: str = ""

    @classmethod
    def parse(cls, raw: Optional[str]) -> "ClaimDate":
        raw = raw or ""
        return cls(raw=raw, sort_key=date_key(raw), display=display_date(raw))


class VisitRecord(BaseModel):
    """Proof that a pool was claimed.

    Serializes as ``{"done": ..., "date": ...}``; ``claim_date`` is derived
    from ``date`` and never written out.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    done: bool = False
    date: str = ""
    claim_date: ClaimDate = Field(default_factory=ClaimDate, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def derive_claim_date(cls, data):
        if not isinstance(data, dict):
            return data
        normalized = dict(data)
        raw = normalized.get("date")
        if raw is None:
            raw = ""
        elif not isinstance(raw, str):
            raw = str(raw)
        normalized["date"] = raw
        normalized["claim_date"] = ClaimDate.parse(raw)
        return normalized

    def to_serialized_dict(self) -> dict:
        return self.model_dump(mode="json")

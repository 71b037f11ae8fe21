"""
Core datamodel for geolocated notes.

Every model is frozen: once constructed it cannot be modified, and any
violation of a field constraint raises one of the errors in
``geonotes.errors`` at construction time.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidAttachment, InvalidCoordinate, InvalidNote


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_url(kind: str, url: str) -> None:
    if not url or not url.strip():
        raise InvalidAttachment(f"{kind}.url is required")


class GeoPoint(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float

    @model_validator(mode="after")
    def check_range(self) -> "GeoPoint":
        # NaN fails these checks too.
        if not -90 <= self.lat <= 90:
            raise InvalidCoordinate(f"Invalid latitude: {self.lat}")
        if not -180 <= self.lon <= 180:
            raise InvalidCoordinate(f"Invalid longitude: {self.lon}")
        return self


class GeoArea(BaseModel):
    """Bounding box used for spatial filtering.

    ``top_left`` holds the lower latitude/longitude bounds and
    ``bottom_right`` the upper ones. Reversed corners are not normalized.
    """

    model_config = ConfigDict(frozen=True)

    top_left: GeoPoint
    bottom_right: GeoPoint


class Photo(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["photo"] = "photo"
    url: str
    width: int
    height: int

    @model_validator(mode="after")
    def check_fields(self) -> "Photo":
        _require_url("Photo", self.url)
        if self.width <= 0 or self.height <= 0:
            raise InvalidAttachment(
                f"Invalid Photo dimensions: {self.width}x{self.height}"
            )
        return self


class Audio(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["audio"] = "audio"
    url: str
    duration: int  # seconds

    @model_validator(mode="after")
    def check_fields(self) -> "Audio":
        _require_url("Audio", self.url)
        if self.duration < 0:
            raise InvalidAttachment(
                f"Audio.duration cannot be negative: {self.duration}"
            )
        return self


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["link"] = "link"
    url: str
    label: Optional[str] = None

    @field_validator("label")
    @classmethod
    def blank_label_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def check_fields(self) -> "Link":
        _require_url("Link", self.url)
        return self

    def effective_label(self) -> str:
        """The label when present, otherwise the url."""
        return self.label if self.label else self.url


class Video(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["video"] = "video"
    url: str
    seconds: int

    @model_validator(mode="after")
    def check_fields(self) -> "Video":
        _require_url("Video", self.url)
        if self.seconds < 0:
            raise InvalidAttachment(
                f"Video.seconds cannot be negative: {self.seconds}"
            )
        return self


Attachment = Annotated[Union[Photo, Audio, Link, Video], Field(discriminator="kind")]


class Note(BaseModel):
    """Core note datamodel.

    The id is assigned by the caller; the core never generates ids.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: Optional[str] = None
    content: str = "-"
    location: Optional[GeoPoint] = None
    created_at: datetime = Field(default_factory=_utcnow)
    attachment: Optional[Attachment] = None

    @field_validator("content", mode="before")
    @classmethod
    def normalize_content(cls, value):
        if value is None:
            return "-"
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("created_at", mode="before")
    @classmethod
    def default_created_at(cls, value):
        return _utcnow() if value is None else value

    @field_validator("created_at")
    @classmethod
    def ensure_aware(cls, value: datetime) -> datetime:
        # Naive timestamps are taken as UTC so sorting never mixes kinds.
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)

    @model_validator(mode="after")
    def check_required(self) -> "Note":
        if self.title is None or not self.title.strip() or len(self.title) < 3:
            raise InvalidNote("title is required (at least 3 characters)")
        if self.location is None:
            raise InvalidNote("location is required")
        return self

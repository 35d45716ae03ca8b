# parsers/models.py

from dataclasses import dataclass, field
from datetime import timedelta

from pydantic import BaseModel, ConfigDict


class ParseDiagnostic(BaseModel):
    """A field that was recognized but could not be parsed."""

    line_number: int
    field: str
    value: str
    message: str

    model_config = ConfigDict(extra="forbid", frozen=True)


@dataclass(frozen=True)
class GeneralInfo:
    title: str | None = None
    author: str | None = None
    read_by: str | None = None
    copyright: str | None = None
    genre: str | None = None
    publisher: str | None = None
    duration: timedelta | None = None
    chapters: int | None = None
    unabridged: bool | None = None


@dataclass(frozen=True)
class SourceInfo:
    format: str | None = None
    sample_rate: str | None = None
    channels: int | None = None
    bitrate: str | None = None


@dataclass(frozen=True)
class EncodedInfo:
    lossless: bool | None = None
    codec: str | None = None
    sample_rate: str | None = None
    channels: int | None = None
    bitrate: str | None = None


@dataclass(frozen=True)
class MediaInfo:
    source: SourceInfo = field(default_factory=SourceInfo)
    encoded: EncodedInfo = field(default_factory=EncodedInfo)
    chapter_adjust: str | None = None
    chapter_rename: str | None = None
    ripper: str | None = None
    id_tagging: str | None = None


@dataclass(frozen=True)
class ParsedDocument:
    general: GeneralInfo
    media: MediaInfo
    description: str | None = None
    diagnostics: tuple[ParseDiagnostic, ...] = ()

"""Build configuration and report models."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from .config import (
    AMP_FILENAME,
    ENTRY_GLOB,
    MINIFY,
    OUTPUT_DIR,
    OUTPUT_STYLE,
    SITE_FILENAME,
    SOURCE_DIR,
)


class MediaBucket(BaseModel):
    """One output file cut from the compiled stylesheet.

    ``media`` is ``"all"`` (everything), ``"none"`` (rules outside any
    ``@media`` block) or one or more media query strings.
    """

    media: str | list[str] = "all"
    filename: str

    @field_validator("filename")
    @classmethod
    def _plain_filename(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"bucket filename must be a bare file name: {value!r}")
        return value

    @field_validator("media")
    @classmethod
    def _non_empty_media(cls, value: str | list[str]) -> str | list[str]:
        if isinstance(value, list) and not value:
            raise ValueError("media query list must not be empty")
        return value

    def queries(self) -> list[str]:
        """Media queries this bucket selects, whitespace-normalized."""
        items = [self.media] if isinstance(self.media, str) else self.media
        return [normalize_query(q) for q in items]


def normalize_query(query: str) -> str:
    return " ".join(query.split()).lower()


def default_buckets() -> list[MediaBucket]:
    return [
        MediaBucket(media="all", filename=SITE_FILENAME),
        MediaBucket(media="all", filename=AMP_FILENAME),
    ]


class BuildConfig(BaseModel):
    """Everything one build needs to know."""

    source_dir: Path = SOURCE_DIR
    entry_glob: str = ENTRY_GLOB
    output_dir: Path = OUTPUT_DIR
    output_style: str = OUTPUT_STYLE
    buckets: list[MediaBucket] = Field(default_factory=default_buckets)
    amp_filename: str = AMP_FILENAME
    minify: bool = MINIFY

    @model_validator(mode="after")
    def _check_buckets(self) -> BuildConfig:
        if not self.buckets:
            raise ValueError("at least one media bucket is required")
        names = [b.filename for b in self.buckets]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"duplicate bucket filenames: {', '.join(dupes)}")
        return self


class OutputInfo(BaseModel):
    """A file the writer produced (or found already up to date)."""

    path: Path
    size: int
    sha256: str
    changed: bool


class BuildReport(BaseModel):
    """Result of one build."""

    finished_at: datetime
    duration_ms: float
    entries: list[str]
    outputs: list[OutputInfo]

    @property
    def changed_count(self) -> int:
        return sum(1 for o in self.outputs if o.changed)

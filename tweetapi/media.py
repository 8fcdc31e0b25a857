"""Media objects attached to tweets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class MediaField(StrEnum):
    """Fields that can be requested on media objects."""

    DURATION_MS = "duration_ms"
    HEIGHT = "height"
    MEDIA_KEY = "media_key"
    PREVIEW_IMAGE_URL = "preview_image_url"
    TYPE = "type"
    URL = "url"
    WIDTH = "width"
    PUBLIC_METRICS = "public_metrics"
    NON_PUBLIC_METRICS = "non_public_metrics"
    ORGANIC_METRICS = "organic_metrics"
    PROMOTED_METRICS = "promoted_metrics"


@dataclass
class MediaMetrics:
    """Engagement metrics for media content."""

    playback_0: int = 0
    playback_100: int = 0
    playback_25: int = 0
    playback_50: int = 0
    playback_75: int = 0
    views: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MediaMetrics:
        return cls(
            playback_0=data.get("playback_0_count", 0),
            playback_100=data.get("playback_100_count", 0),
            playback_25=data.get("playback_25_count", 0),
            playback_50=data.get("playback_50_count", 0),
            playback_75=data.get("playback_75_count", 0),
            views=data.get("view_count", 0),
        )


def _metrics(data: dict[str, Any] | None) -> MediaMetrics | None:
    return None if data is None else MediaMetrics.from_dict(data)


@dataclass
class Media:
    """An image, GIF or video attached to a tweet."""

    key: str = ""
    type: str = ""
    url: str = ""
    duration_ms: int = 0
    height: int = 0
    non_public_metrics: MediaMetrics | None = None
    organic_metrics: MediaMetrics | None = None
    preview_image_url: str = ""
    promoted_metrics: MediaMetrics | None = None
    public_metrics: MediaMetrics | None = None
    width: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Media:
        return cls(
            key=data.get("media_key", ""),
            type=data.get("type", ""),
            url=data.get("url", ""),
            duration_ms=data.get("duration_ms", 0),
            height=data.get("height", 0),
            non_public_metrics=_metrics(data.get("non_public_metrics")),
            organic_metrics=_metrics(data.get("organic_metrics")),
            preview_image_url=data.get("preview_image_url", ""),
            promoted_metrics=_metrics(data.get("promoted_metrics")),
            public_metrics=_metrics(data.get("public_metrics")),
            width=data.get("width", 0),
        )
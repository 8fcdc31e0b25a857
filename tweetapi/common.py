"""Entity and withholding objects shared by tweets and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class _Span:
    start: int = 0
    end: int = 0


@dataclass
class EntityAnnotation(_Span):
    """An annotation recognised in the text."""

    probability: float = 0.0
    type: str = ""
    normalized_text: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EntityAnnotation:
        return cls(
            start=data.get("start", 0),
            end=data.get("end", 0),
            probability=data.get("probability", 0.0),
            type=data.get("type", ""),
            normalized_text=data.get("normalized_text", ""),
        )


@dataclass
class EntityURL(_Span):
    """Text recognised as a URL."""

    url: str = ""
    expanded_url: str = ""
    display_url: str = ""
    status: int = 0
    title: str = ""
    description: str = ""
    unwound_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EntityURL:
        return cls(
            start=data.get("start", 0),
            end=data.get("end", 0),
            url=data.get("url", ""),
            expanded_url=data.get("expanded_url", ""),
            display_url=data.get("display_url", ""),
            status=data.get("status", 0),
            title=data.get("title", ""),
            description=data.get("description", ""),
            unwound_url=data.get("unwound_url", ""),
        )


@dataclass
class EntityTag(_Span):
    """Text recognised as a hashtag or cashtag."""

    tag: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EntityTag:
        return cls(start=data.get("start", 0), end=data.get("end", 0), tag=data.get("tag", ""))


@dataclass
class EntityMention(_Span):
    """Text recognised as a user mention."""

    username: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EntityMention:
        return cls(
            start=data.get("start", 0),
            end=data.get("end", 0),
            username=data.get("username", ""),
        )


@dataclass
class Entities:
    """Text in a tweet or profile that has a special meaning."""

    annotations: list[EntityAnnotation] = field(default_factory=list)
    urls: list[EntityURL] = field(default_factory=list)
    hashtags: list[EntityTag] = field(default_factory=list)
    mentions: list[EntityMention] = field(default_factory=list)
    cashtags: list[EntityTag] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entities:
        return cls(
            annotations=[EntityAnnotation.from_dict(a) for a in data.get("annotations") or []],
            urls=[EntityURL.from_dict(u) for u in data.get("urls") or []],
            hashtags=[EntityTag.from_dict(t) for t in data.get("hashtags") or []],
            mentions=[EntityMention.from_dict(m) for m in data.get("mentions") or []],
            cashtags=[EntityTag.from_dict(t) for t in data.get("cashtags") or []],
        )


@dataclass
class WithHeld:
    """Withholding details."""

    copyright: bool = False
    country_codes: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WithHeld:
        return cls(
            copyright=data.get("copyright", False),
            country_codes=list(data.get("country_codes") or []),
        )
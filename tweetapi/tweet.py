"""Tweet objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from tweetapi.common import Entities, WithHeld


class TweetField(StrEnum):
    """Fields that can be requested on tweet objects."""

    ID = "id"
    TEXT = "text"
    ATTACHMENTS = "attachments"
    AUTHOR_ID = "author_id"
    CONTEXT_ANNOTATIONS = "context_annotations"
    CONVERSATION_ID = "conversation_id"
    CREATED_AT = "created_at"
    ENTITIES = "entities"
    GEO = "geo"
    IN_REPLY_TO_USER_ID = "in_reply_to_user_id"
    LANGUAGE = "lang"
    NON_PUBLIC_METRICS = "non_public_metrics"
    PUBLIC_METRICS = "public_metrics"
    ORGANIC_METRICS = "organic_metrics"
    PROMOTED_METRICS = "promoted_metrics"
    POSSIBLY_SENSITIVE = "possibly_sensitive"
    REFERENCED_TWEETS = "referenced_tweets"
    SOURCE = "source"
    WITHHELD = "withheld"


@dataclass
class TweetAttachments:
    """Media keys and poll ids attached to a tweet."""

    media_keys: list[str] = field(default_factory=list)
    poll_ids: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetAttachments:
        return cls(
            media_keys=list(data.get("media_keys") or []),
            poll_ids=list(data.get("poll_ids") or []),
        )


@dataclass
class TweetContext:
    """A domain or entity classification of a tweet."""

    id: str = ""
    name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetContext:
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            description=data.get("description", ""),
        )


@dataclass
class TweetContextAnnotation:
    """A context annotation of a tweet."""

    domain: TweetContext = field(default_factory=TweetContext)
    entity: TweetContext = field(default_factory=TweetContext)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetContextAnnotation:
        return cls(
            domain=TweetContext.from_dict(data.get("domain") or {}),
            entity=TweetContext.from_dict(data.get("entity") or {}),
        )


@dataclass
class TweetGeoCoordinates:
    """Coordinates of the location tagged in a tweet."""

    type: str = ""
    coordinates: list[float] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetGeoCoordinates:
        return cls(
            type=data.get("type", ""),
            coordinates=[float(c) for c in data.get("coordinates") or []],
        )


@dataclass
class TweetGeo:
    """The location tagged in a tweet."""

    place_id: str = ""
    coordinates: TweetGeoCoordinates = field(default_factory=TweetGeoCoordinates)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetGeo:
        return cls(
            place_id=data.get("place_id", ""),
            coordinates=TweetGeoCoordinates.from_dict(data.get("coordinates") or {}),
        )


@dataclass
class TweetMetrics:
    """Engagement metrics of a tweet."""

    impressions: int = 0
    url_link_clicks: int = 0
    user_profile_clicks: int = 0
    likes: int = 0
    replies: int = 0
    retweets: int = 0
    quotes: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetMetrics:
        return cls(
            impressions=data.get("impression_count", 0),
            url_link_clicks=data.get("url_link_clicks", 0),
            user_profile_clicks=data.get("user_profile_clicks", 0),
            likes=data.get("like_count", 0),
            replies=data.get("reply_count", 0),
            retweets=data.get("retweet_count", 0),
            quotes=data.get("quote_count", 0),
        )


@dataclass
class TweetReferencedTweet:
    """A tweet this tweet refers to."""

    type: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetReferencedTweet:
        return cls(type=data.get("type", ""), id=data.get("id", ""))


def _metrics(data: dict[str, Any] | None) -> TweetMetrics | None:
    return None if data is None else TweetMetrics.from_dict(data)


@dataclass
class Tweet:
    """The primary object of the tweets endpoints."""

    id: str = ""
    text: str = ""
    attachments: TweetAttachments | None = None
    author_id: str = ""
    context_annotations: list[TweetContextAnnotation] = field(default_factory=list)
    conversation_id: str = ""
    created_at: str = ""
    entities: Entities | None = None
    geo: TweetGeo | None = None
    in_reply_to_user_id: str = ""
    language: str = ""
    non_public_metrics: TweetMetrics | None = None
    organic_metrics: TweetMetrics | None = None
    possibly_sensitive: bool = False
    promoted_metrics: TweetMetrics | None = None
    public_metrics: TweetMetrics | None = None
    referenced_tweets: list[TweetReferencedTweet] = field(default_factory=list)
    source: str = ""
    withheld: WithHeld | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tweet:
        attachments = data.get("attachments")
        entities = data.get("entities")
        geo = data.get("geo")
        withheld = data.get("withheld")
        return cls(
            id=data.get("id", ""),
            text=data.get("text", ""),
            attachments=None if attachments is None else TweetAttachments.from_dict(attachments),
            author_id=data.get("author_id", ""),
            context_annotations=[
                TweetContextAnnotation.from_dict(a) for a in data.get("context_annotations") or []
            ],
            conversation_id=data.get("conversation_id", ""),
            created_at=data.get("created_at", ""),
            entities=None if entities is None else Entities.from_dict(entities),
            geo=None if geo is None else TweetGeo.from_dict(geo),
            in_reply_to_user_id=data.get("in_reply_to_user_id", ""),
            language=data.get("lang", ""),
            non_public_metrics=_metrics(data.get("non_public_metrics")),
            organic_metrics=_metrics(data.get("organic_metrics")),
            possibly_sensitive=data.get("possibly_sensitive", data.get("possiby_sensitive", False)),
            promoted_metrics=_metrics(data.get("promoted_metrics")),
            public_metrics=_metrics(data.get("public_metrics")),
            referenced_tweets=[
                TweetReferencedTweet.from_dict(r) for r in data.get("referenced_tweets") or []
            ],
            source=data.get("source", ""),
            withheld=None if withheld is None else WithHeld.from_dict(withheld),
        )
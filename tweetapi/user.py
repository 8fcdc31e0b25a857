"""User objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from tweetapi.common import Entities, WithHeld


class UserField(StrEnum):
    """Fields that can be requested on user objects."""

    CREATED_AT = "created_at"
    DESCRIPTION = "description"
    ENTITIES = "entities"
    ID = "id"
    LOCATION = "location"
    NAME = "name"
    PINNED_TWEET_ID = "pinned_tweet_id"
    PROFILE_IMAGE_URL = "profile_image_url"
    PROTECTED = "protected"
    PUBLIC_METRICS = "public_metrics"
    URL = "url"
    USER_NAME = "username"
    VERIFIED = "verified"
    WITHHELD = "withheld"


@dataclass
class UserMetrics:
    """Activity counts for a user."""

    followers: int = 0
    following: int = 0
    tweets: int = 0
    listed: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserMetrics:
        return cls(
            followers=data.get("followers_count", 0),
            following=data.get("following_count", 0),
            tweets=data.get("tweet_count", 0),
            listed=data.get("listed_count", 0),
        )


@dataclass
class User:
    """Account metadata describing a user."""

    id: str = ""
    name: str = ""
    username: str = ""
    created_at: str = ""
    description: str = ""
    entities: Entities | None = None
    location: str = ""
    pinned_tweet_id: str = ""
    profile_image_url: str = ""
    protected: bool = False
    public_metrics: UserMetrics | None = None
    url: str = ""
    verified: bool = False
    withheld: WithHeld | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        entities = data.get("entities")
        metrics = data.get("public_metrics")
        withheld = data.get("withheld")
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            username=data.get("username", ""),
            created_at=data.get("created_at", ""),
            description=data.get("description", ""),
            entities=None if entities is None else Entities.from_dict(entities),
            location=data.get("location", ""),
            pinned_tweet_id=data.get("pinned_tweet_id", ""),
            profile_image_url=data.get("profile_image_url", ""),
            protected=data.get("protected", False),
            public_metrics=None if metrics is None else UserMetrics.from_dict(metrics),
            url=data.get("url", ""),
            verified=data.get("verified", False),
            withheld=None if withheld is None else WithHeld.from_dict(withheld),
        )
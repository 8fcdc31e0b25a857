"""Expansions and exclusions that can be requested."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, StrEnum


class Expansion(StrEnum):
    """Objects referenced in the payload that can be expanded."""

    ATTACHMENTS_POLL_IDS = "attachments.poll_ids"
    ATTACHMENTS_MEDIA_KEYS = "attachments.media_keys"
    AUTHOR_ID = "author_id"
    ENTITIES_MENTIONS_USERNAME = "entities.mentions.username"
    GEO_PLACE_ID = "geo.place_id"
    IN_REPLY_TO_USER_ID = "in_reply_to_user_id"
    REFERENCED_TWEETS_ID = "referenced_tweets.id"
    REFERENCED_TWEETS_ID_AUTHOR_ID = "referenced_tweets.id.author_id"
    PINNED_TWEET_ID = "pinned_tweet_id"
    OWNER_ID = "owner_id"


class Exclude(StrEnum):
    """Exclusions in a timeline request."""

    RETWEETS = "retweets"
    REPLIES = "replies"


def join_values(values: Iterable[str | Enum]) -> str:
    """Join field, expansion or exclusion values with commas."""
    return ",".join(v.value if isinstance(v, Enum) else str(v) for v in values)
"""Recent tweet counts: options and response."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from tweetapi.options import _rfc3339


class Granularity(StrEnum):
    """How the count time series is grouped."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"


@dataclass
class TweetRecentCountsOpts:
    """Optional parameters of a recent counts request."""

    start_time: datetime | None = None
    end_time: datetime | None = None
    since_id: str = ""
    until_id: str = ""
    granularity: Granularity | str = ""

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        params: dict[str, str] = {}
        if self.start_time is not None:
            params["start_time"] = _rfc3339(self.start_time)
        if self.end_time is not None:
            params["end_time"] = _rfc3339(self.end_time)
        if self.since_id:
            params["since_id"] = self.since_id
        if self.until_id:
            params["until_id"] = self.until_id
        if self.granularity:
            params["granularity"] = str(self.granularity)
        return params


@dataclass
class TweetCount:
    """Number of tweets in one time slot."""

    start: str = ""
    end: str = ""
    tweet_count: int = 0


@dataclass
class TweetRecentCountsMeta:
    """Totals of a recent counts response."""

    total_tweet_count: int = 0


@dataclass
class TweetRecentCountsResponse:
    """Response of a recent counts request."""

    tweet_counts: list[TweetCount] = field(default_factory=list)
    meta: TweetRecentCountsMeta = field(default_factory=TweetRecentCountsMeta)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetRecentCountsResponse:
        meta = data.get("meta") or {}
        return cls(
            tweet_counts=[
                TweetCount(
                    start=c.get("start", ""),
                    end=c.get("end", ""),
                    tweet_count=c.get("tweet_count", 0),
                )
                for c in data.get("data") or []
            ],
            meta=TweetRecentCountsMeta(total_tweet_count=meta.get("total_tweet_count", 0)),
        )
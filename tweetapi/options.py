"""Query options for tweet lookup and user timelines."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from tweetapi.fields import Exclude, Expansion, join_values
from tweetapi.media import MediaField
from tweetapi.place import PlaceField
from tweetapi.poll import PollField
from tweetapi.tweet import TweetField
from tweetapi.user import UserField


def _rfc3339(moment: datetime) -> str:
    """Format a time as RFC 3339 with whole seconds; naive times are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    offset = moment.utcoffset()
    stamp = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if not offset:
        return stamp + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{stamp}{sign}{hours:02d}:{mins:02d}"


def _field_params(opts: object) -> dict[str, str]:
    params: dict[str, str] = {}
    for key, attr in (
        ("expansions", "expansions"),
        ("media.fields", "media_fields"),
        ("place.fields", "place_fields"),
        ("poll.fields", "poll_fields"),
        ("tweet.fields", "tweet_fields"),
        ("user.fields", "user_fields"),
    ):
        values = getattr(opts, attr)
        if values:
            params[key] = join_values(values)
    return params


def _range_params(
    params: dict[str, str],
    start_time: datetime | None,
    end_time: datetime | None,
    max_results: int,
    pagination_token: str,
    since_id: str,
    until_id: str,
) -> dict[str, str]:
    if start_time is not None:
        params["start_time"] = _rfc3339(start_time)
    if end_time is not None:
        params["end_time"] = _rfc3339(end_time)
    if max_results > 0:
        params["max_results"] = str(max_results)
    if pagination_token:
        params["pagination_token"] = pagination_token
    if since_id:
        params["since_id"] = since_id
    if until_id:
        params["until_id"] = until_id
    return params


@dataclass
class TweetLookupOpts:
    """Optional parameters of a tweet lookup."""

    expansions: list[Expansion] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _field_params(self)


@dataclass
class UserTweetTimelineOpts:
    """Optional parameters of a user's tweet timeline."""

    expansions: list[Expansion] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    excludes: list[Exclude] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None
    max_results: int = 0
    pagination_token: str = ""
    since_id: str = ""
    until_id: str = ""

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        params = _field_params(self)
        if self.excludes:
            params["exclude"] = join_values(self.excludes)
        return _range_params(
            params,
            self.start_time,
            self.end_time,
            self.max_results,
            self.pagination_token,
            self.since_id,
            self.until_id,
        )


@dataclass
class UserMentionTimelineOpts:
    """Optional parameters of a user's mention timeline."""

    expansions: list[Expansion] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None
    max_results: int = 0
    pagination_token: str = ""
    since_id: str = ""
    until_id: str = ""

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _range_params(
            _field_params(self),
            self.start_time,
            self.end_time,
            self.max_results,
            self.pagination_token,
            self.since_id,
            self.until_id,
        )
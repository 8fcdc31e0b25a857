"""Liking tweets and looking up a user's liked tweets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tweetapi.fields import Expansion
from tweetapi.media import MediaField
from tweetapi.options import _field_params
from tweetapi.place import PlaceField
from tweetapi.poll import PollField
from tweetapi.raw import TweetRaw
from tweetapi.tweet import TweetField
from tweetapi.user import UserField


@dataclass
class UserLikesData:
    """Whether the tweet is liked."""

    liked: bool = False


def _likes_data(data: dict[str, Any]) -> UserLikesData | None:
    obj = data.get("data")
    return None if obj is None else UserLikesData(liked=obj.get("liked", False))


@dataclass
class UserLikesResponse:
    """Response to liking a tweet."""

    data: UserLikesData | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserLikesResponse:
        return cls(data=_likes_data(data))


@dataclass
class DeleteUserLikesResponse:
    """Response to unliking a tweet."""

    data: UserLikesData | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeleteUserLikesResponse:
        return cls(data=_likes_data(data))


@dataclass
class UserLikesMeta:
    """Paging information of a liked tweets lookup."""

    result_count: int = 0
    next_token: str = ""
    previous_token: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserLikesMeta:
        return cls(
            result_count=data.get("result_count", 0),
            next_token=data.get("next_token", ""),
            previous_token=data.get("previous_token", ""),
        )


@dataclass
class UserLikesLookupResponse:
    """The tweets a user has liked."""

    raw: TweetRaw = field(default_factory=TweetRaw)
    meta: UserLikesMeta | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserLikesLookupResponse:
        meta = data.get("meta")
        return cls(
            raw=TweetRaw.from_dict(data),
            meta=None if meta is None else UserLikesMeta.from_dict(meta),
        )


@dataclass
class UserLikesLookupOpts:
    """Optional parameters of a liked tweets lookup."""

    expansions: list[Expansion] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    max_results: int = 0
    pagination_token: str = ""

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        params = _field_params(self)
        if self.max_results > 0:
            params["max_results"] = str(self.max_results)
        if self.pagination_token:
            params["pagination_token"] = self.pagination_token
        return params
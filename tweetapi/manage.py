"""Requests and responses for creating and deleting tweets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tweetapi.errors import ParameterError

_PARAM = "twitter input parameter error"


@dataclass
class CreateTweetGeo:
    """Geo information for a new tweet."""

    place_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"place_id": self.place_id} if self.place_id else {}


@dataclass
class CreateTweetMedia:
    """Previously uploaded media to attach; tagged users need media ids."""

    ids: list[str] = field(default_factory=list)
    tagged_user_ids: list[str] = field(default_factory=list)

    def validate(self) -> None:
        if self.tagged_user_ids and not self.ids:
            raise ParameterError(
                f"media ids are required if tagged user ids are present: {_PARAM}"
            )

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.ids:
            body["media_ids"] = list(self.ids)
        if self.tagged_user_ids:
            body["tagged_user_ids"] = list(self.tagged_user_ids)
        return body


@dataclass
class CreateTweetPoll:
    """A poll to post as the tweet."""

    duration_minutes: int = 0
    options: list[str] = field(default_factory=list)

    def validate(self) -> None:
        if self.options and self.duration_minutes <= 0:
            raise ParameterError(f"poll duration minutes are required with options: {_PARAM}")

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.duration_minutes:
            body["duration_minutes"] = self.duration_minutes
        if self.options:
            body["options"] = list(self.options)
        return body


@dataclass
class CreateTweetReply:
    """Reply settings for a new tweet."""

    exclude_reply_user_ids: list[str] = field(default_factory=list)
    in_reply_to_tweet_id: str = ""

    def validate(self) -> None:
        if self.exclude_reply_user_ids and not self.in_reply_to_tweet_id:
            raise ParameterError(
                "in reply to tweet id needs to be present if excluded reply user ids "
                f"are present: {_PARAM}"
            )

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.exclude_reply_user_ids:
            body["exclude_reply_user_ids"] = list(self.exclude_reply_user_ids)
        if self.in_reply_to_tweet_id:
            body["in_reply_to_tweet_id"] = self.in_reply_to_tweet_id
        return body


@dataclass
class CreateTweetRequest:
    """The details of a tweet to create."""

    direct_message_deep_link: str = ""
    for_super_followers_only: bool = False
    quote_tweet_id: str = ""
    text: str = ""
    reply_settings: str = ""
    geo: CreateTweetGeo | None = None
    media: CreateTweetMedia | None = None
    poll: CreateTweetPoll | None = None
    reply: CreateTweetReply | None = None

    def validate(self) -> None:
        """Raise ParameterError if the request cannot be sent."""
        for part in (self.media, self.poll, self.reply):
            if part is None:
                continue
            try:
                part.validate()
            except ParameterError as err:
                raise ParameterError(f"create tweet error: {err}") from err
        if (self.media is None or not self.media.ids) and not self.text:
            raise ParameterError(f"create tweet text is required if no media ids: {_PARAM}")

    def to_dict(self) -> dict[str, Any]:
        """JSON body of the request, leaving out empty values."""
        body: dict[str, Any] = {}
        if self.direct_message_deep_link:
            body["direct_message_deep_link"] = self.direct_message_deep_link
        if self.for_super_followers_only:
            body["for_super_followers_only"] = True
        if self.quote_tweet_id:
            body["quote_tweet_id"] = self.quote_tweet_id
        if self.text:
            body["text"] = self.text
        if self.reply_settings:
            body["reply_settings"] = self.reply_settings
        for key, part in (
            ("geo", self.geo),
            ("media", self.media),
            ("poll", self.poll),
            ("reply", self.reply),
        ):
            if part is not None:
                body[key] = part.to_dict()
        return body


@dataclass
class CreateTweetData:
    """The tweet created."""

    id: str = ""
    text: str = ""


@dataclass
class CreateTweetResponse:
    """Response to creating a tweet."""

    tweet: CreateTweetData | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CreateTweetResponse:
        tweet = data.get("data")
        if tweet is None:
            return cls()
        return cls(tweet=CreateTweetData(id=tweet.get("id", ""), text=tweet.get("text", "")))


@dataclass
class DeleteTweetData:
    """Whether the tweet was deleted."""

    deleted: bool = False


@dataclass
class DeleteTweetResponse:
    """Response to deleting a tweet."""

    tweet: DeleteTweetData | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeleteTweetResponse:
        tweet = data.get("data")
        if tweet is None:
            return cls()
        return cls(tweet=DeleteTweetData(deleted=tweet.get("deleted", False)))
"""Raw tweet responses, their includes and tweet dictionaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tweetapi.errors import ErrorObj
from tweetapi.media import Media
from tweetapi.place import Place
from tweetapi.poll import Poll
from tweetapi.common import EntityMention
from tweetapi.tweet import Tweet, TweetReferencedTweet
from tweetapi.user import User


@dataclass
class TweetRawIncludes:
    """Objects expanded alongside the tweets of a response."""

    tweets: list[Tweet] = field(default_factory=list)
    users: list[User] = field(default_factory=list)
    places: list[Place] = field(default_factory=list)
    media: list[Media] = field(default_factory=list)
    polls: list[Poll] = field(default_factory=list)
    _user_ids: dict[str, User] | None = field(default=None, init=False, repr=False, compare=False)
    _user_names: dict[str, User] | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _poll_ids: dict[str, Poll] | None = field(default=None, init=False, repr=False, compare=False)
    _media_keys: dict[str, Media] | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _place_ids: dict[str, Place] | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _tweet_ids: dict[str, Tweet] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetRawIncludes:
        return cls(
            tweets=[Tweet.from_dict(t) for t in data.get("tweets") or []],
            users=[User.from_dict(u) for u in data.get("users") or []],
            places=[Place.from_dict(p) for p in data.get("places") or []],
            media=[Media.from_dict(m) for m in data.get("media") or []],
            polls=[Poll.from_dict(p) for p in data.get("polls") or []],
        )

    def users_by_id(self) -> dict[str, User]:
        """Map of user id to user."""
        if self._user_ids is None:
            self._user_ids = {user.id: user for user in self.users}
        return self._user_ids

    def users_by_username(self) -> dict[str, User]:
        """Map of username to user."""
        if self._user_names is None:
            self._user_names = {user.username: user for user in self.users}
        return self._user_names

    def polls_by_id(self) -> dict[str, Poll]:
        """Map of poll id to poll."""
        if self._poll_ids is None:
            self._poll_ids = {poll.id: poll for poll in self.polls}
        return self._poll_ids

    def media_by_keys(self) -> dict[str, Media]:
        """Map of media key to media."""
        if self._media_keys is None:
            self._media_keys = {m.key: m for m in self.media}
        return self._media_keys

    def places_by_id(self) -> dict[str, Place]:
        """Map of place id to place."""
        if self._place_ids is None:
            self._place_ids = {place.id: place for place in self.places}
        return self._place_ids

    def tweets_by_id(self) -> dict[str, Tweet]:
        """Map of tweet id to included tweet."""
        if self._tweet_ids is None:
            self._tweet_ids = {tweet.id: tweet for tweet in self.tweets}
        return self._tweet_ids


@dataclass
class TweetMention:
    """A mention in a tweet and the user it names."""

    mention: EntityMention
    user: User


@dataclass
class TweetReference:
    """A referenced tweet and its dictionary."""

    reference: TweetReferencedTweet
    tweet_dictionary: TweetDictionary


@dataclass
class TweetDictionary:
    """A tweet together with the objects it references."""

    tweet: Tweet
    author: User | None = None
    in_reply_user: User | None = None
    place: Place | None = None
    attachment_polls: list[Poll] = field(default_factory=list)
    attachment_media: list[Media] = field(default_factory=list)
    mentions: list[TweetMention] = field(default_factory=list)
    referenced_tweets: list[TweetReference] = field(default_factory=list)


def create_tweet_dictionary(tweet: Tweet, includes: TweetRawIncludes | None) -> TweetDictionary:
    """Build the dictionary of a tweet from the includes of its response."""
    dictionary = TweetDictionary(tweet=tweet)
    if includes is None:
        return dictionary

    users = includes.users_by_id()
    dictionary.author = users.get(tweet.author_id)
    dictionary.in_reply_user = users.get(tweet.in_reply_to_user_id)

    if tweet.entities is not None:
        by_name = includes.users_by_username()
        dictionary.mentions = [
            TweetMention(mention=mention, user=by_name[mention.username])
            for mention in tweet.entities.mentions
            if mention.username in by_name
        ]

    if tweet.attachments is not None:
        polls = includes.polls_by_id()
        dictionary.attachment_polls = [
            polls[pid] for pid in tweet.attachments.poll_ids if pid in polls
        ]
        media = includes.media_by_keys()
        dictionary.attachment_media = [
            media[key] for key in tweet.attachments.media_keys if key in media
        ]

    if tweet.geo is not None:
        dictionary.place = includes.places_by_id().get(tweet.geo.place_id)

    tweets = includes.tweets_by_id()
    dictionary.referenced_tweets = [
        TweetReference(
            reference=ref,
            tweet_dictionary=create_tweet_dictionary(tweets[ref.id], includes),
        )
        for ref in tweet.referenced_tweets
        if ref.id in tweets
    ]
    return dictionary


@dataclass
class TweetRaw:
    """The raw tweets, includes and partial errors of a response."""

    tweets: list[Tweet] = field(default_factory=list)
    includes: TweetRawIncludes | None = None
    errors: list[ErrorObj] = field(default_factory=list)
    _dictionaries: dict[str, TweetDictionary] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @staticmethod
    def _parts(data: dict[str, Any]) -> tuple[TweetRawIncludes | None, list[ErrorObj]]:
        includes = data.get("includes")
        return (
            None if includes is None else TweetRawIncludes.from_dict(includes),
            [ErrorObj.from_dict(e) for e in data.get("errors") or []],
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetRaw:
        """Decode a response whose data is a list of tweets."""
        includes, errors = cls._parts(data)
        return cls(
            tweets=[Tweet.from_dict(t) for t in data.get("data") or []],
            includes=includes,
            errors=errors,
        )

    @classmethod
    def from_single(cls, data: dict[str, Any]) -> TweetRaw:
        """Decode a response whose data is a single tweet."""
        includes, errors = cls._parts(data)
        tweet = data.get("data")
        return cls(
            tweets=[] if tweet is None else [Tweet.from_dict(tweet)],
            includes=includes,
            errors=errors,
        )

    def tweet_dictionaries(self) -> dict[str, TweetDictionary]:
        """Map of tweet id to the tweet's dictionary."""
        if self._dictionaries is None:
            self._dictionaries = {
                tweet.id: create_tweet_dictionary(tweet, self.includes) for tweet in self.tweets
            }
        return self._dictionaries


@dataclass
class TweetLookupResponse:
    """Response of a tweet lookup."""

    raw: TweetRaw


@dataclass
class UserTimelineMeta:
    """Paging information of a timeline."""

    result_count: int = 0
    newest_id: str = ""
    oldest_id: str = ""
    next_token: str = ""
    previous_token: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserTimelineMeta:
        return cls(
            result_count=data.get("result_count", 0),
            newest_id=data.get("newest_id", ""),
            oldest_id=data.get("oldest_id", ""),
            next_token=data.get("next_token", ""),
            previous_token=data.get("previous_token", ""),
        )


@dataclass
class UserTweetTimelineResponse:
    """Response of a user's tweet timeline."""

    raw: TweetRaw
    meta: UserTimelineMeta | None = None


@dataclass
class UserMentionTimelineResponse:
    """Response of a user's mention timeline."""

    raw: TweetRaw
    meta: UserTimelineMeta | None = None
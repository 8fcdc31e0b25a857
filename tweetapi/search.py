"""Recent search options and results, and search stream filter rules."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from tweetapi.errors import ErrorObj, ParameterError
from tweetapi.fields import Expansion
from tweetapi.media import MediaField
from tweetapi.options import _field_params, _rfc3339
from tweetapi.place import PlaceField
from tweetapi.poll import PollField
from tweetapi.raw import TweetRaw
from tweetapi.tweet import TweetField
from tweetapi.user import UserField

_PARAM = "twitter input parameter error"


@dataclass
class TweetRecentSearchOpts:
    """Optional parameters of a recent search."""

    expansions: list[Expansion] = field(default_factory=list)
    media_fields: list[MediaField] = field(default_factory=list)
    place_fields: list[PlaceField] = field(default_factory=list)
    poll_fields: list[PollField] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None
    max_results: int = 0
    next_token: str = ""
    since_id: str = ""
    until_id: str = ""

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        params = _field_params(self)
        if self.start_time is not None:
            params["start_time"] = _rfc3339(self.start_time)
        if self.end_time is not None:
            params["end_time"] = _rfc3339(self.end_time)
        if self.max_results > 0:
            params["max_results"] = str(self.max_results)
        if self.next_token:
            params["next_token"] = self.next_token
        if self.since_id:
            params["since_id"] = self.since_id
        if self.until_id:
            params["until_id"] = self.until_id
        return params


@dataclass
class TweetRecentSearchMeta:
    """Paging information of a recent search."""

    newest_id: str = ""
    oldest_id: str = ""
    result_count: int = 0
    next_token: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetRecentSearchMeta:
        return cls(
            newest_id=data.get("newest_id", ""),
            oldest_id=data.get("oldest_id", ""),
            result_count=data.get("result_count", 0),
            next_token=data.get("next_token", ""),
        )


@dataclass
class TweetRecentSearchResponse:
    """Response of a recent search."""

    raw: TweetRaw = field(default_factory=TweetRaw)
    meta: TweetRecentSearchMeta = field(default_factory=TweetRecentSearchMeta)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetRecentSearchResponse:
        return cls(
            raw=TweetRaw.from_dict(data),
            meta=TweetRecentSearchMeta.from_dict(data.get("meta") or {}),
        )


@dataclass
class TweetSearchStreamRule:
    """A filter rule of the search stream."""

    value: str = ""
    tag: str = ""

    def validate(self) -> None:
        """Raise ParameterError if the rule has no value."""
        if not self.value:
            raise ParameterError(f"tweet search stream rule value is required: {_PARAM}")

    def to_dict(self) -> dict[str, Any]:
        """JSON form of the rule; the tag is left out when empty."""
        body: dict[str, Any] = {"value": self.value}
        if self.tag:
            body["tag"] = self.tag
        return body


def validate_rules(rules: Iterable[TweetSearchStreamRule]) -> None:
    """Validate every rule, raising on the first invalid one."""
    for rule in rules:
        rule.validate()


def validate_rule_ids(rule_ids: Iterable[str]) -> None:
    """Raise ParameterError if any rule id is empty."""
    for rule_id in rule_ids:
        if not rule_id:
            raise ParameterError(f"tweet search rule id is required: {_PARAM}")


@dataclass
class TweetSearchStreamRuleEntity(TweetSearchStreamRule):
    """A filter rule together with its id."""

    id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetSearchStreamRuleEntity:
        return cls(
            value=data.get("value", ""),
            tag=data.get("tag", ""),
            id=data.get("id", ""),
        )


@dataclass
class TweetSearchStreamRuleSummary:
    """Counts of rules created and deleted."""

    created: int = 0
    not_created: int = 0
    deleted: int = 0
    not_deleted: int = 0


@dataclass
class TweetSearchStreamRuleMeta:
    """Meta data of a rules request."""

    sent: datetime | None = None
    summary: TweetSearchStreamRuleSummary = field(default_factory=TweetSearchStreamRuleSummary)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetSearchStreamRuleMeta:
        sent = data.get("sent")
        summary = data.get("summary") or {}
        return cls(
            sent=None if not sent else datetime.fromisoformat(sent),
            summary=TweetSearchStreamRuleSummary(
                created=summary.get("created", 0),
                not_created=summary.get("not_created", 0),
                deleted=summary.get("deleted", 0),
                not_deleted=summary.get("not_deleted", 0),
            ),
        )


def _meta(data: dict[str, Any]) -> TweetSearchStreamRuleMeta | None:
    meta = data.get("meta")
    return None if meta is None else TweetSearchStreamRuleMeta.from_dict(meta)


def _rules(data: dict[str, Any]) -> list[TweetSearchStreamRuleEntity]:
    return [TweetSearchStreamRuleEntity.from_dict(r) for r in data.get("data") or []]


def _errors(data: dict[str, Any]) -> list[ErrorObj]:
    return [ErrorObj.from_dict(e) for e in data.get("errors") or []]


@dataclass
class TweetSearchStreamRulesResponse:
    """The rules active on the search stream."""

    rules: list[TweetSearchStreamRuleEntity] = field(default_factory=list)
    meta: TweetSearchStreamRuleMeta | None = None
    errors: list[ErrorObj] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetSearchStreamRulesResponse:
        return cls(rules=_rules(data), meta=_meta(data), errors=_errors(data))


@dataclass
class TweetSearchStreamAddRuleResponse:
    """Response of adding rules."""

    rules: list[TweetSearchStreamRuleEntity] = field(default_factory=list)
    meta: TweetSearchStreamRuleMeta | None = None
    errors: list[ErrorObj] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetSearchStreamAddRuleResponse:
        return cls(rules=_rules(data), meta=_meta(data), errors=_errors(data))


@dataclass
class TweetSearchStreamDeleteRuleResponse:
    """Response of deleting rules."""

    meta: TweetSearchStreamRuleMeta | None = None
    errors: list[ErrorObj] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TweetSearchStreamDeleteRuleResponse:
        return cls(meta=_meta(data), errors=_errors(data))
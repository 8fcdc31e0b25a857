"""List objects, list lookup options and list management."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from tweetapi.errors import ErrorObj
from tweetapi.fields import Expansion, join_values
from tweetapi.raw import TweetRaw
from tweetapi.tweet import TweetField
from tweetapi.user import User, UserField


class ListField(StrEnum):
    """Fields that can be requested on list objects."""

    CREATED_AT = "created_at"
    FOLLOWER_COUNT = "follower_count"
    MEMBER_COUNT = "member_count"
    PRIVATE = "private"
    DESCRIPTION = "description"
    OWNER_ID = "owner_id"


@dataclass
class ListObj:
    """Metadata of a list."""

    id: str = ""
    name: str = ""
    created_at: str = ""
    description: str = ""
    follower_count: int = 0
    member_count: int = 0
    private: bool = False
    owner_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListObj:
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            created_at=data.get("created_at", ""),
            description=data.get("description", ""),
            follower_count=data.get("follower_count", 0),
            member_count=data.get("member_count", 0),
            private=data.get("private", False),
            owner_id=data.get("owner_id", ""),
        )


@dataclass
class ListRawIncludes:
    """Objects expanded alongside lists."""

    users: list[User] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListRawIncludes:
        return cls(users=[User.from_dict(u) for u in data.get("users") or []])


def _includes(data: dict[str, Any]) -> ListRawIncludes | None:
    includes = data.get("includes")
    return None if includes is None else ListRawIncludes.from_dict(includes)


def _errors(data: dict[str, Any]) -> list[ErrorObj]:
    return [ErrorObj.from_dict(e) for e in data.get("errors") or []]


def _params(
    expansions: list[Expansion],
    fields: tuple[tuple[str, list[Any]], ...],
    max_results: int = 0,
    pagination_token: str = "",
) -> dict[str, str]:
    params: dict[str, str] = {}
    if expansions:
        params["expansions"] = join_values(expansions)
    for key, values in fields:
        if values:
            params[key] = join_values(values)
    if max_results > 0:
        params["max_results"] = str(max_results)
    if pagination_token:
        params["pagination_token"] = pagination_token
    return params


@dataclass
class ListRaw:
    """Raw response of a list lookup."""

    list: ListObj | None = None
    includes: ListRawIncludes | None = None
    errors: list[ErrorObj] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListRaw:
        obj = data.get("data")
        return cls(
            list=None if obj is None else ListObj.from_dict(obj),
            includes=_includes(data),
            errors=_errors(data),
        )


@dataclass
class ListLookupOpts:
    """Optional parameters of a list lookup."""

    expansions: list[Expansion] = field(default_factory=list)
    list_fields: list[ListField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _params(
            self.expansions,
            (("list.fields", self.list_fields), ("user.fields", self.user_fields)),
        )


@dataclass
class ListLookupResponse:
    """Response of a list lookup."""

    raw: ListRaw


@dataclass
class UserListLookupOpts:
    """Optional parameters of a user's owned lists lookup."""

    expansions: list[Expansion] = field(default_factory=list)
    list_fields: list[ListField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    max_results: int = 0
    pagination_token: str = ""

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _params(
            self.expansions,
            (("list.fields", self.list_fields), ("user.fields", self.user_fields)),
            self.max_results,
            self.pagination_token,
        )


@dataclass
class UserListRaw:
    """Raw response of a user's owned lists."""

    lists: list[ListObj] = field(default_factory=list)
    includes: ListRawIncludes | None = None
    errors: list[ErrorObj] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserListRaw:
        return cls(
            lists=[ListObj.from_dict(item) for item in data.get("data") or []],
            includes=_includes(data),
            errors=_errors(data),
        )


@dataclass
class UserListLookupMeta:
    """Paging information of a user's owned lists."""

    result_count: int = 0
    previous_token: str = ""
    next_token: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserListLookupMeta:
        return cls(
            result_count=data.get("result_count", 0),
            previous_token=data.get("previous_token", ""),
            next_token=data.get("next_token", ""),
        )


@dataclass
class UserListLookupResponse:
    """Response of a user's owned lists lookup."""

    raw: UserListRaw
    meta: UserListLookupMeta | None = None


@dataclass
class ListTweetLookupOpts:
    """Optional parameters of a list's tweets lookup."""

    expansions: list[Expansion] = field(default_factory=list)
    tweet_fields: list[TweetField] = field(default_factory=list)
    user_fields: list[UserField] = field(default_factory=list)
    max_results: int = 0
    pagination_token: str = ""

    def query_params(self) -> dict[str, str]:
        """Query parameters for the set options."""
        return _params(
            self.expansions,
            (("tweet.fields", self.tweet_fields), ("user.fields", self.user_fields)),
            self.max_results,
            self.pagination_token,
        )


@dataclass
class ListTweetLookupMeta:
    """Paging information of a list's tweets."""

    result_count: int = 0
    previous_token: str = ""
    next_token: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListTweetLookupMeta:
        return cls(
            result_count=data.get("result_count", 0),
            previous_token=data.get("previous_token", ""),
            next_token=data.get("next_token", ""),
        )


@dataclass
class ListTweetLookupResponse:
    """Response of a list's tweets lookup."""

    raw: TweetRaw
    meta: ListTweetLookupMeta | None = None


@dataclass
class ListMetaData:
    """Name, description and privacy of a list to create or update."""

    name: str | None = None
    description: str | None = None
    private: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON body; unset values are sent as null."""
        return {"name": self.name, "description": self.description, "private": self.private}


@dataclass
class ListCreateData:
    """The list created."""

    id: str = ""
    name: str = ""


@dataclass
class ListCreateResponse:
    """Response to creating a list."""

    list: ListCreateData | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListCreateResponse:
        obj = data.get("data")
        if obj is None:
            return cls()
        return cls(list=ListCreateData(id=obj.get("id", ""), name=obj.get("name", "")))


@dataclass
class ListUpdateData:
    """Whether the list was updated."""

    updated: bool = False


@dataclass
class ListUpdateResponse:
    """Response to updating a list."""

    list: ListUpdateData | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListUpdateResponse:
        obj = data.get("data")
        if obj is None:
            return cls()
        return cls(list=ListUpdateData(updated=obj.get("updated", False)))


@dataclass
class ListDeleteData:
    """Whether the list was deleted."""

    deleted: bool = False


@dataclass
class ListDeleteResponse:
    """Response to deleting a list."""

    list: ListDeleteData | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListDeleteResponse:
        obj = data.get("data")
        if obj is None:
            return cls()
        return cls(list=ListDeleteData(deleted=obj.get("deleted", False)))
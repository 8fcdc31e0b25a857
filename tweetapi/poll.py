"""Poll objects included in tweets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class PollField(StrEnum):
    """Fields that can be requested on poll objects."""

    DURATION_MINUTES = "duration_minutes"
    END_DATETIME = "end_datetime"
    ID = "id"
    OPTIONS = "options"
    VOTING_STATUS = "voting_status"


@dataclass
class PollOption:
    """One choice in a poll."""

    position: int = 0
    label: str = ""
    votes: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PollOption:
        return cls(
            position=data.get("position", 0),
            label=data.get("label", ""),
            votes=data.get("votes", 0),
        )


@dataclass
class Poll:
    """A poll included in a tweet."""

    id: str = ""
    options: list[PollOption] = field(default_factory=list)
    duration_minutes: int = 0
    end_datetime: str = ""
    voting_status: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Poll:
        return cls(
            id=data.get("id", ""),
            options=[PollOption.from_dict(o) for o in data.get("options") or []],
            duration_minutes=data.get("duration_minutes", 0),
            end_datetime=data.get("end_datetime", ""),
            voting_status=data.get("voting_status", ""),
        )
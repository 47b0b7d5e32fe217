#------------------------------------------------------------
#                          models.py
#      Defines dataclasses for events, typed payloads,
#                    and runtime settings.

from dataclasses import dataclass
from typing import Any, Optional, Union
from .config import DEFAULT_ACTIVITY_WINDOW, GITHUB_REQUEST_TIMEOUT_SECONDS

@dataclass(frozen=True)
class Event:
    type: str
    repo_name: str
    payload: Any = None

    # This function does build an event from one decoded API record.
    # A null record becomes an empty event; other shapes raise ValueError.
    @classmethod
    def from_api(cls, record: Any) -> "Event":
        if record is None:
            return cls(type="", repo_name="")
        if not isinstance(record, dict):
            raise ValueError(f"event record must be an object, got {type(record).__name__}")

        event_type = record.get("type")
        if event_type is None:
            event_type = ""
        if not isinstance(event_type, str):
            raise ValueError("event field 'type' must be a string")

        repo = record.get("repo")
        if repo is None:
            repo = {}
        if not isinstance(repo, dict):
            raise ValueError("event field 'repo' must be an object")

        repo_name = repo.get("name")
        if repo_name is None:
            repo_name = ""
        if not isinstance(repo_name, str):
            raise ValueError("event field 'repo.name' must be a string")

        return cls(type=event_type, repo_name=repo_name, payload=record.get("payload"))

@dataclass(frozen=True)
class PushPayload:
    size: int

@dataclass(frozen=True)
class IssuesPayload:
    action: str

@dataclass(frozen=True)
class WatchPayload:
    action: str

@dataclass(frozen=True)
class ForkPayload:
    forkee_url: str

@dataclass(frozen=True)
class CreatePayload:
    ref_type: str

@dataclass(frozen=True)
class DeletePayload:
    ref_type: str

@dataclass(frozen=True)
class PullRequestPayload:
    action: str

@dataclass(frozen=True)
class UnknownPayload:
    pass

EventPayload = Union[
    PushPayload,
    IssuesPayload,
    WatchPayload,
    ForkPayload,
    CreatePayload,
    DeletePayload,
    PullRequestPayload,
    UnknownPayload,
]
DecodedPayload = Optional[EventPayload]

@dataclass
class ActivityConfig:
    username: str
    timeout_seconds: float = GITHUB_REQUEST_TIMEOUT_SECONDS
    window_size: int = DEFAULT_ACTIVITY_WINDOW

#------------------------------------------------------------
#                      event_service.py
#        Decodes typed event payloads and formats them
#                  into one-line descriptions.

from typing import Any, Callable, Dict, Optional
from ..config import (
    ACTION_OPENED,
    ACTION_STARTED,
    EVENT_TYPE_CREATE,
    EVENT_TYPE_DELETE,
    EVENT_TYPE_FORK,
    EVENT_TYPE_ISSUES,
    EVENT_TYPE_PULL_REQUEST,
    EVENT_TYPE_PUSH,
    EVENT_TYPE_WATCH,
    REF_TYPE_REPOSITORY,
)
from ..models import (
    CreatePayload,
    DecodedPayload,
    DeletePayload,
    Event,
    ForkPayload,
    IssuesPayload,
    PullRequestPayload,
    PushPayload,
    UnknownPayload,
    WatchPayload,
)

PUSH_MESSAGE_TEMPLATE = "Pushed {size} commits to {repo}"
ISSUE_OPENED_MESSAGE_TEMPLATE = "Opened a new issue in {repo}"
STARRED_MESSAGE_TEMPLATE = "Starred {repo}"
FORK_MESSAGE_TEMPLATE = "Forked {repo} to {forkee_url}"
REPOSITORY_CREATED_MESSAGE_TEMPLATE = "Created repository {repo}"
REPOSITORY_DELETED_MESSAGE_TEMPLATE = "Deleted repository {repo}"
PULL_REQUEST_OPENED_MESSAGE_TEMPLATE = "Opened a pull request in {repo}"

class PayloadDecodeError(ValueError):
    pass

def _string_field(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PayloadDecodeError(f"payload field {key!r} must be a string")
    return value

def _int_field(payload: Dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadDecodeError(f"payload field {key!r} must be an integer")
    return value

def _object_field(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PayloadDecodeError(f"payload field {key!r} must be an object")
    return value

def _decode_push(payload: Dict[str, Any]) -> PushPayload:
    return PushPayload(size=_int_field(payload, "size"))

def _decode_issues(payload: Dict[str, Any]) -> IssuesPayload:
    return IssuesPayload(action=_string_field(payload, "action"))

def _decode_watch(payload: Dict[str, Any]) -> WatchPayload:
    return WatchPayload(action=_string_field(payload, "action"))

def _decode_fork(payload: Dict[str, Any]) -> ForkPayload:
    forkee = _object_field(payload, "forkee")
    return ForkPayload(forkee_url=_string_field(forkee, "html_url"))

def _decode_create(payload: Dict[str, Any]) -> CreatePayload:
    return CreatePayload(ref_type=_string_field(payload, "ref_type"))

def _decode_delete(payload: Dict[str, Any]) -> DeletePayload:
    return DeletePayload(ref_type=_string_field(payload, "ref_type"))

def _decode_pull_request(payload: Dict[str, Any]) -> PullRequestPayload:
    return PullRequestPayload(action=_string_field(payload, "action"))

PAYLOAD_DECODERS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    EVENT_TYPE_PUSH: _decode_push,
    EVENT_TYPE_ISSUES: _decode_issues,
    EVENT_TYPE_WATCH: _decode_watch,
    EVENT_TYPE_FORK: _decode_fork,
    EVENT_TYPE_CREATE: _decode_create,
    EVENT_TYPE_DELETE: _decode_delete,
    EVENT_TYPE_PULL_REQUEST: _decode_pull_request,
}

# This function does decode the type-specific payload of an event.
# It returns UnknownPayload for unrecognized types and None when decoding fails.
def decode_payload(event: Event) -> DecodedPayload:
    decoder = PAYLOAD_DECODERS.get(event.type)
    if decoder is None:
        return UnknownPayload()
    if not isinstance(event.payload, dict):
        return None
    try:
        return decoder(event.payload)
    except PayloadDecodeError:
        return None

def _describe(payload: DecodedPayload, repo: str) -> Optional[str]:
    if isinstance(payload, PushPayload):
        return PUSH_MESSAGE_TEMPLATE.format(size=payload.size, repo=repo)
    if isinstance(payload, IssuesPayload) and payload.action == ACTION_OPENED:
        return ISSUE_OPENED_MESSAGE_TEMPLATE.format(repo=repo)
    if isinstance(payload, WatchPayload) and payload.action == ACTION_STARTED:
        return STARRED_MESSAGE_TEMPLATE.format(repo=repo)
    if isinstance(payload, ForkPayload):
        return FORK_MESSAGE_TEMPLATE.format(repo=repo, forkee_url=payload.forkee_url)
    if isinstance(payload, CreatePayload) and payload.ref_type == REF_TYPE_REPOSITORY:
        return REPOSITORY_CREATED_MESSAGE_TEMPLATE.format(repo=repo)
    if isinstance(payload, DeletePayload) and payload.ref_type == REF_TYPE_REPOSITORY:
        return REPOSITORY_DELETED_MESSAGE_TEMPLATE.format(repo=repo)
    if isinstance(payload, PullRequestPayload) and payload.action == ACTION_OPENED:
        return PULL_REQUEST_OPENED_MESSAGE_TEMPLATE.format(repo=repo)
    return None

# This function does format one event into a display line.
# It returns an empty string when the event has nothing to show.
def format_event(event: Event) -> str:
    return _describe(decode_payload(event), event.repo_name) or ""

"""Tests for payload decoding and event formatting."""

import pytest

from activity_cli.models import (
    CreatePayload,
    DeletePayload,
    Event,
    ForkPayload,
    IssuesPayload,
    PullRequestPayload,
    PushPayload,
    UnknownPayload,
    WatchPayload,
)
from activity_cli.services.event_service import decode_payload, format_event

REPO = "octocat/hello-world"


def _event(event_type, payload):
    return Event(type=event_type, repo_name=REPO, payload=payload)


@pytest.mark.parametrize("size", [0, 1, 3, 120])
def test_push_reports_commit_count(size):
    assert format_event(_event("PushEvent", {"size": size})) == f"Pushed {size} commits to {REPO}"


def test_push_without_size_reports_zero_commits():
    assert format_event(_event("PushEvent", {"ref": "refs/heads/main"})) == f"Pushed 0 commits to {REPO}"


@pytest.mark.parametrize("size", ["3", 1.5, True, [1]])
def test_push_with_malformed_size_is_suppressed(size):
    assert format_event(_event("PushEvent", {"size": size})) == ""


def test_opened_issue():
    assert format_event(_event("IssuesEvent", {"action": "opened"})) == f"Opened a new issue in {REPO}"


@pytest.mark.parametrize("action", ["closed", "reopened", "edited", ""])
def test_other_issue_actions_are_suppressed(action):
    assert format_event(_event("IssuesEvent", {"action": action})) == ""


def test_started_watch_is_a_star():
    assert format_event(_event("WatchEvent", {"action": "started"})) == f"Starred {REPO}"


@pytest.mark.parametrize("action", ["stopped", "Started", ""])
def test_other_watch_actions_are_suppressed(action):
    assert format_event(_event("WatchEvent", {"action": action})) == ""


def test_fork_reports_forkee_url():
    payload = {"forkee": {"html_url": "https://github.com/someone/hello-world", "id": 7}}
    assert format_event(_event("ForkEvent", payload)) == (
        f"Forked {REPO} to https://github.com/someone/hello-world"
    )


def test_fork_with_malformed_forkee_is_suppressed():
    assert format_event(_event("ForkEvent", {"forkee": "someone/hello-world"})) == ""


def test_created_repository():
    assert format_event(_event("CreateEvent", {"ref_type": "repository"})) == f"Created repository {REPO}"


@pytest.mark.parametrize("ref_type", ["branch", "tag"])
def test_created_branch_or_tag_is_suppressed(ref_type):
    assert format_event(_event("CreateEvent", {"ref_type": ref_type, "ref": "main"})) == ""


def test_deleted_repository():
    assert format_event(_event("DeleteEvent", {"ref_type": "repository"})) == f"Deleted repository {REPO}"


def test_deleted_branch_is_suppressed():
    assert format_event(_event("DeleteEvent", {"ref_type": "branch", "ref": "feature"})) == ""


def test_deleted_repository_with_malformed_payload_is_suppressed():
    assert format_event(_event("DeleteEvent", "repository")) == ""


def test_opened_pull_request():
    assert format_event(_event("PullRequestEvent", {"action": "opened", "number": 4})) == (
        f"Opened a pull request in {REPO}"
    )


def test_closed_pull_request_is_suppressed():
    assert format_event(_event("PullRequestEvent", {"action": "closed"})) == ""


@pytest.mark.parametrize(
    "event_type, payload",
    [
        ("GollumEvent", {"pages": []}),
        ("ReleaseEvent", {"action": "published"}),
        ("MemberEvent", {"action": "opened"}),
        ("", {"size": 3}),
        ("pushevent", {"size": 3}),
    ],
)
def test_unknown_event_types_are_suppressed(event_type, payload):
    assert format_event(_event(event_type, payload)) == ""


@pytest.mark.parametrize("payload", [None, [], "opened", 42])
def test_non_object_payloads_are_suppressed(payload):
    assert format_event(_event("IssuesEvent", payload)) == ""


@pytest.mark.parametrize(
    "event_type, payload, expected",
    [
        ("PushEvent", {"size": 2}, PushPayload(size=2)),
        ("IssuesEvent", {"action": "opened"}, IssuesPayload(action="opened")),
        ("WatchEvent", {}, WatchPayload(action="")),
        ("ForkEvent", {"forkee": {"html_url": "u"}}, ForkPayload(forkee_url="u")),
        ("CreateEvent", {"ref_type": "tag"}, CreatePayload(ref_type="tag")),
        ("DeleteEvent", {"ref_type": "branch"}, DeletePayload(ref_type="branch")),
        ("PullRequestEvent", {"action": "closed"}, PullRequestPayload(action="closed")),
        ("PublicEvent", {}, UnknownPayload()),
    ],
)
def test_decode_payload_returns_typed_variant(event_type, payload, expected):
    assert decode_payload(_event(event_type, payload)) == expected


def test_decode_payload_failure_returns_none():
    assert decode_payload(_event("CreateEvent", {"ref_type": 1})) is None

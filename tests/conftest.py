"""Test configuration and fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from verify_bot.config import BotConfig
from verify_bot.github_client.models import IssueEvent, WorkflowRun


def _payload(
    title: str = "Verify: Project v1.2.3",
    state: str = "open",
    milestone: str | None = "Project 1",
    assignees: list[str] | None = None,
    labels: list[str] | None = None,
    action: str = "reopened",
) -> dict[str, Any]:
    """Build an ``issues`` event payload shaped like GitHub's."""
    if assignees is None:
        assignees = ["josecorella"]
    if labels is None:
        labels = ["verify", "project1"]

    return {
        "action": action,
        "issue": {
            "number": 42,
            "title": title,
            "state": state,
            "milestone": {"title": milestone, "number": 3} if milestone else None,
            "assignees": [
                {"login": login, "id": i} for i, login in enumerate(assignees)
            ],
            "labels": [{"name": name, "color": "ededed"} for name in labels],
            "body": "Release checklist",
        },
        "organization": {"login": "test-org"},
        "repository": {
            "name": "test-repo",
            "owner": {"login": "test-org", "id": 99},
        },
        "sender": {"login": "someone"},
    }


def _event(**kwargs: Any) -> IssueEvent:
    return IssueEvent.model_validate(_payload(**kwargs))


def _run(
    head_branch: str = "v1.2.3",
    status: str = "completed",
    conclusion: str | None = "success",
    run_id: int = 1001,
) -> WorkflowRun:
    return WorkflowRun(
        id=run_id,
        run_number=7,
        workflow_id=555,
        head_branch=head_branch,
        status=status,
        conclusion=conclusion,
        html_url=f"https://github.com/test-org/test-repo/actions/runs/{run_id}",
    )


@pytest.fixture
def config() -> BotConfig:
    """Bot configuration with a fake token."""
    return BotConfig(token="fake-token")


@pytest.fixture
def event_file(tmp_path: Path) -> Path:
    """Write a clean verification event payload to disk."""
    path = tmp_path / "event.json"
    path.write_text(json.dumps(_payload()))
    return path


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    """Factory for raw event payloads."""
    return _payload


@pytest.fixture
def make_event() -> Callable[..., IssueEvent]:
    """Factory for parsed issue events."""
    return _event


@pytest.fixture
def make_run() -> Callable[..., WorkflowRun]:
    """Factory for workflow runs."""
    return _run

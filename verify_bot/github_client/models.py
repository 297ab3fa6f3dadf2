"""Pydantic models for GitHub data structures.

These models map to the parts of GitHub's webhook payloads and REST API
responses that the bot reads.
API Reference: https://docs.github.com/en/webhooks/webhook-events-and-payloads#issues
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")


class GitHubMilestone(BaseModel):
    """GitHub milestone model.

    Maps to GitHub REST API Milestone object.
    API Reference: https://docs.github.com/en/rest/issues/milestones
    """

    title: str = Field(..., description="Title of the milestone (string)")


class EventIssue(BaseModel):
    """Issue object embedded in an ``issues`` event payload."""

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    state: str = Field(..., description="Current state: 'open', 'closed' (string)")
    milestone: GitHubMilestone | None = Field(
        None, description="Milestone the issue belongs to, if any"
    )
    assignees: list[GitHubUser] = Field(
        default_factory=list, description="Users assigned to the issue, in order"
    )
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )


class EventOrganization(BaseModel):
    """Organization block of an event payload."""

    login: str = Field(..., description="Organization login (string)")


class EventRepository(BaseModel):
    """Repository block of an event payload."""

    name: str = Field(..., description="Repository name without owner (string)")
    owner: GitHubUser | None = Field(None, description="Repository owner account")


class IssueEvent(BaseModel):
    """Triggering ``issues`` event.

    Extra payload keys (sender, installation, ...) are ignored.
    """

    action: str = Field(..., description="Event action, e.g. 'opened', 'reopened'")
    issue: EventIssue = Field(..., description="Issue the event refers to")
    repository: EventRepository = Field(..., description="Repository of the issue")
    organization: EventOrganization | None = Field(
        None, description="Organization block, absent for user-owned repositories"
    )

    @property
    def owner(self) -> str:
        """Owner login used to address the repository."""
        if self.organization is not None:
            return self.organization.login
        if self.repository.owner is not None:
            return self.repository.owner.login
        raise ValueError("Event payload has neither an organization nor an owner")

    @property
    def repo(self) -> str:
        return self.repository.name

    @property
    def issue_number(self) -> int:
        return self.issue.number

    @classmethod
    def from_file(cls, path: Path) -> "IssueEvent":
        """Load an event from a JSON payload file."""
        with open(path, encoding="utf-8") as f:
            return cls.model_validate(json.load(f))


class WorkflowRun(BaseModel):
    """GitHub Actions workflow run.

    Maps to GitHub REST API Workflow Run object.
    API Reference: https://docs.github.com/en/rest/actions/workflow-runs
    """

    id: int = Field(..., description="Unique run identifier (integer)")
    run_number: int | None = Field(None, description="Per-workflow run number")
    workflow_id: int | None = Field(None, description="Identifier of the workflow")
    head_branch: str | None = Field(
        None, description="Branch or tag the run was triggered for"
    )
    status: str | None = Field(
        None, description="Run status: 'queued', 'in_progress', 'completed', ..."
    )
    conclusion: str | None = Field(
        None, description="Run conclusion: 'success', 'failure', ... (null if running)"
    )
    html_url: str = Field(..., description="Web URL of the run")

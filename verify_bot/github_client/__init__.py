"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import (
    EventIssue,
    GitHubLabel,
    GitHubMilestone,
    GitHubUser,
    IssueEvent,
    WorkflowRun,
)

__all__ = [
    "GitHubClient",
    "GitHubUser",
    "GitHubLabel",
    "GitHubMilestone",
    "EventIssue",
    "IssueEvent",
    "WorkflowRun",
]

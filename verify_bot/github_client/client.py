"""GitHub API client using PyGitHub."""

from collections.abc import Iterator
from typing import Any

from github import Github
from github.GithubException import UnknownObjectException
from github.Issue import Issue
from github.Repository import Repository
from github.WorkflowRun import WorkflowRun as GithubWorkflowRun
from rich.console import Console

from ..config import MAX_SCANNED_RUNS
from .models import WorkflowRun

console = Console()

ISSUE_STATES = ("open", "closed")


class GitHubClient:
    """GitHub API client for the issue and workflow-run calls the bot makes.

    Calls are issued one at a time and never retried; any API error
    propagates to the caller.
    """

    def __init__(self, token: str):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub token with issues:write and actions:read scopes.
        """
        if not token:
            raise ValueError("GitHub token is required.")

        self.token = token
        self.github = Github(self.token, per_page=MAX_SCANNED_RUNS)

    def _convert_workflow_run(self, run: GithubWorkflowRun) -> WorkflowRun:
        """Convert PyGitHub workflow run to our model."""
        return WorkflowRun(
            id=run.id,
            run_number=run.run_number,
            workflow_id=run.workflow_id,
            head_branch=run.head_branch,
            status=run.status,
            conclusion=run.conclusion,
            html_url=run.html_url,
        )

    def get_repository(self, org: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{org}/{repo}")
        except UnknownObjectException:
            raise ValueError(f"Repository {org}/{repo} not found")

    def _get_issue(self, org: str, repo: str, issue_number: int) -> Issue:
        repository = self.get_repository(org, repo)
        try:
            return repository.get_issue(issue_number)
        except UnknownObjectException:
            raise ValueError(f"Issue #{issue_number} not found in {org}/{repo}")

    def add_issue_comment(
        self, org: str, repo: str, issue_number: int, comment: str
    ) -> bool:
        """Add a comment to an issue.

        Args:
            org: Organization name
            repo: Repository name
            issue_number: Issue number
            comment: Markdown comment body

        Returns:
            True if successful

        Raises:
            ValueError: If repository or issue not found
            GithubException: For other API errors
        """
        github_issue = self._get_issue(org, repo, issue_number)
        github_issue.create_comment(comment)

        console.print(f"Added comment to issue #{issue_number}")
        return True

    def set_issue_state(
        self, org: str, repo: str, issue_number: int, state: str
    ) -> bool:
        """Set an issue's state to ``open`` or ``closed``.

        Raises:
            ValueError: If the state is invalid or the issue is not found
            GithubException: For other API errors
        """
        if state not in ISSUE_STATES:
            raise ValueError(
                f"Invalid issue state '{state}'. Expected one of: "
                f"{', '.join(ISSUE_STATES)}"
            )

        github_issue = self._get_issue(org, repo, issue_number)
        github_issue.edit(state=state)

        console.print(f"Set issue #{issue_number} state to {state}")
        return True

    def list_workflow_runs(
        self,
        org: str,
        repo: str,
        workflow_id: str,
        event: str,
        status: str | None = None,
    ) -> Iterator[WorkflowRun]:
        """List recorded runs of a workflow, most recent first.

        Pages are fetched lazily, so callers that stop early only pay for
        the pages they consume.

        Args:
            org: Organization name
            repo: Repository name
            workflow_id: Workflow file name (e.g. ``verify.yml``) or numeric id
            event: Trigger event type to filter by (e.g. ``release``)
            status: Optional run status to filter by

        Yields:
            WorkflowRun objects in the API's default order
        """
        repository = self.get_repository(org, repo)
        try:
            workflow = repository.get_workflow(workflow_id)
        except UnknownObjectException:
            raise ValueError(f"Workflow {workflow_id} not found in {org}/{repo}")

        filters: dict[str, Any] = {"event": event}
        if status is not None:
            filters["status"] = status

        for run in workflow.get_runs(**filters):
            yield self._convert_workflow_run(run)

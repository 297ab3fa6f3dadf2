"""Tests for the GitHub API client."""

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from github.GithubException import GithubException, UnknownObjectException

from verify_bot.github_client.client import GitHubClient
from verify_bot.github_client.models import WorkflowRun


@pytest.fixture
def mock_github() -> Iterator[MagicMock]:
    """Mock GitHub API client."""
    with patch("verify_bot.github_client.client.Github") as mock_github_class:
        mock_github = MagicMock()
        mock_github_class.return_value = mock_github
        yield mock_github


@pytest.fixture
def github_client(mock_github: MagicMock) -> GitHubClient:
    """GitHub client with mocked dependencies."""
    return GitHubClient("fake-token")


def _github_run(head_branch: str, run_id: int) -> MagicMock:
    run = MagicMock()
    run.id = run_id
    run.run_number = run_id - 1000
    run.workflow_id = 555
    run.head_branch = head_branch
    run.status = "completed"
    run.conclusion = "success"
    run.html_url = f"https://github.com/o/r/actions/runs/{run_id}"
    return run


class TestGitHubClientInit:
    """Test client construction."""

    def test_requires_token(self) -> None:
        """Test an empty token is rejected."""
        with pytest.raises(ValueError, match="GitHub token is required"):
            GitHubClient("")

    def test_authenticates_with_token(self) -> None:
        """Test the token is handed to PyGithub."""
        with patch("verify_bot.github_client.client.Github") as mock_github_class:
            GitHubClient("secret")

        mock_github_class.assert_called_once_with("secret", per_page=100)


class TestGitHubClientIssues:
    """Test issue comment and state methods."""

    def test_add_issue_comment_success(
        self, github_client: GitHubClient, mock_github: MagicMock
    ) -> None:
        """Test successful comment addition."""
        mock_repo = MagicMock()
        mock_issue = MagicMock()
        mock_github.get_repo.return_value = mock_repo
        mock_repo.get_issue.return_value = mock_issue

        result = github_client.add_issue_comment(
            "test-org", "test-repo", 123, "Test comment"
        )

        assert result is True
        mock_github.get_repo.assert_called_with("test-org/test-repo")
        mock_repo.get_issue.assert_called_with(123)
        mock_issue.create_comment.assert_called_once_with("Test comment")

    def test_add_issue_comment_issue_not_found(
        self, github_client: GitHubClient, mock_github: MagicMock
    ) -> None:
        """Test comment addition when issue not found."""
        mock_repo = MagicMock()
        mock_github.get_repo.return_value = mock_repo
        mock_repo.get_issue.side_effect = UnknownObjectException(404, "Not Found", {})

        with pytest.raises(ValueError, match="Issue #123 not found"):
            github_client.add_issue_comment(
                "test-org", "test-repo", 123, "Test comment"
            )

    def test_add_issue_comment_api_error_propagates(
        self, github_client: GitHubClient, mock_github: MagicMock
    ) -> None:
        """Test API errors are not retried."""
        mock_repo = MagicMock()
        mock_issue = MagicMock()
        mock_github.get_repo.return_value = mock_repo
        mock_repo.get_issue.return_value = mock_issue
        mock_issue.create_comment.side_effect = GithubException(500, "boom", {})

        with pytest.raises(GithubException):
            github_client.add_issue_comment("test-org", "test-repo", 123, "x")

        assert mock_issue.create_comment.call_count == 1

    @pytest.mark.parametrize("state", ["open", "closed"])
    def test_set_issue_state(
        self, github_client: GitHubClient, mock_github: MagicMock, state: str
    ) -> None:
        """Test issue state update."""
        mock_repo = MagicMock()
        mock_issue = MagicMock()
        mock_github.get_repo.return_value = mock_repo
        mock_repo.get_issue.return_value = mock_issue

        result = github_client.set_issue_state("test-org", "test-repo", 7, state)

        assert result is True
        mock_issue.edit.assert_called_once_with(state=state)

    def test_set_issue_state_invalid(
        self, github_client: GitHubClient, mock_github: MagicMock
    ) -> None:
        """Test an unknown state is rejected before calling the API."""
        with pytest.raises(ValueError, match="Invalid issue state"):
            github_client.set_issue_state("test-org", "test-repo", 7, "locked")

        mock_github.get_repo.assert_not_called()

    def test_repository_not_found(
        self, github_client: GitHubClient, mock_github: MagicMock
    ) -> None:
        """Test handling of repository not found."""
        mock_github.get_repo.side_effect = UnknownObjectException(404, "Not Found", {})

        with pytest.raises(ValueError, match="Repository test-org/test-repo not found"):
            github_client.set_issue_state("test-org", "test-repo", 7, "closed")


class TestGitHubClientWorkflowRuns:
    """Test workflow run listing."""

    def test_list_workflow_runs(
        self, github_client: GitHubClient, mock_github: MagicMock
    ) -> None:
        """Test runs are converted and filtered by event."""
        mock_repo = MagicMock()
        mock_workflow = MagicMock()
        mock_github.get_repo.return_value = mock_repo
        mock_repo.get_workflow.return_value = mock_workflow
        mock_workflow.get_runs.return_value = [
            _github_run("v1.2.3", 1001),
            _github_run("v1.2.2", 1002),
        ]

        runs = list(
            github_client.list_workflow_runs(
                "test-org", "test-repo", "verify.yml", event="release"
            )
        )

        mock_repo.get_workflow.assert_called_once_with("verify.yml")
        mock_workflow.get_runs.assert_called_once_with(event="release")
        assert all(isinstance(run, WorkflowRun) for run in runs)
        assert [run.head_branch for run in runs] == ["v1.2.3", "v1.2.2"]
        assert runs[0].html_url == "https://github.com/o/r/actions/runs/1001"
        assert runs[0].run_number == 1

    def test_list_workflow_runs_with_status(
        self, github_client: GitHubClient, mock_github: MagicMock
    ) -> None:
        """Test the optional status filter is passed through."""
        mock_repo = MagicMock()
        mock_workflow = MagicMock()
        mock_github.get_repo.return_value = mock_repo
        mock_repo.get_workflow.return_value = mock_workflow
        mock_workflow.get_runs.return_value = []

        runs = list(
            github_client.list_workflow_runs(
                "test-org", "test-repo", "verify.yml", "release", status="completed"
            )
        )

        assert runs == []
        mock_workflow.get_runs.assert_called_once_with(
            event="release", status="completed"
        )

    def test_list_workflow_runs_is_lazy(
        self, github_client: GitHubClient, mock_github: MagicMock
    ) -> None:
        """Test runs past the first consumed one are never converted."""
        mock_repo = MagicMock()
        mock_workflow = MagicMock()
        mock_github.get_repo.return_value = mock_repo
        mock_repo.get_workflow.return_value = mock_workflow

        consumed = []

        def runs() -> Iterator[MagicMock]:
            for i, branch in enumerate(["v1.0.0", "v0.9.0"]):
                consumed.append(branch)
                yield _github_run(branch, 2000 + i)

        mock_workflow.get_runs.return_value = runs()

        first = next(
            github_client.list_workflow_runs("o", "r", "verify.yml", "release")
        )

        assert first.head_branch == "v1.0.0"
        assert consumed == ["v1.0.0"]

    def test_list_workflow_runs_workflow_not_found(
        self, github_client: GitHubClient, mock_github: MagicMock
    ) -> None:
        """Test a missing workflow file."""
        mock_repo = MagicMock()
        mock_github.get_repo.return_value = mock_repo
        mock_repo.get_workflow.side_effect = UnknownObjectException(
            404, "Not Found", {}
        )

        with pytest.raises(ValueError, match="Workflow verify.yml not found"):
            list(github_client.list_workflow_runs("o", "r", "verify.yml", "release"))

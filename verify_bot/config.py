"""Configuration for the release verification bot."""

import os
from typing import Optional

REQUIRED_ASSIGNEE = "josecorella"
VERIFY_WORKFLOW = "verify.yml"
TRIGGER_EVENT = "release"
# Newest release runs searched for a matching tag; one API page
MAX_SCANNED_RUNS = 100


class BotConfig:
    """Configuration class for the verification bot."""

    def __init__(
        self,
        token: Optional[str] = None,
        assignee: str = REQUIRED_ASSIGNEE,
        workflow_id: str = VERIFY_WORKFLOW,
    ) -> None:
        """Initialize configuration, reading the token from the environment.

        The action input ``token`` is exposed by the runner as INPUT_TOKEN;
        GITHUB_TOKEN is used when running outside of an action.
        """
        self.token: Optional[str] = (
            token or os.getenv("INPUT_TOKEN") or os.getenv("GITHUB_TOKEN")
        )
        self.assignee = assignee
        self.workflow_id = workflow_id

    def is_configured(self) -> bool:
        """Check if a token is available."""
        return bool(self.token)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set the `token` action input "
                "or the GITHUB_TOKEN environment variable."
            )


class RunContext:
    """Identifiers of the workflow run hosting this invocation."""

    def __init__(self) -> None:
        self.workflow: str = os.getenv("GITHUB_WORKFLOW", "")
        self.job: str = os.getenv("GITHUB_JOB", "")
        self.run_id: str = os.getenv("GITHUB_RUN_ID", "")
        self.run_number: str = os.getenv("GITHUB_RUN_NUMBER", "")

    def describe(self) -> str:
        return (
            f"Workflow: {self.workflow}, Job: {self.job}, "
            f"Run ID: {self.run_id}, Run Number: {self.run_number}"
        )

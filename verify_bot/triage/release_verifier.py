"""Look up the verification workflow run for a release."""

import logging
from dataclasses import dataclass
from enum import Enum
from itertools import islice

from ..config import MAX_SCANNED_RUNS, TRIGGER_EVENT
from ..github_client.client import GitHubClient
from ..github_client.models import WorkflowRun

logger = logging.getLogger(__name__)


class ReleaseOutcome(str, Enum):
    """Result of matching a release against its workflow runs."""

    NOT_FOUND = "not_found"
    INCOMPLETE = "incomplete"
    FAILED = "failed"
    VERIFIED = "verified"


@dataclass(frozen=True)
class ReleaseCheck:
    """Outcome of a release verification and the run it was based on."""

    outcome: ReleaseOutcome
    release: str
    run: WorkflowRun | None = None

    @property
    def verified(self) -> bool:
        return self.outcome is ReleaseOutcome.VERIFIED


def classify_run(release: str, run: WorkflowRun | None) -> ReleaseCheck:
    """Apply the verification decision table to a matching run (or its absence)."""
    if run is None:
        return ReleaseCheck(ReleaseOutcome.NOT_FOUND, release)
    if run.status != "completed":
        return ReleaseCheck(ReleaseOutcome.INCOMPLETE, release, run)
    if run.conclusion != "success":
        return ReleaseCheck(ReleaseOutcome.FAILED, release, run)
    return ReleaseCheck(ReleaseOutcome.VERIFIED, release, run)


def verify_release(
    client: GitHubClient,
    org: str,
    repo: str,
    release: str,
    workflow_id: str,
    max_runs: int = MAX_SCANNED_RUNS,
) -> ReleaseCheck:
    """Find the most recent release-triggered run for ``release`` and classify it.

    Runs are scanned in the API's default order (newest first) and the
    first one whose head branch equals the release tag wins. Only the
    newest ``max_runs`` runs are considered.
    """
    found: WorkflowRun | None = None
    branches: list[str] = []

    runs = client.list_workflow_runs(org, repo, workflow_id, event=TRIGGER_EVENT)
    for run in islice(runs, max_runs):
        branches.append(run.head_branch or "")
        if run.head_branch == release:
            found = run
            break

    logger.info(
        "Scanned %d workflow runs: %s", len(branches), ", ".join(branches)
    )

    if found is None:
        logger.info("No workflow run found for the %s release.", release)
    else:
        logger.info("Found workflow run for the %s release.", release)
        logger.info(
            "Workflow: %s, Run ID: %s, Run Number: %s",
            found.workflow_id,
            found.id,
            found.run_number,
        )
        logger.info("Status: %s, Conclusion: %s", found.status, found.conclusion)
        logger.info("URL: %s", found.html_url)

    return classify_run(release, found)

"""Run a single issue event through the verification stages."""

import logging

from ..config import BotConfig
from ..github_client.client import GitHubClient
from ..github_client.models import IssueEvent
from .comment_generator import CommentGenerator, Decision
from .event_filter import should_process
from .metadata_validator import expected_metadata, validate_metadata
from .release_verifier import verify_release
from .title_parser import TitleFormatError, parse_title

logger = logging.getLogger(__name__)


def triage_issue(
    event: IssueEvent,
    client: GitHubClient,
    config: BotConfig,
    generator: CommentGenerator | None = None,
) -> Decision | None:
    """Decide what to tell the issue author and which state to leave it in.

    Returns None for events that are not verification requests. The only
    remote call made here is the workflow-run lookup, and only once the
    issue metadata is clean.
    """
    generator = generator or CommentGenerator()

    logger.info("Action: %s", event.action)

    if not should_process(event):
        return None

    try:
        parsed = parse_title(event.issue.title)
    except TitleFormatError as e:
        logger.info("%s", e)
        return generator.title_format_warning(e.title)

    logger.info("Parsed release %s (project %d)", parsed.release, parsed.project)

    expected = expected_metadata(parsed, config.assignee)
    result = validate_metadata(event.issue, expected)
    if not result.clean:
        return generator.metadata_warning(result)

    check = verify_release(
        client, event.owner, event.repo, parsed.release, config.workflow_id
    )
    return generator.release_result(check)


def apply_decision(client: GitHubClient, event: IssueEvent, decision: Decision) -> None:
    """Post the comment, then set the issue state.

    The comment goes first so it is visible before anything reacts to
    the state change.
    """
    client.add_issue_comment(event.owner, event.repo, event.issue_number, decision.body)
    client.set_issue_state(event.owner, event.repo, event.issue_number, decision.state)

    logger.info("%s", decision.body)


def run_triage(
    event: IssueEvent, client: GitHubClient, config: BotConfig
) -> Decision | None:
    """Triage an event and apply the resulting decision, if any."""
    decision = triage_issue(event, client, config)
    if decision is not None:
        apply_decision(client, event, decision)
    return decision

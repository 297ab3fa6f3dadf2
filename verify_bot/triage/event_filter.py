"""Decide whether an issue event is a release verification request."""

import logging

from ..github_client.models import IssueEvent

logger = logging.getLogger(__name__)

TITLE_PREFIX = "Verify: Project"


def should_process(event: IssueEvent) -> bool:
    """Return True when the event concerns an open verification issue."""
    if event.issue.state != "open":
        logger.info("This is not an open issue.")
        return False

    if not event.issue.title.startswith(TITLE_PREFIX):
        logger.info("This does not appear to be a project verification issue.")
        return False

    return True

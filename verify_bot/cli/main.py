"""Main CLI entry point."""

import logging
import os
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..config import BotConfig, RunContext
from ..github_client.client import GitHubClient
from ..github_client.models import IssueEvent
from ..triage.pipeline import run_triage

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="verify-bot",
    help="Release verification triage for GitHub issues",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)


def _resolve_event_path(event_path: Path | None) -> Path:
    if event_path is not None:
        return event_path
    env_path = os.getenv("GITHUB_EVENT_PATH")
    if not env_path:
        raise ValueError(
            "No event payload. Pass --event-path or run inside GitHub Actions "
            "(GITHUB_EVENT_PATH)."
        )
    return Path(env_path)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def run(
    event_path: Path | None = typer.Option(
        None,
        "--event-path",
        "-e",
        help="Path to the issue event JSON (defaults to $GITHUB_EVENT_PATH)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Validate a release verification issue and record the result on it.

    Validation failures are reported on the issue and still exit 0; only
    unexpected errors (bad payload, API failures) fail the run.
    """
    _configure_logging(verbose)

    try:
        config = BotConfig()
        config.validate()

        event = IssueEvent.from_file(_resolve_event_path(event_path))
        client = GitHubClient(config.token or "")

        decision = run_triage(event, client, config)
    except Exception as e:
        logger.exception("Release verification failed")
        # GitHub Actions annotation, equivalent of core.setFailed
        console.print(
            f"::error::{e}", markup=False, highlight=False, soft_wrap=True
        )
        raise typer.Exit(1)

    if decision is None:
        console.print("Nothing to verify.")
    else:
        console.print(f"Issue left {decision.state}.")

    logger.info("Done. %s", RunContext().describe())


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from verify_bot import __version__

    console.print(f"Release Verify Bot v{__version__}")


if __name__ == "__main__":
    app()

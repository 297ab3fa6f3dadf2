"""Markdown comments and issue states for each triage outcome."""

from dataclasses import dataclass
from typing import Literal

from .metadata_validator import ValidationResult
from .release_verifier import ReleaseCheck, ReleaseOutcome

IssueState = Literal["open", "closed"]


@dataclass(frozen=True)
class Decision:
    """Comment to post and the state to leave the issue in."""

    body: str
    state: IssueState


class CommentGenerator:
    """Generates the GitHub comments posted on verification issues."""

    def title_format_warning(self, title: str) -> Decision:
        """Comment for a title that does not name a release."""
        body = (
            "## :warning: Warning\n\n"
            f" The issue title `{title}` is in an unexpected format. "
            "Please re-open this issue once fixed. (All other checks skipped.)"
        )
        return Decision(body=body, state="closed")

    def metadata_warning(self, result: ValidationResult) -> Decision:
        """Comment listing every metadata problem.

        Args:
            result: Validation result with at least one message

        Returns:
            Decision closing the issue
        """
        if result.clean:
            raise ValueError("Cannot build a warning for a clean validation result")

        lines = []
        lines.append("## :warning: Warning")
        lines.append("")
        lines.append(" **One or more issues detected!**")
        lines.append("")
        for message in result.messages:
            lines.append(f"  - {message}")
        lines.append("")
        lines.append("Please re-open this issue once all of the above is fixed.")

        return Decision(body="\n".join(lines), state="closed")

    def release_result(self, check: ReleaseCheck) -> Decision:
        """Comment for the outcome of the workflow-run lookup."""
        release = check.release

        if check.outcome is ReleaseOutcome.NOT_FOUND:
            return self._not_verified(
                f"Unable to find a workflow run that matches the `{release}` release."
            )

        # Every other outcome carries the matching run
        assert check.run is not None
        url = check.run.html_url

        if check.outcome is ReleaseOutcome.INCOMPLETE:
            return self._not_verified(
                f"The [workflow run]({url}) for `{release}` did not complete."
            )
        if check.outcome is ReleaseOutcome.FAILED:
            return self._not_verified(
                f"The [workflow run]({url}) for `{release}` was not successful."
            )

        body = (
            "## :tada: Release Verified!\n\n"
            f"Identified [passing workflow run]({url}) for the `{release}` release."
        )
        return Decision(body=body, state="open")

    def _not_verified(self, detail: str) -> Decision:
        return Decision(
            body=f"## :stop_sign: Release Not Verified\n\n{detail}", state="closed"
        )

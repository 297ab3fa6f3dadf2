"""Check an issue's milestone, assignee and labels against the naming convention."""

from dataclasses import dataclass

from ..github_client.models import EventIssue
from .title_parser import ParsedTitle

VERIFY_LABEL = "verify"


@dataclass(frozen=True)
class ExpectedMetadata:
    """Milestone, assignee and labels a verification issue must carry."""

    milestone: str
    assignee: str
    labels: tuple[str, ...]


@dataclass(frozen=True)
class ValidationResult:
    """Problems found on an issue, in the order they were detected."""

    messages: tuple[str, ...] = ()

    @property
    def clean(self) -> bool:
        return not self.messages


def expected_metadata(parsed: ParsedTitle, assignee: str) -> ExpectedMetadata:
    """Derive the expected metadata for the project named in the title."""
    return ExpectedMetadata(
        milestone=f"Project {parsed.project}",
        assignee=assignee,
        labels=(VERIFY_LABEL, f"project{parsed.project}"),
    )


def check_milestone(issue: EventIssue, expected: ExpectedMetadata) -> list[str]:
    if issue.milestone is None or issue.milestone.title != expected.milestone:
        return [f"The issue is missing the `{expected.milestone}` milestone."]
    return []


def check_assignees(issue: EventIssue, expected: ExpectedMetadata) -> list[str]:
    assignee = expected.assignee

    if len(issue.assignees) < 1:
        return [f"Please assign `{assignee}` to this issue."]

    if len(issue.assignees) > 1:
        return [
            "There should be only 1 assignee. Please remove all assignees "
            f"except for `{assignee}` from this issue."
        ]

    actual = issue.assignees[0].login
    if actual != assignee:
        return [
            "This issue is not assigned correctly. Please remove assignee "
            f"`{actual}` and add `{assignee}` instead."
        ]

    return []


def check_labels(issue: EventIssue, expected: ExpectedMetadata) -> list[str]:
    """Report labels that are present but unexpected, then expected but missing."""
    # dict.fromkeys keeps first-seen order while dropping duplicates
    present = list(dict.fromkeys(label.name for label in issue.labels))
    wanted = set(expected.labels)
    present_set = set(present)

    unexpected = [name for name in present if name not in wanted]
    missing = [
        name for name in dict.fromkeys(expected.labels) if name not in present_set
    ]

    messages = [
        f"The label `{name}` is unexpected. Please remove." for name in unexpected
    ]
    messages.extend(
        f"The label `{name}` is missing. Please add this label." for name in missing
    )
    return messages


def validate_metadata(
    issue: EventIssue, expected: ExpectedMetadata
) -> ValidationResult:
    """Run every metadata check and collect all problems."""
    messages = [
        *check_milestone(issue, expected),
        *check_assignees(issue, expected),
        *check_labels(issue, expected),
    ]
    return ValidationResult(messages=tuple(messages))

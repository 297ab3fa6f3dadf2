"""Parse release and project identifiers out of verification issue titles."""

import re
from dataclasses import dataclass

TITLE_PATTERN = re.compile(
    r"Verify: Project (?P<release>v(?P<major>\d)\.(?P<minor>\d+)\.(?P<patch>\d+))",
    re.ASCII,
)


class TitleFormatError(ValueError):
    """Raised when an issue title does not name a release to verify."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Unexpected issue title format: {title!r}")


@dataclass(frozen=True)
class ParsedTitle:
    """Release named by a verification issue title.

    The project number is the release's major version digit.
    """

    release: str
    major: int
    minor: int
    patch: int

    @property
    def project(self) -> int:
        return self.major


def parse_title(title: str) -> ParsedTitle:
    """Parse ``Verify: Project vMAJOR.MINOR.PATCH`` from the start of a title.

    Trailing text after the version is allowed.

    Raises:
        TitleFormatError: If the title does not start with the pattern
    """
    match = TITLE_PATTERN.match(title)
    if match is None:
        raise TitleFormatError(title)

    return ParsedTitle(
        release=match.group("release"),
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
    )

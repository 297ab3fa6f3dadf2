"""Validation and decision stages for release verification issues."""

from .comment_generator import CommentGenerator, Decision
from .event_filter import TITLE_PREFIX, should_process
from .metadata_validator import (
    ExpectedMetadata,
    ValidationResult,
    expected_metadata,
    validate_metadata,
)
from .pipeline import apply_decision, run_triage, triage_issue
from .release_verifier import ReleaseCheck, ReleaseOutcome, verify_release
from .title_parser import ParsedTitle, TitleFormatError, parse_title

__all__ = [
    "CommentGenerator",
    "Decision",
    "ExpectedMetadata",
    "ParsedTitle",
    "ReleaseCheck",
    "ReleaseOutcome",
    "TITLE_PREFIX",
    "TitleFormatError",
    "ValidationResult",
    "apply_decision",
    "expected_metadata",
    "parse_title",
    "run_triage",
    "should_process",
    "triage_issue",
    "validate_metadata",
    "verify_release",
]

"""Custom exceptions for the form context."""

from dataclasses import dataclass
from typing import Optional


class JobIntakeError(Exception):
    """Base class for errors raised while preparing or submitting a job posting."""


class DocumentRejectedError(JobIntakeError, ValueError):
    """
    Exception raised when a job description is outside the accepted length.

    Raised at the input boundary, before the extractor runs.

    Attributes:
        length: Length of the rejected document
        min_length: Minimum accepted length
        max_length: Maximum accepted length
    """

    def __init__(self, length: int, min_length: int, max_length: int):
        self.length = length
        self.min_length = min_length
        self.max_length = max_length

        if length < min_length:
            message = (
                f"Please enter a more detailed job description "
                f"(at least {min_length} characters, got {length})"
            )
        else:
            message = (
                f"Job description is too long "
                f"(at most {max_length} characters, got {length})"
            )
        super().__init__(message)


class AnalysisInProgressError(JobIntakeError):
    """Exception raised when a form is asked to analyze while an analysis is running."""


@dataclass(frozen=True)
class Violation:
    """
    One failed submission rule.

    Attributes:
        field: Form field the rule concerns ("document" for the description itself)
        code: Stable machine-readable rule identifier
        message: Human-readable explanation
    """

    field: str
    code: str
    message: str


class ValidationError(JobIntakeError):
    """
    Exception raised when a form fails submission checks.

    Carries every violated rule so callers can surface all problems at once.

    Attributes:
        violations: All violations found, in rule order
    """

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)

        parts = [f"Job posting failed validation ({len(self.violations)} problem(s)):"]
        for violation in self.violations:
            parts.append(f"  - {violation.message}")

        super().__init__("\n".join(parts))

    @property
    def codes(self) -> list[str]:
        """Violation codes in rule order."""
        return [violation.code for violation in self.violations]


class UpstreamError(JobIntakeError):
    """
    Exception raised when the external job service fails.

    The cause is chained as __cause__; callers should present this as a
    generic, retryable failure.

    Attributes:
        message: Error description
        stage: Which service call failed ("create" or "process")
        job_id: Job identifier if creation succeeded before the failure
    """

    retryable = True

    def __init__(self, message: str, stage: str, job_id: Optional[str] = None):
        self.message = message
        self.stage = stage
        self.job_id = job_id
        super().__init__(message)

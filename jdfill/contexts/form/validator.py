"""
Submission validation for the job posting form.

check_submission() evaluates every rule and collects all violations;
validate_for_submission() raises them together as one ValidationError. Rules
never short-circuit, so the caller can show every problem at once.
"""

from typing import Optional

from jdfill.contexts.form.exceptions import ValidationError, Violation
from jdfill.contexts.form.form_state import JobForm
from jdfill.contexts.form.logger import log_validation_failure


def parse_whole_number(value) -> Optional[int]:
    """
    Interpret a form value as a whole number.

    Accepts ints and digit strings (surrounding whitespace allowed).
    Booleans, floats with a fractional part and other text are rejected.

    Returns:
        The integer, or None if value is not a whole number
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def check_submission(form: JobForm) -> list[Violation]:
    """
    Evaluate every submission rule against the form.

    Args:
        form: Form to check

    Returns:
        All violations in rule order (empty list when the form is valid)
    """
    violations = []
    min_length = form.config.document.min_length
    max_length = form.config.document.max_length

    document = (form.document or "").strip()
    if len(document) < min_length:
        violations.append(
            Violation(
                "document",
                "document_too_short",
                f"A detailed job description is required (at least {min_length} characters)",
            )
        )
    elif len(form.document) > max_length:
        violations.append(
            Violation(
                "document",
                "document_too_long",
                f"Job description must be at most {max_length} characters",
            )
        )

    if _is_blank(form.value("title")):
        violations.append(Violation("title", "title_missing", "Job title is required"))

    skills = form.value("skills") or []
    if not [s for s in skills if not _is_blank(s)]:
        violations.append(Violation("skills", "skills_missing", "At least one skill is required"))

    if _is_blank(form.value("location")):
        violations.append(Violation("location", "location_missing", "Location is required"))

    intake = parse_whole_number(form.value("intake"))
    if intake is None or intake < 1:
        violations.append(
            Violation("intake", "intake_invalid", "Intake capacity must be at least 1")
        )

    stipend = form.value("stipend")
    if not _is_blank(stipend):
        amount = parse_whole_number(stipend)
        if amount is None or amount < 0:
            violations.append(
                Violation(
                    "stipend",
                    "stipend_invalid",
                    "Stipend must be a non-negative whole number",
                )
            )

    return violations


def validate_for_submission(form: JobForm) -> None:
    """
    Check the form and raise if anything is wrong.

    Raises:
        ValidationError: Listing every violated rule
    """
    violations = check_submission(form)
    if violations:
        log_validation_failure(violations)
        raise ValidationError(violations)

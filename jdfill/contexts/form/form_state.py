"""
Field provenance tracking for the job posting form.

Every form field carries a single provenance tag:

    unset --extraction--> ai-suggested --user edit--> user-confirmed
      |                                                    ^
      +------------------------user edit-------------------+

A user edit always wins and is never undone automatically. A later extraction
run refreshes unset and ai-suggested fields but leaves user-confirmed fields
alone, so manual corrections survive re-analysis.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from omegaconf import DictConfig

from jdfill.contexts.extraction.extractor import ExtractionResult, extract_job_fields
from jdfill.contexts.form.exceptions import AnalysisInProgressError, DocumentRejectedError
from jdfill.contexts.form.logger import _log_debug, _log_info, log_extraction_merge
from jdfill.utils.config import load_config

T = TypeVar("T")

FORM_FIELDS = ("title", "skills", "location", "intake", "stipend", "perks")


class Provenance(str, Enum):
    """Where a field's current value came from."""

    UNSET = "unset"
    AI_SUGGESTED = "ai-suggested"
    USER_CONFIRMED = "user-confirmed"


@dataclass
class FormField(Generic[T]):
    """
    A form value paired with its provenance.

    Mutate only through suggest() and confirm(); they are the two transitions
    of the provenance state machine.
    """

    value: T
    provenance: Provenance = Provenance.UNSET

    @property
    def is_confirmed(self) -> bool:
        return self.provenance is Provenance.USER_CONFIRMED

    @property
    def is_suggested(self) -> bool:
        return self.provenance is Provenance.AI_SUGGESTED

    def suggest(self, value: T) -> bool:
        """
        Offer a machine-inferred value.

        Returns:
            True if the value was taken, False if the field is user-confirmed
        """
        if self.is_confirmed:
            return False
        self.value = value
        self.provenance = Provenance.AI_SUGGESTED
        return True

    def confirm(self, value: T) -> None:
        """Record a user edit. Clearing a field is still a confirmation."""
        self.value = value
        self.provenance = Provenance.USER_CONFIRMED


def _empty_value(field_name: str):
    if field_name == "skills":
        return []
    if field_name in ("intake", "stipend"):
        return None
    return ""


class JobForm:
    """
    In-progress job posting form for a single submission session.

    Holds the pasted job description and one FormField per job attribute.
    Not safe for concurrent use; create one instance per submission.

    Example:
        form = JobForm()
        form.set_document(jd_text)
        form.analyze()
        form.user_edit("location", "Pune")
    """

    def __init__(self, config: Optional[DictConfig] = None):
        self.config = config if config is not None else load_config()
        self.document = ""
        self.has_analyzed = False
        self._analyzing = False
        self.fields: dict[str, FormField] = {
            name: FormField(_empty_value(name)) for name in FORM_FIELDS
        }

    # =========================================================================
    # DOCUMENT AND ANALYSIS
    # =========================================================================

    def set_document(self, text: str) -> None:
        """Replace the job description. Field values are kept; the analyzed flag is cleared."""
        self.document = text
        self.has_analyzed = False

    def check_document_length(self) -> None:
        """
        Enforce the input boundary on the current document.

        Raises:
            DocumentRejectedError: If the length is outside the configured bounds
        """
        min_length = self.config.document.min_length
        max_length = self.config.document.max_length
        length = len(self.document)
        if length < min_length or length > max_length:
            raise DocumentRejectedError(length, min_length, max_length)

    def analyze(
        self, extractor: Callable[[str], ExtractionResult] = extract_job_fields
    ) -> ExtractionResult:
        """
        Run extraction on the current document and merge the result.

        The document is length-checked first; a rejected document never
        reaches the extractor. Only one analysis may run per form at a time.

        Args:
            extractor: Extraction callable (e.g., a latency-wrapped engine)

        Returns:
            The ExtractionResult that was merged

        Raises:
            DocumentRejectedError: If the document is too short or too long
            AnalysisInProgressError: If an analysis is already running on this form
        """
        if self._analyzing:
            raise AnalysisInProgressError("An analysis is already running for this form")

        self.check_document_length()

        self._analyzing = True
        try:
            result = extractor(self.document)
            self.apply_extraction(result)
            self.has_analyzed = True
        finally:
            self._analyzing = False

        return result

    def apply_extraction(self, result: ExtractionResult) -> list[str]:
        """
        Merge an extraction result into the form.

        Each present field is written as ai-suggested unless the user has
        confirmed it. Absent fields are left untouched whatever their state.
        Applying the same result twice is the same as applying it once.

        Args:
            result: Output of the extractor

        Returns:
            Names of the fields that were written
        """
        updated = []
        skipped = []
        for name, value in result.present_fields().items():
            if self.fields[name].suggest(copy.copy(value)):
                updated.append(name)
            else:
                skipped.append(name)

        log_extraction_merge(updated, skipped)
        return updated

    # =========================================================================
    # USER EDITS
    # =========================================================================

    def user_edit(self, field_name: str, value) -> None:
        """
        Record a direct user edit, marking the field user-confirmed.

        Raises:
            KeyError: If field_name is not a form field
        """
        if field_name not in self.fields:
            raise KeyError(f"Unknown form field: {field_name}")
        self.fields[field_name].confirm(value)
        _log_debug(f"User confirmed {field_name}: {value!r}")

    def add_skill(self, skill: str) -> bool:
        """
        Append a skill typed by the user.

        Blank and duplicate entries are ignored.

        Returns:
            True if the skill list changed
        """
        skill = skill.strip()
        current = self.fields["skills"].value
        if not skill or skill in current:
            return False
        self.user_edit("skills", [*current, skill])
        return True

    def remove_skill(self, skill: str) -> bool:
        """
        Remove a skill chip.

        Returns:
            True if the skill list changed
        """
        current = self.fields["skills"].value
        if skill not in current:
            return False
        self.user_edit("skills", [s for s in current if s != skill])
        return True

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def value(self, field_name: str):
        return self.fields[field_name].value

    def provenance(self, field_name: str) -> Provenance:
        return self.fields[field_name].provenance

    def is_ai_suggested(self, field_name: str) -> bool:
        """Whether the field should show an "AI suggested" hint."""
        return self.fields[field_name].is_suggested

    def snapshot(self) -> dict[str, dict]:
        """
        Plain-dict view of the form state.

        Returns:
            {field_name: {"value": ..., "provenance": "..."}}
        """
        return {
            name: {"value": copy.copy(f.value), "provenance": f.provenance.value}
            for name, f in self.fields.items()
        }

    def reset(self) -> None:
        """Clear every field back to unset, keeping the document."""
        _log_info("Resetting form fields")
        for name in FORM_FIELDS:
            self.fields[name] = FormField(_empty_value(name))
        self.has_analyzed = False

"""
Heuristic field extraction from pasted job descriptions.

Each field has its own sub-extractor. Sub-extractors are independent: a
non-match (or an unexpected failure) in one leaves that field absent and never
blocks the others. Ordered rules are evaluated first-match-wins with no scoring
across patterns, so output on ambiguous text is fixed by declaration order.

This module has no I/O and no shared mutable state.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from jdfill.contexts.extraction.extraction_patterns import (
    DEFAULT_INTAKE,
    DEFAULT_TITLE,
    MAX_INTAKE,
    MAX_SKILLS,
    MIN_INTAKE,
    PERK_KEYWORDS,
    PERK_LABEL_OVERRIDES,
    REMOTE_LABEL,
    REMOTE_MARKERS,
    SKILL_KEYWORDS,
    THOUSANDS_MULTIPLIER,
    TITLE_FALLBACKS,
    UPPERCASE_SKILL_TOKENS,
    IntakePatterns,
    LocationPatterns,
    StipendPatterns,
    TitlePatterns,
)
from jdfill.contexts.extraction.logger import _log_info, _log_warning, log_field_result
from jdfill.contexts.extraction.normalizer import (
    JobDocument,
    capitalize_words,
    collapse_whitespace,
)

# A rule pairs a pattern with a handler that turns its match into a value.
# Handlers return None (or an empty string) to reject the match.
Rule = tuple[re.Pattern, Callable[[re.Match], object]]


@dataclass(frozen=True)
class ExtractionResult:
    """
    Structured fields inferred from one job description.

    A field that is None (or an empty tuple for skills) was not found.
    Intake always carries a value because it defaults to 1.
    """

    title: Optional[str] = None
    skills: tuple[str, ...] = ()
    location: Optional[str] = None
    intake: int = DEFAULT_INTAKE
    stipend: Optional[int] = None
    perks: Optional[str] = None

    def present_fields(self) -> dict[str, object]:
        """
        Fields that carry a value, in declaration order.

        Returns:
            Dict of field name to value, omitting absent fields
        """
        present = {}
        if self.title:
            present["title"] = self.title
        if self.skills:
            present["skills"] = list(self.skills)
        if self.location:
            present["location"] = self.location
        present["intake"] = self.intake
        if self.stipend is not None:
            present["stipend"] = self.stipend
        if self.perks:
            present["perks"] = self.perks
        return present


def first_match(rules: list[Rule], text: str):
    """
    Evaluate rules in order and return the first accepted value.

    A rule is accepted when its pattern matches and its handler returns a
    non-empty value. Later rules are never consulted once one is accepted.

    Args:
        rules: Ordered (pattern, handler) pairs
        text: Text to search

    Returns:
        Value from the first accepted rule, or None
    """
    for pattern, handler in rules:
        match = pattern.search(text)
        if not match:
            continue
        value = handler(match)
        if value is not None and value != "":
            return value
    return None


# =============================================================================
# TITLE
# =============================================================================


def _title_from_match(match: re.Match) -> str:
    return capitalize_words(collapse_whitespace(match.group(1)))


TITLE_RULES: list[Rule] = [
    (TitlePatterns.LEAD_PHRASE, _title_from_match),
    (TitlePatterns.LABELLED, _title_from_match),
    (TitlePatterns.LINE_START, _title_from_match),
]


def extract_title(document: JobDocument) -> str:
    """
    Extract the role title.

    Tries the ordered title patterns, then the keyword fallback table, then
    the generic "Intern" title.
    """
    title = first_match(TITLE_RULES, document.normalized)
    if title:
        return title

    for keywords, fallback_title in TITLE_FALLBACKS:
        if all(keyword in document.lowered for keyword in keywords):
            return fallback_title

    return DEFAULT_TITLE


# =============================================================================
# SKILLS
# =============================================================================


def format_skill(skill: str) -> str:
    """
    Render a vocabulary skill for display.

    Known acronyms are upper-cased ("sql" -> "SQL"); other words get a capital
    first letter ("power bi" -> "Power Bi", "node.js" -> "Node.js").
    """
    words = []
    for word in skill.split(" "):
        if word.lower() in UPPERCASE_SKILL_TOKENS:
            words.append(word.upper())
        else:
            words.append(capitalize_words(word))
    return " ".join(words)


def extract_skills(document: JobDocument) -> tuple[str, ...]:
    """
    Extract skills by substring containment against the skill vocabulary.

    There is no word-boundary check: "java" is found inside "javascript".
    Output follows vocabulary order, is de-duplicated and holds at most
    MAX_SKILLS entries.
    """
    skills = []
    for skill in SKILL_KEYWORDS:
        if skill in document.lowered:
            formatted = format_skill(skill)
            if formatted not in skills:
                skills.append(formatted)
    return tuple(skills[:MAX_SKILLS])


# =============================================================================
# LOCATION
# =============================================================================


def _is_remote(span: str) -> bool:
    span = span.lower()
    return any(marker in span for marker in REMOTE_MARKERS)


def _location_from_match(match: re.Match) -> Optional[str]:
    if _is_remote(match.group(0)):
        return REMOTE_LABEL
    if match.lastindex is None:
        return None
    label = collapse_whitespace(match.group(1))
    return capitalize_words(label, lower_rest=True)


LOCATION_RULES: list[Rule] = [
    (LocationPatterns.EXPLICIT, _location_from_match),
    (LocationPatterns.CITY, _location_from_match),
    (LocationPatterns.REMOTE, _location_from_match),
]


def extract_location(document: JobDocument) -> Optional[str]:
    """Extract the work location label, or "Remote" for remote-style matches."""
    return first_match(LOCATION_RULES, document.normalized)


# =============================================================================
# INTAKE
# =============================================================================


def clamp_intake(count: int) -> int:
    """Clamp a hiring count to [MIN_INTAKE, MAX_INTAKE]."""
    return max(MIN_INTAKE, min(count, MAX_INTAKE))


def _intake_from_match(match: re.Match) -> int:
    # "0 positions" falls back to the default rather than failing the rule
    return clamp_intake(int(match.group(1)) or DEFAULT_INTAKE)


INTAKE_RULES: list[Rule] = [
    (IntakePatterns.COUNT_NOUN, _intake_from_match),
    (IntakePatterns.LEAD_VERB, _intake_from_match),
    (IntakePatterns.AVAILABLE, _intake_from_match),
]


def extract_intake(document: JobDocument) -> int:
    """Extract the number of openings, clamped to [1, 100]; defaults to 1."""
    intake = first_match(INTAKE_RULES, document.normalized)
    return intake if intake is not None else DEFAULT_INTAKE


# =============================================================================
# STIPEND
# =============================================================================


def parse_amount(digits: str, thousands_suffix: Optional[str] = None) -> int:
    """
    Parse a captured amount.

    Args:
        digits: Digit run, possibly with comma thousands separators ("15,000")
        thousands_suffix: "k"/"K" when the amount was written as "15k"

    Returns:
        Integer amount with the suffix expanded
    """
    amount = int(digits.replace(",", ""))
    if thousands_suffix:
        amount *= THOUSANDS_MULTIPLIER
    return amount


def _stipend_from_match(match: re.Match) -> int:
    return parse_amount(match.group(1), match.group(2))


STIPEND_RULES: list[Rule] = [
    (StipendPatterns.LABELLED, _stipend_from_match),
    (StipendPatterns.CURRENCY_PER_MONTH, _stipend_from_match),
]


def extract_stipend(document: JobDocument) -> Optional[int]:
    """Extract the monthly stipend; None when no stipend phrase is present."""
    return first_match(STIPEND_RULES, document.normalized)


# =============================================================================
# PERKS
# =============================================================================


def format_perk(perk: str) -> str:
    """Render a perk keyword, applying the fixed relabeling table."""
    return PERK_LABEL_OVERRIDES.get(perk, capitalize_words(perk))


def extract_perks(document: JobDocument) -> Optional[str]:
    """
    Extract perks by substring containment against the perk vocabulary.

    Returns:
        Comma-joined labels in vocabulary order, or None if none were found
    """
    perks = []
    for perk in PERK_KEYWORDS:
        if perk in document.lowered:
            formatted = format_perk(perk)
            if formatted not in perks:
                perks.append(formatted)
    return ", ".join(perks) if perks else None


# =============================================================================
# ENTRY POINT
# =============================================================================

SUB_EXTRACTORS: list[tuple[str, Callable[[JobDocument], object]]] = [
    ("title", extract_title),
    ("skills", extract_skills),
    ("location", extract_location),
    ("intake", extract_intake),
    ("stipend", extract_stipend),
    ("perks", extract_perks),
]


def extract_job_fields(text: Union[str, JobDocument]) -> ExtractionResult:
    """
    Extract structured job fields from a job description.

    Every sub-extractor runs regardless of the others. If one fails
    unexpectedly the failure is logged and the field is left at its
    absent value; this function does not raise.

    Args:
        text: Raw job description text or a prepared JobDocument

    Returns:
        ExtractionResult holding whatever fields were found

    Example:
        >>> result = extract_job_fields("We are hiring a Data Analyst in Pune ...")
        >>> result.title
        'Data Analyst'
    """
    document = text if isinstance(text, JobDocument) else JobDocument(text)

    values = {}
    for field_name, sub_extractor in SUB_EXTRACTORS:
        try:
            value = sub_extractor(document)
        except Exception as e:
            _log_warning(f"{field_name} extraction failed: {e!r}")
            continue
        log_field_result(field_name, value)
        values[field_name] = value

    result = ExtractionResult(**values)
    _log_info(f"Extracted {len(result.present_fields())} field(s) from {len(document)} characters")
    return result

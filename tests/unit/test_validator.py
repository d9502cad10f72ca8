"""Unit tests for submission validation."""

import pytest

from jdfill.contexts.form.exceptions import ValidationError
from jdfill.contexts.form.form_state import JobForm
from jdfill.contexts.form.validator import (
    check_submission,
    parse_whole_number,
    validate_for_submission,
)
from jdfill.utils.config import load_config

VALID_DOCUMENT = (
    "We are hiring a Data Analyst for 3 positions in Pune. Stipend: 12k per month. "
    "Skills: Python, SQL, Excel. Perks: certificate."
)


@pytest.fixture
def form(monkeypatch):
    monkeypatch.delenv("JDFILL_CONFIG", raising=False)
    return JobForm(config=load_config())


@pytest.fixture
def valid_form(form):
    form.set_document(VALID_DOCUMENT)
    form.user_edit("title", "Data Analyst")
    form.user_edit("skills", ["Python", "SQL"])
    form.user_edit("location", "Pune")
    form.user_edit("intake", "3")
    return form


@pytest.mark.unit
def test_all_violations_reported_together(form):
    """Test that every failed rule is reported, not just the first."""
    form.set_document("x" * 50)
    form.user_edit("intake", "0")

    with pytest.raises(ValidationError) as exc_info:
        validate_for_submission(form)

    assert exc_info.value.codes == [
        "document_too_short",
        "title_missing",
        "skills_missing",
        "location_missing",
        "intake_invalid",
    ]
    message = str(exc_info.value)
    assert "Job title is required" in message
    assert "Intake capacity must be at least 1" in message


@pytest.mark.unit
def test_valid_form_passes(valid_form):
    """Test that a complete form raises nothing."""
    validate_for_submission(valid_form)
    assert check_submission(valid_form) == []


@pytest.mark.unit
def test_document_length_measured_after_trim(valid_form):
    """Test that padding whitespace does not satisfy the minimum length."""
    valid_form.set_document("   " + "x" * 60 + " " * 80)
    assert [v.code for v in check_submission(valid_form)] == ["document_too_short"]


@pytest.mark.unit
def test_document_too_long(valid_form):
    """Test the maximum document length rule."""
    valid_form.set_document("x" * 5001)
    assert [v.code for v in check_submission(valid_form)] == ["document_too_long"]


@pytest.mark.unit
def test_whitespace_title_and_location_are_missing(valid_form):
    """Test that blank strings count as missing."""
    valid_form.user_edit("title", "   ")
    valid_form.user_edit("location", "\n")
    codes = [v.code for v in check_submission(valid_form)]
    assert codes == ["title_missing", "location_missing"]


@pytest.mark.unit
def test_blank_skill_entries_do_not_count(valid_form):
    """Test that a skill list of blanks is treated as empty."""
    valid_form.user_edit("skills", ["", "  "])
    assert [v.code for v in check_submission(valid_form)] == ["skills_missing"]


@pytest.mark.unit
@pytest.mark.parametrize("intake", [None, "", "abc", "2.5", -1, 0, True])
def test_invalid_intake(valid_form, intake):
    """Test intake values that are absent, non-integer or non-positive."""
    valid_form.user_edit("intake", intake)
    assert [v.code for v in check_submission(valid_form)] == ["intake_invalid"]


@pytest.mark.unit
@pytest.mark.parametrize("stipend", ["-5", "abc", 12.5])
def test_invalid_stipend(valid_form, stipend):
    """Test that a present stipend must be a non-negative whole number."""
    valid_form.user_edit("stipend", stipend)
    assert [v.code for v in check_submission(valid_form)] == ["stipend_invalid"]


@pytest.mark.unit
@pytest.mark.parametrize("stipend", [None, "", "0", 15000])
def test_optional_stipend_accepted(valid_form, stipend):
    """Test that absent, zero and numeric stipends pass."""
    valid_form.user_edit("stipend", stipend)
    assert check_submission(valid_form) == []


@pytest.mark.unit
def test_parse_whole_number():
    """Test whole-number parsing of form values."""
    assert parse_whole_number(4) == 4
    assert parse_whole_number(" 7 ") == 7
    assert parse_whole_number(3.0) == 3
    assert parse_whole_number(3.5) is None
    assert parse_whole_number(True) is None
    assert parse_whole_number([1]) is None

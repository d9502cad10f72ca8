"""Unit tests for JobRecord construction and payload rendering."""

import random

import pytest
from omegaconf import OmegaConf

from jdfill.contexts.form.exceptions import ValidationError
from jdfill.contexts.form.form_state import JobForm
from jdfill.contexts.form.job_record import (
    GeoPoint,
    JobLocation,
    JobRecord,
    build_job_record,
    placeholder_coordinates,
)
from jdfill.utils.config import load_config

DOCUMENT = (
    "  We are hiring a Data Analyst for 3 positions in Pune. Stipend: 12k per month. "
    "Skills: Python, SQL, Excel. Perks: certificate.\n"
)


@pytest.fixture
def form(monkeypatch):
    monkeypatch.delenv("JDFILL_CONFIG", raising=False)
    form = JobForm(config=load_config())
    form.set_document(DOCUMENT)
    form.user_edit("title", " Data Analyst ")
    form.user_edit("skills", ["Python", " SQL", ""])
    form.user_edit("location", "Pune ")
    form.user_edit("intake", "3")
    form.user_edit("stipend", "12000")
    form.user_edit("perks", "   ")
    return form


@pytest.mark.unit
def test_build_job_record(form):
    """Test that values are trimmed and parsed into a JobRecord."""
    record = build_job_record(form, rng=random.Random(0))

    assert record.title == "Data Analyst"
    assert record.required_skills == ("Python", "SQL")
    assert record.location.label == "Pune"
    assert record.intake == 3
    assert record.stipend == 12000
    assert record.perks is None


@pytest.mark.unit
def test_original_document_kept_verbatim(form):
    """Test that the job description is stored without trimming."""
    record = build_job_record(form)
    assert record.original_document == DOCUMENT


@pytest.mark.unit
def test_blank_stipend_is_unset(form):
    """Test that a cleared stipend becomes None, not 0."""
    form.user_edit("stipend", "")
    assert build_job_record(form).stipend is None


@pytest.mark.unit
def test_invalid_form_raises(form):
    """Test that records are never built from an invalid form."""
    form.user_edit("location", "")
    with pytest.raises(ValidationError):
        build_job_record(form)


@pytest.mark.unit
def test_placeholder_coordinates_within_jitter():
    """Test that stand-in coordinates stay within the configured jitter."""
    geo = OmegaConf.create({"lat": 28.6139, "lng": 77.2090, "jitter": 0.1})
    rng = random.Random(42)
    for _ in range(50):
        point = placeholder_coordinates(geo, rng)
        assert abs(point.lat - 28.6139) <= 0.05
        assert abs(point.lng - 77.2090) <= 0.05


@pytest.mark.unit
def test_placeholder_coordinates_reproducible_with_seed():
    """Test that a seeded random source gives repeatable coordinates."""
    geo = OmegaConf.create({"lat": 1.0, "lng": 2.0, "jitter": 0.1})
    assert placeholder_coordinates(geo, random.Random(7)) == placeholder_coordinates(
        geo, random.Random(7)
    )


@pytest.mark.unit
def test_to_payload_field_names():
    """Test the job-creation API payload shape."""
    record = JobRecord(
        title="Data Analyst",
        required_skills=("Python", "SQL"),
        location=JobLocation("Pune", GeoPoint(18.5, 73.8)),
        intake=3,
        original_document="JD text",
        stipend=12000,
        perks="Certificate",
    )

    assert record.to_payload() == {
        "title": "Data Analyst",
        "requiredSkills": ["Python", "SQL"],
        "location": {"label": "Pune", "lat": 18.5, "lng": 73.8},
        "intake": 3,
        "originalJD": "JD text",
        "stipend": 12000,
        "perks": "Certificate",
    }


@pytest.mark.unit
def test_to_payload_omits_unset_optionals():
    """Test that missing stipend, perks and coordinates are left out."""
    record = JobRecord(
        title="Intern",
        required_skills=("Excel",),
        location=JobLocation("Remote"),
        intake=1,
        original_document="JD text",
    )
    payload = record.to_payload()

    assert "stipend" not in payload
    assert "perks" not in payload
    assert payload["location"] == {"label": "Remote"}

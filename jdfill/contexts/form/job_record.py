"""
Job record construction for the Form context.

A JobRecord is built only at submission time from the current form values and
is handed, whole, to the external job service.
"""

import random
from dataclasses import dataclass
from typing import Optional

from omegaconf import DictConfig

from jdfill.contexts.form.form_state import JobForm
from jdfill.contexts.form.validator import parse_whole_number, validate_for_submission


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude pair."""

    lat: float
    lng: float


@dataclass(frozen=True)
class JobLocation:
    """Location label with optional coordinates."""

    label: str
    coordinates: Optional[GeoPoint] = None


@dataclass(frozen=True)
class JobRecord:
    """
    Validated job posting ready for the job-creation service.

    Attributes:
        title: Role title
        required_skills: Skills in display order
        location: Location label and coordinate stand-in
        intake: Number of openings (>= 1)
        stipend: Monthly stipend, if offered
        perks: Comma-separated perks, if any
        original_document: The job description exactly as supplied
    """

    title: str
    required_skills: tuple[str, ...]
    location: JobLocation
    intake: int
    original_document: str
    stipend: Optional[int] = None
    perks: Optional[str] = None

    def to_payload(self) -> dict:
        """
        Render the record in the job-creation API's field names.

        Optional fields that are unset are omitted.
        """
        location = {"label": self.location.label}
        if self.location.coordinates is not None:
            location["lat"] = self.location.coordinates.lat
            location["lng"] = self.location.coordinates.lng

        payload = {
            "title": self.title,
            "requiredSkills": list(self.required_skills),
            "location": location,
            "intake": self.intake,
            "originalJD": self.original_document,
        }
        if self.stipend is not None:
            payload["stipend"] = self.stipend
        if self.perks:
            payload["perks"] = self.perks
        return payload


def placeholder_coordinates(
    geo_config: DictConfig, rng: Optional[random.Random] = None
) -> GeoPoint:
    """
    Coordinates standing in for a geocoded location.

    Returns the configured base point shifted by up to +/- jitter/2 on each axis.

    Args:
        geo_config: Config section with lat, lng and jitter
        rng: Random source (seedable for tests)
    """
    rng = rng or random.Random()
    half = geo_config.jitter / 2
    return GeoPoint(
        lat=geo_config.lat + rng.uniform(-half, half),
        lng=geo_config.lng + rng.uniform(-half, half),
    )


def build_job_record(form: JobForm, rng: Optional[random.Random] = None) -> JobRecord:
    """
    Validate the form and construct its JobRecord.

    Args:
        form: Completed job posting form
        rng: Random source for the coordinate stand-in

    Returns:
        JobRecord built from the current field values

    Raises:
        ValidationError: If the form fails any submission rule
    """
    validate_for_submission(form)

    stipend = form.value("stipend")
    if isinstance(stipend, str) and not stipend.strip():
        stipend = None
    if stipend is not None:
        stipend = parse_whole_number(stipend)

    perks = (form.value("perks") or "").strip() or None

    skills = tuple(s.strip() for s in form.value("skills") if s and s.strip())

    return JobRecord(
        title=form.value("title").strip(),
        required_skills=skills,
        location=JobLocation(
            label=form.value("location").strip(),
            coordinates=placeholder_coordinates(form.config.geo, rng),
        ),
        intake=parse_whole_number(form.value("intake")),
        stipend=stipend,
        perks=perks,
        original_document=form.document,
    )

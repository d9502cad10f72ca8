"""Unit tests for submitting a job posting to the job service."""

import pytest

from jdfill.contexts.form.exceptions import UpstreamError, ValidationError
from jdfill.contexts.form.form_state import JobForm
from jdfill.contexts.form.submission import (
    GENERIC_FAILURE_MESSAGE,
    RecordingJobService,
    submit_job,
)
from jdfill.utils.config import load_config

DOCUMENT = (
    "We are hiring a Data Analyst for 3 positions in Pune. Stipend: 12k per month. "
    "Skills: Python, SQL, Excel. Perks: certificate."
)


class FailingCreateService(RecordingJobService):
    def create_job(self, payload: dict) -> str:
        raise ConnectionError("service unavailable")


class FailingProcessService(RecordingJobService):
    def process_job(self, job_id: str) -> None:
        raise TimeoutError("trigger timed out")


@pytest.fixture
def form(monkeypatch):
    monkeypatch.delenv("JDFILL_CONFIG", raising=False)
    form = JobForm(config=load_config())
    form.set_document(DOCUMENT)
    form.analyze()
    return form


@pytest.mark.unit
def test_submit_creates_then_processes(form):
    """Test that a valid form is created and then triggered for processing."""
    service = RecordingJobService()

    job_id = submit_job(form, service)

    assert job_id == "job-1"
    assert service.processed == ["job-1"]
    payload = service.created["job-1"]
    assert payload["title"] == "Data Analyst"
    assert payload["originalJD"] == DOCUMENT


@pytest.mark.unit
def test_invalid_form_sends_nothing(form):
    """Test that validation failures stop submission before any service call."""
    service = RecordingJobService()
    form.user_edit("title", "")

    with pytest.raises(ValidationError):
        submit_job(form, service)

    assert service.created == {}
    assert service.processed == []


@pytest.mark.unit
def test_create_failure_wrapped(form):
    """Test that job creation errors surface as a retryable UpstreamError."""
    with pytest.raises(UpstreamError) as exc_info:
        submit_job(form, FailingCreateService())

    error = exc_info.value
    assert error.stage == "create"
    assert error.job_id is None
    assert error.retryable
    assert str(error) == GENERIC_FAILURE_MESSAGE
    assert isinstance(error.__cause__, ConnectionError)


@pytest.mark.unit
def test_process_failure_wrapped(form):
    """Test that processing trigger errors keep the created job id."""
    service = FailingProcessService()

    with pytest.raises(UpstreamError) as exc_info:
        submit_job(form, service)

    assert exc_info.value.stage == "process"
    assert exc_info.value.job_id == "job-1"
    assert isinstance(exc_info.value.__cause__, TimeoutError)


@pytest.mark.unit
def test_recording_service_rejects_unknown_job():
    """Test the dry-run service's processing guard."""
    with pytest.raises(KeyError):
        RecordingJobService().process_job("job-99")

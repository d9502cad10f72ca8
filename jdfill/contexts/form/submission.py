"""
Job submission to the external job service.

The service contract is deliberately thin: create a job from a payload and get
back an identifier, then trigger processing for that identifier. Anything the
service raises is reported as UpstreamError.
"""

import random
from typing import Optional, Protocol

from jdfill.contexts.form.exceptions import UpstreamError
from jdfill.contexts.form.form_state import JobForm
from jdfill.contexts.form.job_record import build_job_record
from jdfill.contexts.form.logger import _log_error, _log_info, _log_success

GENERIC_FAILURE_MESSAGE = "Failed to create job. Please try again."


class JobService(Protocol):
    """External job-creation and job-processing endpoints."""

    def create_job(self, payload: dict) -> str:
        """Create a job and return its identifier."""
        ...

    def process_job(self, job_id: str) -> None:
        """Start processing (candidate matching) for a created job."""
        ...


class RecordingJobService:
    """
    In-memory JobService that records calls instead of sending them.

    Used for dry runs from the command line and in tests.
    """

    def __init__(self):
        self.created: dict[str, dict] = {}
        self.processed: list[str] = []

    def create_job(self, payload: dict) -> str:
        job_id = f"job-{len(self.created) + 1}"
        self.created[job_id] = payload
        return job_id

    def process_job(self, job_id: str) -> None:
        if job_id not in self.created:
            raise KeyError(f"Unknown job: {job_id}")
        self.processed.append(job_id)


def submit_job(
    form: JobForm, service: JobService, rng: Optional[random.Random] = None
) -> str:
    """
    Validate the form, build its record and hand it to the job service.

    Args:
        form: Completed job posting form
        service: External job service
        rng: Random source for the coordinate stand-in

    Returns:
        Identifier of the created job

    Raises:
        ValidationError: If the form fails submission checks (nothing is sent)
        UpstreamError: If creating or processing the job fails
    """
    record = build_job_record(form, rng=rng)
    payload = record.to_payload()

    try:
        job_id = service.create_job(payload)
    except Exception as e:
        _log_error(f"Job creation failed: {e!r}")
        raise UpstreamError(GENERIC_FAILURE_MESSAGE, stage="create") from e
    _log_info(f"Created job {job_id}: {record.title}")

    try:
        service.process_job(job_id)
    except Exception as e:
        _log_error(f"Job processing trigger failed for {job_id}: {e!r}")
        raise UpstreamError(GENERIC_FAILURE_MESSAGE, stage="process", job_id=job_id) from e

    _log_success(f"Submitted job {job_id} for processing")
    return job_id

"""
Job enrichment: joins job, client and person lists into display views.

These are pure functions. They take the three collections explicitly, keep
no cache, and return new objects; how fresh the inputs are is the caller's
concern.
"""

from typing import List, Optional, Sequence

from crm.models.job import JobStatus
from crm.schemas.client import ClientResponse
from crm.schemas.job import JobDetailsResponse, JobResponse
from crm.schemas.person import PersonResponse

ALL_STATUSES = "all"


def enrich_jobs(
    jobs: Sequence[JobResponse],
    clients: Sequence[ClientResponse],
    people: Sequence[PersonResponse],
) -> List[JobDetailsResponse]:
    """
    Attach each job's client and assigned people.

    Args:
        jobs: Jobs carrying ``assigned_people`` ids
        clients: Clients to resolve ``client_id`` against
        people: People to resolve ``assigned_people`` against

    Returns:
        One view per job, in job order. ``client`` is None when the client is
        not in ``clients``; ``assigned_people_details`` follows the order of
        ``people`` and skips ids that are not in it.
    """
    clients_by_id = {client.id: client for client in clients}

    enriched = []
    for job in jobs:
        assigned = set(job.assigned_people)
        enriched.append(
            JobDetailsResponse(
                **job.model_dump(),
                client=clients_by_id.get(job.client_id),
                assigned_people_details=[person for person in people if person.id in assigned],
            )
        )
    return enriched


def _matches_search(job: JobDetailsResponse, needle: str) -> bool:
    haystacks = [job.title, job.description, job.client.name if job.client else None]
    return any(needle in text.lower() for text in haystacks if text)


def filter_jobs(
    jobs: Sequence[JobDetailsResponse],
    search: Optional[str] = None,
    status: Optional[str] = None,
) -> List[JobDetailsResponse]:
    """
    Narrow enriched jobs by free-text search and status.

    ``search`` matches title, description or client name, case-insensitively.
    ``status`` of None or "all" keeps every status.
    """
    needle = search.strip().lower() if search else ""
    wanted_status = None if status in (None, ALL_STATUSES) else JobStatus(status)

    return [
        job for job in jobs
        if (not needle or _matches_search(job, needle))
        and (wanted_status is None or job.status == wanted_status)
    ]
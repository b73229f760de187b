"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from crm.models.person import Person
from crm.models.client import Client
from crm.models.job import Job, JobStatus
from crm.models.association_tables import job_people

__all__ = [
    "Person",
    "Client",
    "Job",
    "JobStatus",
    "job_people",
]

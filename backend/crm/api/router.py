"""
API router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from crm.api.endpoints import (
    health,
    people,
    clients,
    jobs,
    dashboard,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(people.router, prefix="/people", tags=["people"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

"""
Dependency injection container using dependency-injector.
Holds configuration and the process-wide services.
"""

from typing import Optional

from dependency_injector import containers, providers

from crm.core.config import settings
from crm.services.health_service import HealthService
from crm.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # Services; the health service keeps the process start time, so one per process
    health_service = providers.Singleton(
        HealthService,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


# Global container instance
_container: Optional[Container] = None


def build_container() -> Container:
    """Create a container loaded from application settings."""
    container = Container()
    container.config.from_dict({
        "database_url": settings.DATABASE_URL,
        "client_delete_policy": settings.CLIENT_DELETE_POLICY,
    })
    return container


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = build_container()
    return _container


def set_container(container: Container) -> None:
    """Install the container built at application startup."""
    global _container
    _container = container

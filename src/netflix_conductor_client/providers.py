"""FastAPI injection for the Conductor service façades.

Typical wiring::

    app = FastAPI()
    install(app, ConductorSettings())

    @app.get("/tasks")
    def tasks(manager: TaskMetadataManager = Depends(get_task_metadata_manager)):
        return manager.get_all_tasks()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import requests
from fastapi import FastAPI, HTTPException, Request

from netflix_conductor_client.config import ConductorSettings
from netflix_conductor_client.services import (
    TaskMetadataManager,
    WorkflowManager,
    WorkflowMetadataManager,
)
from netflix_conductor_client.services.base import build_session

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConductorServices:
    """The three façades, sharing one settings object and one HTTP session."""

    settings: ConductorSettings
    session: requests.Session
    task_metadata: TaskMetadataManager
    workflow_metadata: WorkflowMetadataManager
    workflows: WorkflowManager
    owns_session: bool = field(default=False, repr=False)

    @classmethod
    def for_root(
        cls,
        settings: ConductorSettings,
        *,
        session: requests.Session | None = None,
    ) -> ConductorServices:
        """Build every façade from a single settings object.

        Raises:
            ValueError: If ``settings.api_endpoint`` is empty.
        """

        shared = session if session is not None else build_session()
        services = cls(
            settings=settings,
            session=shared,
            task_metadata=TaskMetadataManager(settings, session=shared),
            workflow_metadata=WorkflowMetadataManager(settings, session=shared),
            workflows=WorkflowManager(settings, session=shared),
            owns_session=session is None,
        )
        logger.info(
            "Conductor services configured",
            extra={"endpoint": services.task_metadata.api_endpoint},
        )
        return services

    def close(self) -> None:
        """Close the shared session unless the caller injected it."""

        if self.owns_session:
            self.session.close()


def install(app: FastAPI, settings: ConductorSettings) -> ConductorServices:
    """Register the façades on ``app`` so request handlers can depend on them.

    The caller owns the returned container and should ``close()`` it from the
    application's lifespan handler.
    """

    services = ConductorServices.for_root(settings)
    app.state.conductor = services
    return services


def get_conductor_services(request: Request) -> ConductorServices:
    services = getattr(request.app.state, "conductor", None)
    if not isinstance(services, ConductorServices):
        raise HTTPException(status_code=500, detail="Conductor services not configured")
    return services


def get_task_metadata_manager(request: Request) -> TaskMetadataManager:
    return get_conductor_services(request).task_metadata


def get_workflow_metadata_manager(request: Request) -> WorkflowMetadataManager:
    return get_conductor_services(request).workflow_metadata


def get_workflow_manager(request: Request) -> WorkflowManager:
    return get_conductor_services(request).workflows

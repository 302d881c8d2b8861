"""Unit tests for FastAPI injection of the service façades."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

import netflix_conductor_client.providers as providers
from netflix_conductor_client.config import ConductorSettings
from netflix_conductor_client.providers import (
    ConductorServices,
    get_task_metadata_manager,
    get_workflow_manager,
    get_workflow_metadata_manager,
    install,
)
from netflix_conductor_client.services import (
    TaskMetadataManager,
    WorkflowManager,
    WorkflowMetadataManager,
)


def test_for_root_shares_one_session(settings: ConductorSettings, session: Mock) -> None:
    services = ConductorServices.for_root(settings, session=session)

    assert services.task_metadata._session is session
    assert services.workflow_metadata._session is session
    assert services.workflows._session is session


def test_close_leaves_injected_session_open(settings: ConductorSettings, session: Mock) -> None:
    services = ConductorServices.for_root(settings, session=session)

    services.close()

    session.close.assert_not_called()


def test_close_releases_session_it_built(
    settings: ConductorSettings, session: Mock, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(providers, "build_session", lambda: session)
    services = ConductorServices.for_root(settings)

    services.close()

    session.close.assert_called_once_with()


def test_for_root_fails_fast_without_endpoint(session: Mock) -> None:
    with pytest.raises(ValueError):
        ConductorServices.for_root(ConductorSettings(api_endpoint=""), session=session)


def _app_with_routes() -> FastAPI:
    app = FastAPI()

    @app.get("/tasks")
    def tasks(manager: TaskMetadataManager = Depends(get_task_metadata_manager)) -> dict:
        return {"endpoint": manager.api_endpoint, "kind": type(manager).__name__}

    @app.get("/definitions")
    def definitions(
        manager: WorkflowMetadataManager = Depends(get_workflow_metadata_manager),
    ) -> dict:
        return {"kind": type(manager).__name__}

    @app.get("/workflows/{workflow_id}")
    def workflow(workflow_id: str, manager: WorkflowManager = Depends(get_workflow_manager)) -> dict:
        return manager.retrieve_workflow(workflow_id).model_dump(by_alias=True, exclude_none=True)

    return app


def test_install_exposes_services_to_handlers(
    settings: ConductorSettings,
    session: Mock,
    make_response,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(providers, "build_session", lambda: session)
    session.get.return_value = make_response(payload={"workflowId": "wf-1", "status": "PAUSED"})

    app = _app_with_routes()
    services = install(app, settings)
    client = TestClient(app)

    assert app.state.conductor is services
    assert client.get("/tasks").json() == {
        "endpoint": "http://conductor.test/api",
        "kind": "TaskMetadataManager",
    }
    assert client.get("/definitions").json() == {"kind": "WorkflowMetadataManager"}

    body = client.get("/workflows/wf-1").json()
    assert body["workflowId"] == "wf-1"
    assert body["status"] == "PAUSED"


def test_dependency_without_install_is_a_server_error() -> None:
    client = TestClient(_app_with_routes())

    resp = client.get("/tasks")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Conductor services not configured"

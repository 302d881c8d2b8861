"""Workflow instance façade (``/workflow``).

Every lifecycle action (terminate, pause, resume, ...) first retrieves the
instance and only then issues the action, so an unknown workflow id fails on
the GET without touching the instance. The returned ``Workflow`` is the
snapshot taken *before* the action was applied.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import requests

from netflix_conductor_client.errors import ReadBackMismatch
from netflix_conductor_client.models import (
    RerunWorkflowOptions,
    SkipWorkflowTaskOptions,
    StartWorkflowOptions,
    Workflow,
)
from netflix_conductor_client.services.base import ConductorService


class WorkflowManager(ConductorService):
    """Start, inspect and drive workflow instances."""

    def retrieve_workflow(self, workflow_id: str, include_tasks: bool = False) -> Workflow:
        """Get workflow state by id.

        If ``include_tasks`` is set, the executed and scheduled tasks are included.

        Raises:
            ReadBackMismatch: If the server answers with an empty body.
        """

        resp = self._session.get(
            self._url("workflow", workflow_id),
            params={"includeTasks": "true" if include_tasks else "false"},
            timeout=self._timeout,
        )
        payload = self._decode(resp)
        if payload is None:
            raise ReadBackMismatch(kind="workflow instance", expected=workflow_id, actual=None)
        return Workflow.model_validate(payload)

    def start_workflow(self, options: StartWorkflowOptions) -> Workflow:
        """Start a workflow instance and fetch it by the id the server assigned.

        Raises:
            ValueError: If the server does not return a workflow id.
            ReadBackMismatch: If the fetched instance carries a different id.
        """

        self._log.info(
            "Starting workflow",
            extra={"workflow": options.name, "version": options.version},
        )
        resp = self._session.post(
            self._url("workflow"),
            json=options.to_payload(),
            headers={"Accept": "text/plain"},
            timeout=self._timeout,
        )
        resp.raise_for_status()
        workflow_id = resp.text.strip()
        if not workflow_id:
            raise ValueError("Unexpected start workflow response: missing workflow id")

        self._log.info(
            "Workflow started",
            extra={"workflow": options.name, "workflow_id": workflow_id},
        )
        workflow = self.retrieve_workflow(workflow_id)
        if workflow.workflow_id != workflow_id:
            raise ReadBackMismatch(
                kind="workflow instance",
                expected=workflow_id,
                actual=workflow.workflow_id,
            )
        return workflow

    def _retrieve_then(
        self,
        workflow_id: str,
        action: str,
        send: Callable[..., requests.Response],
        *segments: str,
        json: Any = None,
        params: dict[str, str] | None = None,
    ) -> Workflow:
        workflow = self.retrieve_workflow(workflow_id)
        self._log.info(
            "Applying workflow action",
            extra={"workflow_id": workflow_id, "action": action},
        )
        resp = send(
            self._url("workflow", workflow_id, *segments),
            json=json,
            params=params,
            timeout=self._timeout,
        )
        resp.raise_for_status()
        return workflow

    def terminate_workflow(self, workflow_id: str, reason: str | None = None) -> Workflow:
        params = {"reason": reason} if reason else None
        return self._retrieve_then(workflow_id, "terminate", self._session.delete, params=params)

    def remove_workflow(self, workflow_id: str) -> Workflow:
        """Remove the instance from the server's execution store."""

        return self._retrieve_then(workflow_id, "remove", self._session.delete, "remove")

    def pause_workflow(self, workflow_id: str) -> Workflow:
        """Pause the instance.

        No further tasks are scheduled until it is resumed; tasks already running
        are not paused.
        """

        return self._retrieve_then(workflow_id, "pause", self._session.put, "pause")

    def resume_workflow(self, workflow_id: str) -> Workflow:
        """Resume normal operations after a pause."""

        return self._retrieve_then(workflow_id, "resume", self._session.put, "resume")

    def rerun_workflow(self, workflow_id: str, options: RerunWorkflowOptions) -> Workflow:
        """Re-run a completed workflow from a specific task."""

        return self._retrieve_then(
            workflow_id, "rerun", self._session.post, "rerun", json=options.to_payload()
        )

    def restart_workflow(self, workflow_id: str) -> Workflow:
        """Restart from the beginning; the current execution history is wiped out."""

        return self._retrieve_then(workflow_id, "restart", self._session.post, "restart")

    def retry_workflow(self, workflow_id: str) -> Workflow:
        """Retry the last failed task."""

        return self._retrieve_then(workflow_id, "retry", self._session.post, "retry")

    def skip_workflow_task(self, workflow_id: str, options: SkipWorkflowTaskOptions) -> Workflow:
        """Skip a task of a running workflow and continue forward.

        The task's input and output can optionally be overridden via ``options``.

        Raises:
            ValueError: If ``options.task_reference_name`` is empty. No request is sent.
        """

        reference = options.task_reference_name.strip()
        if not reference:
            raise ValueError("task_reference_name should not be empty")

        return self._retrieve_then(
            workflow_id,
            "skiptask",
            self._session.put,
            "skiptask",
            reference,
            json=options.to_payload(),
        )

"""Task definition façade (``/metadata/taskdefs``)."""

from __future__ import annotations

from collections.abc import Sequence

import requests

from netflix_conductor_client.errors import ReadBackMismatch
from netflix_conductor_client.models import TaskDefinition, TaskMetadataDefinition
from netflix_conductor_client.services.base import ConductorService


class TaskMetadataManager(ConductorService):
    """Register, read, update and delete task definitions."""

    def get_all_tasks(self) -> list[TaskDefinition]:
        resp = self._session.get(self._url("metadata", "taskdefs"), timeout=self._timeout)
        payload = self._decode(resp) or []
        return [TaskDefinition.model_validate(item) for item in payload]

    def get_task(self, task_type: str) -> TaskDefinition | None:
        """Fetch one task definition.

        Returns:
            The definition, or ``None`` when the server answers with an empty body.
        """

        resp = self._session.get(
            self._url("metadata", "taskdefs", task_type), timeout=self._timeout
        )
        payload = self._decode(resp)
        if payload is None:
            return None
        return TaskDefinition.model_validate(payload)

    def register_task(self, task: TaskMetadataDefinition) -> TaskDefinition:
        """Register a single task definition and read it back.

        Raises:
            ReadBackMismatch: If the confirming read does not return ``task.name``.
        """

        self._log.info("Registering task definition", extra={"task": task.name})
        resp = self._session.post(
            self._url("metadata", "taskdefs"),
            json=[task.to_payload()],
            timeout=self._timeout,
        )
        resp.raise_for_status()

        registered = self.get_task(task.name)
        if registered is None or registered.name != task.name:
            raise ReadBackMismatch(
                kind="task",
                expected=task.name,
                actual=registered.name if registered is not None else None,
            )
        return registered

    def register_tasks(self, tasks: Sequence[TaskMetadataDefinition]) -> None:
        self._log.info(
            "Registering task definitions",
            extra={"tasks": [task.name for task in tasks]},
        )
        resp = self._session.post(
            self._url("metadata", "taskdefs"),
            json=[task.to_payload() for task in tasks],
            timeout=self._timeout,
        )
        resp.raise_for_status()

    def delete_task(self, task_type: str) -> None:
        self._log.info("Deleting task definition", extra={"task": task_type})
        resp = self._session.delete(
            self._url("metadata", "taskdefs", task_type), timeout=self._timeout
        )
        resp.raise_for_status()

    def update_task(self, task: TaskMetadataDefinition) -> None:
        self._log.info("Updating task definition", extra={"task": task.name})
        resp = self._session.put(
            self._url("metadata", "taskdefs"),
            json=task.to_payload(),
            timeout=self._timeout,
        )
        resp.raise_for_status()

    def exists(self, name: str) -> bool:
        """Return whether a task definition named ``name`` is registered.

        A 404 or an empty body both mean "not registered"; any other HTTP
        failure propagates.
        """

        try:
            return self.get_task(name) is not None
        except requests.HTTPError as exc:
            if exc.response is not None and exc.response.status_code == 404:
                return False
            raise

    def register_or_update_task(self, task: TaskMetadataDefinition) -> TaskDefinition | None:
        """Update ``task`` if it is registered, register it otherwise, then read it back."""

        if self.exists(task.name):
            self.update_task(task)
        else:
            self.register_task(task)
        return self.get_task(task.name)

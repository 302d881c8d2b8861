"""Workflow definition façade (``/metadata/workflow``)."""

from __future__ import annotations


from netflix_conductor_client.errors import ReadBackMismatch
from netflix_conductor_client.models import WorkflowDefinition, WorkflowMetadataDefinition
from netflix_conductor_client.services.base import ConductorService


class WorkflowMetadataManager(ConductorService):
    """Register and read workflow definitions."""

    def get_all_workflows(self) -> list[WorkflowDefinition]:
        resp = self._session.get(self._url("metadata", "workflow"), timeout=self._timeout)
        payload = self._decode(resp) or []
        return [WorkflowDefinition.model_validate(item) for item in payload]

    def get_workflow(self, name: str, version: int | None = None) -> WorkflowDefinition | None:
        """Fetch a workflow definition, the latest version unless ``version`` is given."""

        params = {"version": version} if version is not None else None
        resp = self._session.get(
            self._url("metadata", "workflow", name),
            params=params,
            timeout=self._timeout,
        )
        payload = self._decode(resp)
        if payload is None:
            return None
        return WorkflowDefinition.model_validate(payload)

    def register_workflow(self, workflow: WorkflowMetadataDefinition) -> WorkflowDefinition:
        """Create a workflow definition and read back its latest version.

        Raises:
            ReadBackMismatch: If the confirming read does not return ``workflow.name``.
        """

        self._log.info(
            "Registering workflow definition",
            extra={"workflow": workflow.name, "version": workflow.version},
        )
        resp = self._session.post(
            self._url("metadata", "workflow"),
            json=workflow.to_payload(),
            timeout=self._timeout,
        )
        resp.raise_for_status()

        registered = self.get_workflow(workflow.name)
        if registered is None or registered.name != workflow.name:
            raise ReadBackMismatch(
                kind="workflow definition",
                expected=workflow.name,
                actual=registered.name if registered is not None else None,
            )
        return registered

    def register_or_update_workflow(
        self, workflow: WorkflowMetadataDefinition
    ) -> WorkflowDefinition | None:
        """Upsert a workflow definition, then read back the same name and version.

        The server's bulk ``PUT`` creates missing definitions and overwrites
        existing ones, so no existence check is needed.
        """

        self._log.info(
            "Upserting workflow definition",
            extra={"workflow": workflow.name, "version": workflow.version},
        )
        resp = self._session.put(
            self._url("metadata", "workflow"),
            json=[workflow.to_payload()],
            timeout=self._timeout,
        )
        resp.raise_for_status()
        return self.get_workflow(workflow.name, workflow.version)

"""Pydantic models for Conductor metadata and execution payloads.

The server speaks camelCase JSON; these models expose snake_case attributes and
accept either spelling on input. Fields the server adds that are not modelled
here are kept (``extra="allow"``) so a read-modify-write cycle does not drop them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ConductorModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body the Conductor server expects."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TaskMetadataDefinition(ConductorModel):
    """A task definition as submitted for registration."""

    name: str
    description: str | None = None
    retry_count: int | None = None
    retry_logic: str | None = None
    retry_delay_seconds: int | None = None
    timeout_seconds: int | None = None
    timeout_policy: str | None = None
    response_timeout_seconds: int | None = None
    poll_timeout_seconds: int | None = None
    input_keys: list[str] | None = None
    output_keys: list[str] | None = None
    input_template: dict[str, Any] | None = None
    concurrent_exec_limit: int | None = None
    rate_limit_per_frequency: int | None = None
    rate_limit_frequency_in_seconds: int | None = None
    owner_email: str | None = None


class TaskDefinition(TaskMetadataDefinition):
    """A task definition as returned by the server."""

    create_time: int | None = None
    update_time: int | None = None
    created_by: str | None = None
    updated_by: str | None = None


class WorkflowTask(ConductorModel):
    """One step of a workflow definition."""

    name: str
    task_reference_name: str
    type: str = "SIMPLE"
    description: str | None = None
    input_parameters: dict[str, Any] = Field(default_factory=dict)
    optional: bool | None = None
    start_delay: int | None = None


class WorkflowMetadataDefinition(ConductorModel):
    """A workflow definition as submitted for registration."""

    name: str
    version: int | None = None
    description: str | None = None
    tasks: list[WorkflowTask] = Field(default_factory=list)
    input_parameters: list[str] | None = None
    output_parameters: dict[str, Any] | None = None
    schema_version: int | None = 2
    restartable: bool | None = None
    failure_workflow: str | None = None
    workflow_status_listener_enabled: bool | None = None
    timeout_policy: str | None = None
    timeout_seconds: int | None = None
    owner_email: str | None = None


class WorkflowDefinition(WorkflowMetadataDefinition):
    """A workflow definition as returned by the server."""

    create_time: int | None = None
    update_time: int | None = None
    created_by: str | None = None
    updated_by: str | None = None


class Task(ConductorModel):
    """A task execution inside a workflow instance."""

    task_id: str | None = None
    task_type: str | None = None
    task_def_name: str | None = None
    reference_task_name: str | None = None
    status: str | None = None
    seq: int | None = None
    retry_count: int | None = None
    input_data: dict[str, Any] = Field(default_factory=dict)
    output_data: dict[str, Any] = Field(default_factory=dict)
    reason_for_incompletion: str | None = None
    scheduled_time: int | None = None
    start_time: int | None = None
    end_time: int | None = None
    worker_id: str | None = None


class Workflow(ConductorModel):
    """A running or completed workflow instance."""

    workflow_id: str
    workflow_name: str | None = None
    workflow_version: int | None = None
    status: str | None = None
    correlation_id: str | None = None
    input: dict[str, Any] = Field(default_factory=dict)
    output: dict[str, Any] = Field(default_factory=dict)
    tasks: list[Task] = Field(default_factory=list)
    reason_for_incompletion: str | None = None
    parent_workflow_id: str | None = None
    start_time: int | None = None
    end_time: int | None = None
    update_time: int | None = None


class StartWorkflowOptions(ConductorModel):
    """Request body for starting a workflow instance."""

    name: str
    version: int | None = None
    correlation_id: str | None = None
    input: dict[str, Any] = Field(default_factory=dict)
    task_to_domain: dict[str, str] | None = None
    priority: int | None = None


class RerunWorkflowOptions(ConductorModel):
    """Request body for re-running a workflow from a given task."""

    re_run_from_workflow_id: str | None = None
    workflow_input: dict[str, Any] | None = None
    re_run_from_task_id: str | None = None
    task_input: dict[str, Any] | None = None
    correlation_id: str | None = None


class SkipWorkflowTaskOptions(ConductorModel):
    """Which task to skip and, optionally, the input/output to record for it.

    ``task_reference_name`` travels in the URL path; only the remaining fields
    are sent in the body.
    """

    task_reference_name: str
    task_input: dict[str, Any] | None = None
    task_output: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude={"task_reference_name"},
        )

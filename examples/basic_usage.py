#!/usr/bin/env python3
"""Programmatic usage example.

This demonstrates using the service façades directly:

* load settings from `.env` (CONDUCTOR_API_ENDPOINT)
* register (or update) a task and a workflow definition
* start an instance of the workflow and print its state
"""

from __future__ import annotations

import argparse
from typing import Sequence

from netflix_conductor_client import ConductorServices, ConductorSettings
from netflix_conductor_client.logging import configure_logging
from netflix_conductor_client.models import (
    StartWorkflowOptions,
    TaskMetadataDefinition,
    WorkflowMetadataDefinition,
    WorkflowTask,
)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Register and start a one-task workflow.")
    parser.add_argument("--workflow", default="hello_workflow", help="Workflow name")
    parser.add_argument("--task", default="hello_task", help="Task definition name")
    parser.add_argument("--owner", default="ops@example.com", help="Owner email")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = ConductorSettings()
    configure_logging(settings.log_level)

    services = ConductorServices.for_root(settings)
    try:
        services.task_metadata.register_or_update_task(
            TaskMetadataDefinition(name=args.task, retry_count=1, owner_email=args.owner)
        )
        definition = services.workflow_metadata.register_or_update_workflow(
            WorkflowMetadataDefinition(
                name=args.workflow,
                version=1,
                tasks=[WorkflowTask(name=args.task, task_reference_name=f"{args.task}_ref")],
                owner_email=args.owner,
            )
        )
        print(f"Workflow definition ready: {args.workflow} v{definition.version if definition else '?'}")

        workflow = services.workflows.start_workflow(
            StartWorkflowOptions(name=args.workflow, version=1, input={"greeting": "hello"})
        )
        print(f"Started {workflow.workflow_id}: {workflow.status}")
    finally:
        services.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""CLI entrypoint: one subcommand per façade operation.

Results are printed as JSON on stdout; logs go to stderr.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import requests
from pydantic import BaseModel, ValidationError

from netflix_conductor_client import __version__
from netflix_conductor_client.config import ConductorSettings
from netflix_conductor_client.errors import ReadBackMismatch
from netflix_conductor_client.logging import configure_logging
from netflix_conductor_client.models import (
    StartWorkflowOptions,
    TaskMetadataDefinition,
    WorkflowMetadataDefinition,
)
from netflix_conductor_client.providers import ConductorServices

logger = logging.getLogger(__name__)

_INSTANCE_ACTIONS = ("terminate", "pause", "resume", "restart", "retry", "remove")


def _load_json_file(path: str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _emit(value: Any) -> None:
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_none=True)
    elif isinstance(value, list):
        value = [
            v.model_dump(mode="json", by_alias=True, exclude_none=True)
            if isinstance(v, BaseModel)
            else v
            for v in value
        ]
    print(json.dumps(value, indent=2, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conductor-client",
        description="Command-line access to a Netflix Conductor server",
    )
    parser.add_argument(
        "--version", action="version", version=f"netflix-conductor-client {__version__}"
    )
    parser.add_argument(
        "--endpoint",
        default=None,
        help="Conductor API base URL (overrides CONDUCTOR_API_ENDPOINT)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-tasks", help="List all task definitions")

    get_task = subparsers.add_parser("get-task", help="Show one task definition")
    get_task.add_argument("name", help="Task type")

    register_task = subparsers.add_parser(
        "register-task", help="Register a task definition from a JSON file"
    )
    register_task.add_argument("file", help="Path to a task definition JSON document")
    register_task.add_argument(
        "--upsert",
        action="store_true",
        help="Update the definition if it is already registered",
    )

    delete_task = subparsers.add_parser("delete-task", help="Delete a task definition")
    delete_task.add_argument("name", help="Task type")

    subparsers.add_parser("list-workflows", help="List all workflow definitions")

    get_workflow = subparsers.add_parser("get-workflow", help="Show one workflow definition")
    get_workflow.add_argument("name", help="Workflow name")
    get_workflow.add_argument(
        "--version", dest="workflow_version", type=int, default=None, help="Definition version"
    )

    register_workflow = subparsers.add_parser(
        "register-workflow", help="Register a workflow definition from a JSON file"
    )
    register_workflow.add_argument("file", help="Path to a workflow definition JSON document")
    register_workflow.add_argument(
        "--upsert",
        action="store_true",
        help="Create or overwrite the definition (bulk PUT) instead of POST",
    )

    get_instance = subparsers.add_parser("get-instance", help="Show a workflow instance")
    get_instance.add_argument("workflow_id", help="Workflow instance id")
    get_instance.add_argument(
        "--include-tasks", action="store_true", help="Include executed and scheduled tasks"
    )

    start = subparsers.add_parser("start-workflow", help="Start a workflow instance")
    start.add_argument("name", help="Workflow name")
    start.add_argument(
        "--version", dest="workflow_version", type=int, default=None, help="Definition version"
    )
    start.add_argument("--correlation-id", default=None, help="Correlation id")
    start.add_argument(
        "--input",
        dest="input_file",
        default=None,
        help="Path to a JSON document used as workflow input",
    )

    for action in _INSTANCE_ACTIONS:
        sub = subparsers.add_parser(action, help=f"{action.capitalize()} a workflow instance")
        sub.add_argument("workflow_id", help="Workflow instance id")
        if action == "terminate":
            sub.add_argument("--reason", default=None, help="Termination reason")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = ConductorSettings()
        if args.endpoint:
            settings = settings.model_copy(update={"api_endpoint": args.endpoint})
        services = ConductorServices.for_root(settings)
    except (ValidationError, ValueError) as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print(
            "Configuration error (check CONDUCTOR_API_ENDPOINT/--endpoint and LOG_LEVEL):",
            file=sys.stderr,
        )
        print(e, file=sys.stderr)
        return 2

    try:
        configure_logging(settings.log_level)

        if args.command == "list-tasks":
            _emit(services.task_metadata.get_all_tasks())
            return 0

        if args.command == "get-task":
            _emit(services.task_metadata.get_task(args.name))
            return 0

        if args.command == "register-task":
            task = TaskMetadataDefinition.model_validate(_load_json_file(args.file))
            if args.upsert:
                _emit(services.task_metadata.register_or_update_task(task))
            else:
                _emit(services.task_metadata.register_task(task))
            return 0

        if args.command == "delete-task":
            services.task_metadata.delete_task(args.name)
            print(f"Deleted task definition {args.name!r}")
            return 0

        if args.command == "list-workflows":
            _emit(services.workflow_metadata.get_all_workflows())
            return 0

        if args.command == "get-workflow":
            _emit(services.workflow_metadata.get_workflow(args.name, args.workflow_version))
            return 0

        if args.command == "register-workflow":
            workflow = WorkflowMetadataDefinition.model_validate(_load_json_file(args.file))
            if args.upsert:
                _emit(services.workflow_metadata.register_or_update_workflow(workflow))
            else:
                _emit(services.workflow_metadata.register_workflow(workflow))
            return 0

        if args.command == "get-instance":
            _emit(
                services.workflows.retrieve_workflow(
                    args.workflow_id, include_tasks=args.include_tasks
                )
            )
            return 0

        if args.command == "start-workflow":
            workflow_input = _load_json_file(args.input_file) if args.input_file else {}
            options = StartWorkflowOptions(
                name=args.name,
                version=args.workflow_version,
                correlation_id=args.correlation_id,
                input=workflow_input,
            )
            _emit(services.workflows.start_workflow(options))
            return 0

        if args.command == "terminate":
            _emit(services.workflows.terminate_workflow(args.workflow_id, reason=args.reason))
            return 0

        if args.command in _INSTANCE_ACTIONS:
            action = getattr(services.workflows, f"{args.command}_workflow")
            _emit(action(args.workflow_id))
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except ReadBackMismatch as e:
        logger.error(str(e), extra={"kind": e.kind, "expected": e.expected})
        print(str(e), file=sys.stderr)
        return 1

    except requests.RequestException:
        logger.exception("Conductor request failed", extra={"command": args.command})
        return 1

    except (OSError, ValueError) as e:
        # Unreadable input file, malformed JSON or a document that is not a valid definition.
        logger.error("Invalid input", extra={"command": args.command, "error": str(e)})
        print(str(e), file=sys.stderr)
        return 2

    finally:
        services.close()


if __name__ == "__main__":
    raise SystemExit(main())

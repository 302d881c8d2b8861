"""Service façades, one per Conductor resource family."""

from netflix_conductor_client.services.task_metadata import TaskMetadataManager
from netflix_conductor_client.services.workflow_manager import WorkflowManager
from netflix_conductor_client.services.workflow_metadata import WorkflowMetadataManager

__all__ = [
    "TaskMetadataManager",
    "WorkflowManager",
    "WorkflowMetadataManager",
]

"""Netflix Conductor REST client.

Three service façades over the Conductor server API:
- task definitions (``TaskMetadataManager``)
- workflow definitions (``WorkflowMetadataManager``)
- workflow instances (``WorkflowManager``)

plus a FastAPI injection layer and a small CLI.
"""

__version__ = "0.1.0"

from netflix_conductor_client.config import ConductorSettings
from netflix_conductor_client.errors import ReadBackMismatch
from netflix_conductor_client.providers import ConductorServices
from netflix_conductor_client.services import (
    TaskMetadataManager,
    WorkflowManager,
    WorkflowMetadataManager,
)

__all__ = [
    "__version__",
    "ConductorServices",
    "ConductorSettings",
    "ReadBackMismatch",
    "TaskMetadataManager",
    "WorkflowManager",
    "WorkflowMetadataManager",
]

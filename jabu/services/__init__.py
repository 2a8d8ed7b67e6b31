"""
Service layer for jabu.

Contains the logic that coordinates tasks, domain objects and
infrastructure:
- TaskRegistry: named tasks
- Orchestrator: tool checks, argument validation, dependency chains
- DependencyService: moving artifacts between the repositories and a project
"""

from .dependency_service import DependencyService
from .orchestrator import Orchestrator, TaskState
from .task_registry import TaskDescriptor, TaskRegistry

__all__ = [
    'DependencyService',
    'Orchestrator',
    'TaskState',
    'TaskDescriptor',
    'TaskRegistry',
]

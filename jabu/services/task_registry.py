"""
Task registry for jabu.

Maps task names to task objects. Registration never overwrites: the first
task registered under a name stays.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple

from ..args import Options
from ..tasks.base import Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskDescriptor:
    """What a registered task declares about itself."""
    name: str
    description: str
    required_tools: FrozenSet[str]
    dependency_specs: Dict[str, Tuple[str, ...]]
    options: Optional[Options] = None


class TaskRegistry:
    """
    Named, pluggable tasks.

    Example:
        registry = TaskRegistry()
        registry.register("build", BuildTask())   # True
        registry.register("build", OtherTask())   # False, first one stays
    """

    def __init__(self):
        self._tasks: Dict[str, Task] = {}

    def register(self, name: str, task: Task) -> bool:
        """
        Register ``task`` under ``name``.

        Returns:
            False if the name is already taken (nothing is replaced)
        """
        if name in self._tasks:
            logger.debug(f"Task '{name}' is already registered, ignoring")
            return False
        self._tasks[name] = task
        return True

    def remove(self, name: str) -> Optional[Task]:
        return self._tasks.pop(name, None)

    def get(self, name: str) -> Optional[Task]:
        return self._tasks.get(name)

    def names(self) -> List[str]:
        return sorted(self._tasks)

    def describe(self, name: str) -> Optional[TaskDescriptor]:
        task = self.get(name)
        if task is None:
            return None
        return TaskDescriptor(
            name=name,
            description=task.description,
            required_tools=frozenset(task.required_tools),
            dependency_specs={
                dep: tuple(args) for dep, args in task.dependency_specs().items()
            },
            options=task.options(),
        )

    def descriptors(self) -> List[TaskDescriptor]:
        return [self.describe(name) for name in self.names()]

    def __contains__(self, name: str) -> bool:
        return name in self._tasks

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._tasks)

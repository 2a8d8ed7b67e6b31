"""Task interface; the built-in tasks live in ``jabu.tasks.impls``."""

from .base import Task, TaskContext, TopLevelTask

__all__ = ['Task', 'TaskContext', 'TopLevelTask']

"""Persisted task collection and the operations that mutate it."""

from .dispatcher import TaskDispatcher
from .models import Task, TaskFilter
from .store import TaskStore

__all__ = ["Task", "TaskFilter", "TaskStore", "TaskDispatcher"]

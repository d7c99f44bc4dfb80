"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

from functools import lru_cache

from src.sticky_todo.config import Config
from src.sticky_todo.logger import setup_logger
from src.todo_store import Task, TaskDispatcher, TaskStore

from .schemas import TaskResponse

config = Config.from_yaml()
setup_logger(log_level=config.log_level, log_file=config.log_file)


@lru_cache(maxsize=1)
def get_task_dispatcher() -> TaskDispatcher:
    """Singleton TaskDispatcher over an initialized TaskStore."""
    store = TaskStore(
        data_path=config.storage.data_path(),
        legacy_path=config.storage.legacy_path(),
    )
    store.initialize()
    return TaskDispatcher(store)


def serialize_task(task: Task) -> TaskResponse:
    """Convert domain Task to API response."""
    return TaskResponse(
        id=task.id,
        text=task.text,
        completed=task.completed,
        created_at=task.created_at,
    )


def deserialize_task(payload: TaskResponse) -> Task:
    """Convert an API payload back to a domain Task."""
    return Task(
        id=payload.id,
        text=payload.text,
        completed=payload.completed,
        created_at=payload.created_at,
    )

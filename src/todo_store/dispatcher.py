"""Named task operations performing read-modify-write cycles against a TaskStore."""

from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from .models import Task, TaskFilter
from .store import TaskStore

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _coerce_id(value: Any) -> Optional[int]:
    """Integer value of a client-supplied id, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class TaskDispatcher:
    """Serializes task operations over a single TaskStore instance.

    Every operation holds the lock for its whole read-modify-write span, so two
    callers can never interleave between one's read and the other's write.
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._lock = threading.Lock()

    def list(self, task_filter: TaskFilter = TaskFilter.ALL) -> List[Task]:
        with self._lock:
            tasks = self._store.read_all()
        if task_filter is TaskFilter.ACTIVE:
            return [task for task in tasks if not task.completed]
        if task_filter is TaskFilter.COMPLETED:
            return [task for task in tasks if task.completed]
        return tasks

    def get(self, task_id: int) -> Optional[Task]:
        with self._lock:
            tasks = self._store.read_all()
        for task in tasks:
            if task.id == task_id:
                return task
        return None

    def stats(self) -> Dict[str, int]:
        """Pending/completed counters for the whole collection."""
        tasks = self.list()
        completed = sum(1 for task in tasks if task.completed)
        return {"total": len(tasks), "pending": len(tasks) - completed, "completed": completed}

    def add(self, text: str) -> Task:
        with self._lock:
            tasks = self._store.read_all()
            task = Task(
                id=self._next_id(tasks),
                text=text,
                completed=False,
                created_at=_now_iso(),
            )
            tasks.append(task)
            self._store.write_all(tasks)
        logger.info("Task added id=%s", task.id)
        return task

    def update(self, task: Task) -> Task:
        """Replace the stored record with the same id.

        An unknown id leaves the file untouched; the input is returned either way.
        """
        with self._lock:
            tasks = self._store.read_all()
            for index, current in enumerate(tasks):
                if current.id == task.id:
                    tasks[index] = task
                    self._store.write_all(tasks)
                    logger.info("Task updated id=%s completed=%s", task.id, task.completed)
                    break
            else:
                logger.warning("Update ignored, no task with id=%s", task.id)
        return task

    def delete(self, task_id: int) -> bool:
        with self._lock:
            tasks = self._store.read_all()
            remaining = [task for task in tasks if task.id != task_id]
            self._store.write_all(remaining)
        logger.info("Task deleted id=%s removed=%d", task_id, len(tasks) - len(remaining))
        return True

    def clear_completed(self) -> bool:
        with self._lock:
            tasks = self._store.read_all()
            remaining = [task for task in tasks if not task.completed]
            self._store.write_all(remaining)
        logger.info("Cleared %d completed tasks", len(tasks) - len(remaining))
        return True

    def reorder(self, ids: Sequence[Any]) -> bool:
        """Put tasks in the given id order.

        Unknown or non-numeric ids are dropped. Stored tasks missing from ``ids``
        keep their relative order and go to the end.
        """
        if not isinstance(ids, (list, tuple)):
            logger.warning("Reorder rejected, expected a list of ids: %r", type(ids).__name__)
            return False

        with self._lock:
            tasks = self._store.read_all()
            by_id = {task.id: task for task in tasks}

            ordered: List[Task] = []
            seen = set()
            for raw_id in ids:
                task_id = _coerce_id(raw_id)
                if task_id is None or task_id in seen or task_id not in by_id:
                    continue
                seen.add(task_id)
                ordered.append(by_id[task_id])

            ordered.extend(task for task in tasks if task.id not in seen)
            self._store.write_all(ordered)
        logger.info("Reordered %d tasks (%d placed explicitly)", len(ordered), len(seen))
        return True

    @staticmethod
    def _next_id(tasks: Sequence[Task]) -> int:
        # milliseconds since epoch, bumped past the largest existing id
        candidate = int(time.time() * 1000)
        if tasks:
            candidate = max(candidate, max(task.id for task in tasks) + 1)
        return candidate

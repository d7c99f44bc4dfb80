"""Todo endpoints."""

from __future__ import annotations

import asyncio
import logging
from typing import List

from fastapi import FastAPI, HTTPException

from src.todo_store import TaskFilter

from ..dependencies import deserialize_task, get_task_dispatcher, serialize_task
from ..schemas import (
    ReorderRequest,
    SuccessResponse,
    TaskCreateRequest,
    TaskResponse,
    TaskStatsResponse,
    TaskUpdateRequest,
)

logger = logging.getLogger(__name__)


def register_todo_routes(app: FastAPI) -> None:
    """Register todo endpoints mirroring the dispatcher operations."""

    @app.get("/api/todos", response_model=List[TaskResponse])
    async def list_todos(filter: TaskFilter = TaskFilter.ALL) -> List[TaskResponse]:
        """List todos in their persisted display order."""
        dispatcher = get_task_dispatcher()
        try:
            tasks = await asyncio.to_thread(dispatcher.list, filter)
            return [serialize_task(task) for task in tasks]
        except Exception as exc:
            logger.exception("Failed to list todos: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to list todos") from exc

    @app.get("/api/todos/stats", response_model=TaskStatsResponse)
    async def todo_stats() -> TaskStatsResponse:
        """Pending and completed counts."""
        dispatcher = get_task_dispatcher()
        try:
            stats = await asyncio.to_thread(dispatcher.stats)
            return TaskStatsResponse(**stats)
        except Exception as exc:
            logger.exception("Failed to compute todo stats: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to compute stats") from exc

    @app.get("/api/todos/{todo_id}", response_model=TaskResponse)
    async def get_todo(todo_id: int) -> TaskResponse:
        dispatcher = get_task_dispatcher()
        task = await asyncio.to_thread(dispatcher.get, todo_id)
        if task is None:
            raise HTTPException(status_code=404, detail="Todo not found")
        return serialize_task(task)

    @app.post("/api/todos", response_model=TaskResponse)
    async def create_todo(request: TaskCreateRequest) -> TaskResponse:
        """Create a new todo at the end of the list."""
        dispatcher = get_task_dispatcher()
        try:
            task = await asyncio.to_thread(dispatcher.add, request.text)
            return serialize_task(task)
        except Exception as exc:
            logger.exception("Failed to create todo: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to create todo") from exc

    @app.put("/api/todos/{todo_id}", response_model=TaskResponse)
    async def update_todo(todo_id: int, request: TaskUpdateRequest) -> TaskResponse:
        """Replace a todo with the supplied record (text edits and toggles)."""
        if request.id != todo_id:
            raise HTTPException(status_code=400, detail="Todo id does not match path")
        dispatcher = get_task_dispatcher()
        try:
            task = await asyncio.to_thread(dispatcher.update, deserialize_task(request))
            return serialize_task(task)
        except Exception as exc:
            logger.exception("Failed to update todo: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to update todo") from exc

    @app.delete("/api/todos/{todo_id}", response_model=SuccessResponse)
    async def delete_todo(todo_id: int) -> SuccessResponse:
        dispatcher = get_task_dispatcher()
        try:
            success = await asyncio.to_thread(dispatcher.delete, todo_id)
            return SuccessResponse(success=success)
        except Exception as exc:
            logger.exception("Failed to delete todo: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to delete todo") from exc

    @app.post("/api/todos/clear-completed", response_model=SuccessResponse)
    async def clear_completed() -> SuccessResponse:
        dispatcher = get_task_dispatcher()
        try:
            success = await asyncio.to_thread(dispatcher.clear_completed)
            return SuccessResponse(success=success)
        except Exception as exc:
            logger.exception("Failed to clear completed todos: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to clear completed") from exc

    @app.post("/api/todos/reorder", response_model=SuccessResponse)
    async def reorder_todos(request: ReorderRequest) -> SuccessResponse:
        """Apply a new display order; malformed ids yield success=false."""
        dispatcher = get_task_dispatcher()
        try:
            success = await asyncio.to_thread(dispatcher.reorder, request.ids)
            return SuccessResponse(success=success)
        except Exception as exc:
            logger.exception("Failed to reorder todos: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to reorder todos") from exc

"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str


class TaskResponse(BaseModel):
    """Serialized task record (same shape as the on-disk record)."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    text: str
    completed: bool = False
    created_at: str = Field(default="", alias="createdAt")


class TaskUpdateRequest(TaskResponse):
    """Full task record sent back by the client to replace the stored one."""


class TaskCreateRequest(BaseModel):
    """Request body for creating a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(..., min_length=1, max_length=2000)


class ReorderRequest(BaseModel):
    """Request body for reordering tasks.

    ``ids`` is left untyped so that malformed input reaches the dispatcher,
    which reports it as an unsuccessful reorder instead of a validation error.
    """

    ids: Any = Field(default=None, description="Task ids in the new display order")


class SuccessResponse(BaseModel):
    """Boolean outcome of a mutation."""

    success: bool


class TaskStatsResponse(BaseModel):
    """Counters shown in the window footer."""

    total: int
    pending: int
    completed: int

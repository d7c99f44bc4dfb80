from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class TaskFilter(str, Enum):
    """一覧表示用のフィルタ。"""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    """永続化済みタスクの表現。

    textはインラインのタグ・優先度・期限マーカーを含み得るが、
    ストア側では不透明な文字列として扱う。
    """

    id: int
    text: str
    completed: bool = False
    created_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """JSONオブジェクトからTaskを復元する。

        Raises:
            ValueError: 必須フィールドが欠けている、または型が不正な場合
        """
        if not isinstance(data, dict):
            raise ValueError(f"task record must be an object, got {type(data).__name__}")

        task_id = data.get("id")
        # bool is an int subclass
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError(f"invalid task id: {task_id!r}")

        text = data.get("text")
        if not isinstance(text, str):
            raise ValueError(f"invalid text for task {task_id}")

        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"invalid completed flag for task {task_id}")

        created_at = data.get("createdAt", "")
        if not isinstance(created_at, str):
            raise ValueError(f"invalid createdAt for task {task_id}")

        return cls(id=task_id, text=text, completed=completed, created_at=created_at)

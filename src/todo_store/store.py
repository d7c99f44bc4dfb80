from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Iterable, List, Optional

from .models import Task
from .paths import default_data_path, legacy_data_path

logger = logging.getLogger(__name__)


class TaskStore:
    """JSONファイルベースのタスク保存先。

    コレクション全体を1つのJSON配列として保持し、更新のたびにファイル全体を
    書き換える。読み書きの失敗はログに残して握りつぶす（fail-soft）。
    ファイルロックやアトミックなリネームは行わない。
    """

    def __init__(self, data_path: Optional[Path] = None, legacy_path: Optional[Path] = None):
        self.data_path = Path(data_path) if data_path else default_data_path()
        self.legacy_path = Path(legacy_path) if legacy_path else legacy_data_path()

    def initialize(self) -> None:
        """保存先を用意する。初回起動時のみ旧バージョンのファイルを移行する。

        - 正規の場所にファイルがあれば何もしない
        - なければ旧ファイルの内容をそのままコピーする
        - どちらもなければ空のコレクションを書き込む
        """
        try:
            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            if self.data_path.exists():
                return

            if self.legacy_path.is_file():
                shutil.copyfile(self.legacy_path, self.data_path)
                logger.info("Migrated task file %s -> %s", self.legacy_path, self.data_path)
                return

            self.data_path.write_bytes(self._encode([]).encode("utf-8"))
            logger.info("Created empty task file at %s", self.data_path)
        except OSError:
            logger.exception("Failed to initialize task storage at %s", self.data_path)

    def read_all(self) -> List[Task]:
        """保存済みの全タスクを読み込む。失敗時は空リストを返す。"""
        try:
            raw = self.data_path.read_bytes().decode("utf-8")
        except FileNotFoundError:
            logger.warning("Task file not found: %s", self.data_path)
            return []
        except OSError:
            logger.exception("Failed to read task file %s", self.data_path)
            return []
        except UnicodeDecodeError as exc:
            logger.error("Task file %s is not valid UTF-8: %s", self.data_path, exc)
            return []

        try:
            tasks = self._decode(raw)
        except (ValueError, RecursionError) as exc:
            logger.error("Invalid task file %s: %s", self.data_path, exc)
            return []

        logger.debug("Loaded %d tasks from %s", len(tasks), self.data_path)
        return tasks

    def write_all(self, tasks: Iterable[Task]) -> None:
        """全タスクを書き込み、以前の内容を置き換える。失敗時はログのみ。

        エンコードはファイルを開く前に済ませるため、エンコード失敗時は
        既存の内容がそのまま残る。
        """
        try:
            data = self._encode(tasks).encode("utf-8")
        except (TypeError, ValueError):
            logger.exception("Failed to encode tasks for %s", self.data_path)
            return

        try:
            self.data_path.write_bytes(data)
        except OSError:
            logger.exception("Failed to write task file %s", self.data_path)

    @staticmethod
    def _encode(tasks: Iterable[Task]) -> str:
        return json.dumps([task.to_dict() for task in tasks], ensure_ascii=False, indent=2)

    @staticmethod
    def _decode(raw: str) -> List[Task]:
        # JSONDecodeError is a ValueError
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        return [Task.from_dict(item) for item in data]

"""
設定管理モジュール

関連クラス:
  - todo_store.TaskStore: storage設定から保存先パスを受け取る
  - server.dependencies: 起動時にConfig.from_yamlを呼び出す
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from src.todo_store.paths import DATA_FILE_NAME, default_data_dir, legacy_data_path


@dataclass
class StorageConfig:
    """タスクファイルの保存先設定"""

    data_dir: str = ""
    legacy_dir: str = ""
    file_name: str = DATA_FILE_NAME

    def data_path(self) -> Path:
        """正規のタスクファイルパス（STICKY_TODO_DATA_PATHが最優先）"""
        env_path = os.getenv("STICKY_TODO_DATA_PATH")
        if env_path:
            return Path(env_path)
        base = Path(self.data_dir).expanduser() if self.data_dir else default_data_dir()
        return base / self.file_name

    def legacy_path(self) -> Path:
        """移行元となる旧バージョンのタスクファイルパス"""
        env_path = os.getenv("STICKY_TODO_LEGACY_PATH")
        if env_path:
            return Path(env_path)
        if self.legacy_dir:
            return Path(self.legacy_dir).expanduser() / self.file_name
        return legacy_data_path(file_name=self.file_name)


@dataclass
class ServerConfig:
    """HTTPサーバー設定"""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class Config:
    """アプリケーション設定クラス"""

    storage: StorageConfig = None  # type: ignore
    server: ServerConfig = None  # type: ignore

    # ログ設定
    log_level: str = "INFO"
    log_file: str = "logs/sticky_todo.log"

    def __post_init__(self):
        """デフォルト値の初期化"""
        if self.storage is None:
            self.storage = StorageConfig()
        if self.server is None:
            self.server = ServerConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス（省略時はconfig/app_config.yamlを使用）

        Returns:
            Config: 設定インスタンス（ファイルがなければデフォルト値）
        """
        if config_path is None:
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / "config" / "app_config.yaml"

        yaml_data: Dict[str, Any] = {}
        if Path(config_path).exists():
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}

        storage_data = yaml_data.get("storage") or {}
        server_data = yaml_data.get("server") or {}
        log_data = yaml_data.get("log") or {}

        return cls(
            storage=StorageConfig(
                data_dir=storage_data.get("data_dir") or "",
                legacy_dir=storage_data.get("legacy_dir") or "",
                file_name=storage_data.get("file_name") or DATA_FILE_NAME,
            ),
            server=ServerConfig(
                host=server_data.get("host", "127.0.0.1"),
                port=int(server_data.get("port", 8000)),
            ),
            log_level=os.getenv("LOG_LEVEL", log_data.get("level", "INFO")),
            log_file=log_data.get("file", "logs/sticky_todo.log"),
        )

"""
ロギング設定モジュール

ストアの失敗はfail-softで握りつぶされるため、ファイルログが唯一の記録になる。
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# uvicornのアクセスログはコンソールでは冗長なのでWARNING以上に絞る
QUIET_LOGGERS = ("uvicorn.access", "httpx")


def setup_logger(log_level: str = "INFO", log_file: str = "logs/sticky_todo.log") -> logging.Logger:
    """
    ロガーのセットアップ

    ルートロガーの既存ハンドラを入れ替えるので、複数回呼んでも出力は重複しない。
    ファイルには常にDEBUG以上、コンソールにはlog_level以上を出力する。

    Args:
        log_level: コンソールのログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: ログファイルのパス

    Returns:
        設定済みのルートロガー
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    console.setFormatter(formatter)
    root.addHandler(console)

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root

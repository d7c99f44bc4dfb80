#!/usr/bin/env python3
"""
タスク管理CLI - デスクトップ版と同じタスクファイルを操作するコマンドラインインターフェース

Usage:
    python -m src.todo_store list [--filter all|active|completed] [--format json|text]
    python -m src.todo_store add "テキスト" [--format json|text]
    python -m src.todo_store edit --id ID --text "新しいテキスト"
    python -m src.todo_store toggle --id ID
    python -m src.todo_store delete --id ID
    python -m src.todo_store clear-completed
    python -m src.todo_store reorder ID [ID ...]
    python -m src.todo_store stats [--format json|text]
    python -m src.todo_store get --id ID [--format json|text]
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .dispatcher import TaskDispatcher
from .models import Task, TaskFilter
from .paths import legacy_data_path
from .store import TaskStore


def format_task_text(task: Task) -> str:
    """タスクをテキスト形式で整形"""
    mark = "x" if task.completed else " "
    return f"[{mark}] {task.id} | {task.text}"


def _print_task(task: Task, output_format: str, prefix: str = "") -> None:
    if output_format == "json":
        print(json.dumps(task.to_dict(), ensure_ascii=False))
    else:
        print(f"{prefix}{format_task_text(task)}")


def _print_success(success: bool, output_format: str, message: str) -> None:
    if output_format == "json":
        print(json.dumps({"success": success}))
    else:
        print(message)


def cmd_list(dispatcher: TaskDispatcher, task_filter: str, output_format: str) -> int:
    """タスク一覧を表示"""
    tasks = dispatcher.list(TaskFilter(task_filter))
    if output_format == "json":
        print(json.dumps([task.to_dict() for task in tasks], ensure_ascii=False))
    elif not tasks:
        print("タスクはありません。")
    else:
        for task in tasks:
            print(format_task_text(task))
    return 0


def cmd_add(dispatcher: TaskDispatcher, text: str, output_format: str) -> int:
    """新しいタスクを追加"""
    text = text.strip()
    if not text:
        print("Error: テキストは必須です。", file=sys.stderr)
        return 1
    created = dispatcher.add(text)
    _print_task(created, output_format, prefix="追加しました: ")
    return 0


def cmd_edit(dispatcher: TaskDispatcher, task_id: int, text: str, output_format: str) -> int:
    """タスクのテキストを変更"""
    text = text.strip()
    if not text:
        print("Error: テキストは必須です。", file=sys.stderr)
        return 1
    current = dispatcher.get(task_id)
    if current is None:
        print(f"Error: ID {task_id} のタスクが見つかりません。", file=sys.stderr)
        return 1
    updated = dispatcher.update(replace(current, text=text))
    _print_task(updated, output_format, prefix="更新しました: ")
    return 0


def cmd_toggle(dispatcher: TaskDispatcher, task_id: int, output_format: str) -> int:
    """完了状態を切り替え"""
    current = dispatcher.get(task_id)
    if current is None:
        print(f"Error: ID {task_id} のタスクが見つかりません。", file=sys.stderr)
        return 1
    updated = dispatcher.update(replace(current, completed=not current.completed))
    _print_task(updated, output_format, prefix="切り替えました: ")
    return 0


def cmd_delete(dispatcher: TaskDispatcher, task_id: int, output_format: str) -> int:
    """タスクを削除"""
    success = dispatcher.delete(task_id)
    _print_success(success, output_format, f"削除しました: ID {task_id}")
    return 0


def cmd_clear_completed(dispatcher: TaskDispatcher, output_format: str) -> int:
    """完了済みタスクを一括削除"""
    success = dispatcher.clear_completed()
    _print_success(success, output_format, "完了済みタスクを削除しました。")
    return 0


def cmd_reorder(dispatcher: TaskDispatcher, ids: List[str], output_format: str) -> int:
    """タスクの並び順を変更"""
    success = dispatcher.reorder(ids)
    _print_success(success, output_format, "並び替えました。")
    return 0 if success else 1


def cmd_stats(dispatcher: TaskDispatcher, output_format: str) -> int:
    """件数を表示"""
    stats = dispatcher.stats()
    if output_format == "json":
        print(json.dumps(stats))
    else:
        print(f"{stats['pending']} 件未完了 / {stats['completed']} 件完了")
    return 0


def cmd_get(dispatcher: TaskDispatcher, task_id: int, output_format: str) -> int:
    """特定のタスクを取得"""
    task = dispatcher.get(task_id)
    if task is None:
        print(f"Error: ID {task_id} のタスクが見つかりません。", file=sys.stderr)
        return 1
    _print_task(task, output_format)
    return 0


def _add_format_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="出力フォーマット（デフォルト: text）",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="タスク管理CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--data-path", type=str, help="タスクファイルのパス")
    parser.add_argument("--legacy-path", type=str, help="旧バージョンのタスクファイルのパス")

    subparsers = parser.add_subparsers(dest="command", help="実行するコマンド", required=True)

    parser_list = subparsers.add_parser("list", help="タスク一覧を表示")
    parser_list.add_argument(
        "--filter",
        choices=[f.value for f in TaskFilter],
        default=TaskFilter.ALL.value,
        help="表示するタスク（デフォルト: all）",
    )
    _add_format_option(parser_list)

    parser_add = subparsers.add_parser("add", help="新しいタスクを追加")
    parser_add.add_argument("text", help="タスクのテキスト")
    _add_format_option(parser_add)

    parser_edit = subparsers.add_parser("edit", help="タスクのテキストを変更")
    parser_edit.add_argument("--id", type=int, required=True, help="変更するタスクのID")
    parser_edit.add_argument("--text", required=True, help="新しいテキスト")
    _add_format_option(parser_edit)

    parser_toggle = subparsers.add_parser("toggle", help="完了状態を切り替え")
    parser_toggle.add_argument("--id", type=int, required=True, help="対象タスクのID")
    _add_format_option(parser_toggle)

    parser_delete = subparsers.add_parser("delete", help="タスクを削除")
    parser_delete.add_argument("--id", type=int, required=True, help="削除するタスクのID")
    _add_format_option(parser_delete)

    parser_clear = subparsers.add_parser("clear-completed", help="完了済みタスクを削除")
    _add_format_option(parser_clear)

    parser_reorder = subparsers.add_parser("reorder", help="タスクを並び替え")
    parser_reorder.add_argument("ids", nargs="+", help="新しい順序でのタスクID")
    _add_format_option(parser_reorder)

    parser_stats = subparsers.add_parser("stats", help="件数を表示")
    _add_format_option(parser_stats)

    parser_get = subparsers.add_parser("get", help="特定のタスクを取得")
    parser_get.add_argument("--id", type=int, required=True, help="取得するタスクのID")
    _add_format_option(parser_get)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLIエントリポイント"""
    args = build_parser().parse_args(argv)

    store = TaskStore(
        data_path=Path(args.data_path) if args.data_path else None,
        legacy_path=Path(args.legacy_path) if args.legacy_path else legacy_data_path(),
    )
    store.initialize()
    dispatcher = TaskDispatcher(store)

    if args.command == "list":
        return cmd_list(dispatcher, args.filter, args.format)
    elif args.command == "add":
        return cmd_add(dispatcher, args.text, args.format)
    elif args.command == "edit":
        return cmd_edit(dispatcher, args.id, args.text, args.format)
    elif args.command == "toggle":
        return cmd_toggle(dispatcher, args.id, args.format)
    elif args.command == "delete":
        return cmd_delete(dispatcher, args.id, args.format)
    elif args.command == "clear-completed":
        return cmd_clear_completed(dispatcher, args.format)
    elif args.command == "reorder":
        return cmd_reorder(dispatcher, args.ids, args.format)
    elif args.command == "stats":
        return cmd_stats(dispatcher, args.format)
    elif args.command == "get":
        return cmd_get(dispatcher, args.id, args.format)
    else:
        print(f"Error: 不明なコマンド: {args.command}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

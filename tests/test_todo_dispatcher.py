"""TaskDispatcherのテストコード"""

import threading
from dataclasses import replace

import pytest

from src.todo_store import Task, TaskDispatcher, TaskFilter, TaskStore


@pytest.fixture
def store(tmp_path):
    store = TaskStore(data_path=tmp_path / "todos.json", legacy_path=tmp_path / "legacy.json")
    store.initialize()
    return store


@pytest.fixture
def dispatcher(store):
    return TaskDispatcher(store)


def _ids(tasks):
    return [task.id for task in tasks]


def test_add_appends_in_order(dispatcher):
    """追加順に末尾へ並び、IDは一意"""
    created = [dispatcher.add(text) for text in ["a", "b", "a"]]

    listed = dispatcher.list()
    assert listed == created
    assert len(set(_ids(listed))) == 3
    assert [task.text for task in listed] == ["a", "b", "a"]
    assert all(task.completed is False for task in listed)
    assert all(task.created_at for task in listed)


def test_add_ids_strictly_increase(dispatcher):
    ids = [dispatcher.add(str(i)).id for i in range(20)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_update_replaces_only_matching_record(dispatcher):
    first = dispatcher.add("first")
    second = dispatcher.add("second")
    third = dispatcher.add("third")

    updated = dispatcher.update(replace(second, text="edited", completed=True))

    assert updated.text == "edited"
    assert dispatcher.list() == [first, replace(second, text="edited", completed=True), third]


def test_update_unknown_id_leaves_file_unchanged(dispatcher, store):
    """存在しないIDの更新はファイルを変更せず、入力をそのまま返す"""
    dispatcher.add("keep")
    before = store.data_path.read_bytes()

    ghost = Task(id=-1, text="ghost", completed=True, created_at="x")
    assert dispatcher.update(ghost) is ghost
    assert store.data_path.read_bytes() == before


def test_delete_is_idempotent(dispatcher):
    a = dispatcher.add("a")
    b = dispatcher.add("b")

    assert dispatcher.delete(a.id) is True
    once = dispatcher.list()
    assert dispatcher.delete(a.id) is True
    assert dispatcher.list() == once == [b]


def test_delete_unknown_id_reports_success(dispatcher):
    dispatcher.add("a")
    assert dispatcher.delete(12345) is True
    assert len(dispatcher.list()) == 1


def test_clear_completed(dispatcher):
    """完了済みのみ削除し、残りの順序を保つ"""
    a = dispatcher.add("a")
    b = dispatcher.update(replace(dispatcher.add("b"), completed=True))
    c = dispatcher.add("c")
    dispatcher.update(replace(dispatcher.add("d"), completed=True))

    assert dispatcher.clear_completed() is True
    assert dispatcher.list() == [a, c]
    assert dispatcher.clear_completed() is True
    assert dispatcher.list() == [a, c]
    assert b not in dispatcher.list()


def test_reorder_swaps(dispatcher):
    id1 = dispatcher.add("1").id
    id2 = dispatcher.add("2").id

    assert dispatcher.reorder([id2, id1]) is True
    assert _ids(dispatcher.list()) == [id2, id1]


def test_reorder_appends_missing_ids(dispatcher):
    """指定されなかったタスクは元の相対順で末尾に付く"""
    id1, id2, id3 = (dispatcher.add(t).id for t in "abc")

    assert dispatcher.reorder([id2]) is True
    assert _ids(dispatcher.list()) == [id2, id1, id3]


def test_reorder_drops_bogus_ids(dispatcher):
    id1 = dispatcher.add("1").id
    id2 = dispatcher.add("2").id
    dispatcher.reorder([id2, id1])

    assert dispatcher.reorder(["bogus", id1]) is True
    assert _ids(dispatcher.list()) == [id1, id2]


def test_reorder_coerces_numeric_strings(dispatcher):
    id1 = dispatcher.add("1").id
    id2 = dispatcher.add("2").id

    assert dispatcher.reorder([str(id2), float(id1), True, None, 999]) is True
    assert _ids(dispatcher.list()) == [id2, id1]


def test_reorder_ignores_duplicates(dispatcher):
    id1 = dispatcher.add("1").id
    id2 = dispatcher.add("2").id

    dispatcher.reorder([id2, id2, id1])
    assert _ids(dispatcher.list()) == [id2, id1]


@pytest.mark.parametrize("bad_input", ["123", None, {"ids": [1]}, 42])
def test_reorder_rejects_non_sequence_without_io(dispatcher, store, bad_input):
    dispatcher.add("a")
    before = store.data_path.read_bytes()

    assert dispatcher.reorder(bad_input) is False
    assert store.data_path.read_bytes() == before


def test_list_filters(dispatcher):
    a = dispatcher.add("a")
    b = dispatcher.update(replace(dispatcher.add("b"), completed=True))

    assert dispatcher.list(TaskFilter.ALL) == [a, b]
    assert dispatcher.list(TaskFilter.ACTIVE) == [a]
    assert dispatcher.list(TaskFilter.COMPLETED) == [b]


def test_get_and_stats(dispatcher):
    a = dispatcher.add("a")
    dispatcher.update(replace(dispatcher.add("b"), completed=True))

    assert dispatcher.get(a.id) == a
    assert dispatcher.get(-5) is None
    assert dispatcher.stats() == {"total": 2, "pending": 1, "completed": 1}


def test_corrupt_file_reads_as_empty(dispatcher, store):
    store.data_path.write_text("garbage", encoding="utf-8")
    assert dispatcher.list() == []
    assert dispatcher.stats() == {"total": 0, "pending": 0, "completed": 0}


def test_concurrent_adds_are_not_lost(dispatcher):
    """並行して呼び出しても更新が失われない"""
    threads = [threading.Thread(target=dispatcher.add, args=(f"task {i}",)) for i in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    tasks = dispatcher.list()
    assert len(tasks) == 10
    assert len(set(_ids(tasks))) == 10


def test_unencodable_add_keeps_existing_tasks(dispatcher):
    """エンコードできないテキストを追加しても既存タスクは失われない"""
    kept = dispatcher.add("keep me")

    dispatcher.add("\udcff")

    assert dispatcher.list() == [kept]
    second = dispatcher.add("after")
    assert dispatcher.list() == [kept, second]

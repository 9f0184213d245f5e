# tests/test_task_store.py

from __future__ import annotations

from dataclasses import replace

from flowlist.tasks.task_models import TaskCategory, TaskPriority
from flowlist.tasks.task_store import TaskStore


def _assert_invariants(store: TaskStore) -> None:
    tasks = store.snapshot()
    assert len({t.id for t in tasks}) == len(tasks)
    for t in tasks:
        assert t.is_completed == (t.completed_at is not None)


def test_add_prepends_pending_task(store: TaskStore) -> None:
    store.add("Buy milk")
    first = store.snapshot()[0]
    assert first.title == "Buy milk"
    assert first.is_completed is False
    assert first.completed_at is None
    assert first.priority is TaskPriority.MEDIUM
    assert first.category is TaskCategory.OTHER

    store.add("Walk dog", "evening", TaskPriority.HIGH, TaskCategory.HEALTH)
    titles = [t.title for t in store.snapshot()]
    assert titles == ["Walk dog", "Buy milk"]
    _assert_invariants(store)


def test_ids_are_unique(store: TaskStore) -> None:
    for i in range(20):
        store.add(f"task {i}")
    _assert_invariants(store)
    assert len(store) == 20


def test_toggle_round_trip(store: TaskStore) -> None:
    store.add("Buy milk")
    task_id = store.snapshot()[0].id

    store.toggle(task_id)
    done = store.get(task_id)
    assert done is not None
    assert done.is_completed is True
    assert done.completed_at is not None
    assert done.completed_at > done.created_at

    store.toggle(task_id)
    back = store.get(task_id)
    assert back is not None
    assert back.is_completed is False
    assert back.completed_at is None
    assert back.created_at == done.created_at
    _assert_invariants(store)


def test_unknown_ids_are_noops(store: TaskStore) -> None:
    store.add("Buy milk")
    before = store.snapshot()

    store.toggle("missing")
    store.delete("missing")
    store.update(replace(before[0], id="missing", title="Other"))

    assert store.snapshot() == before


def test_delete(store: TaskStore) -> None:
    store.add("a")
    store.add("b")
    target = store.snapshot()[1]
    store.delete(target.id)
    assert [t.title for t in store.snapshot()] == ["b"]


def test_delete_completed_preserves_order(store: TaskStore) -> None:
    store.add("one")
    store.add("two")
    store.add("three")
    middle = store.snapshot()[1]
    store.toggle(middle.id)

    store.delete_completed()

    remaining = store.snapshot()
    assert [t.title for t in remaining] == ["three", "one"]
    assert not any(t.is_completed for t in remaining)


def test_update_replaces_fields_but_keeps_created_at(store: TaskStore) -> None:
    store.add("draft")
    original = store.snapshot()[0]

    store.update(
        replace(
            original,
            title="final",
            description="ship it",
            priority=TaskPriority.LOW,
            category=TaskCategory.WORK,
            created_at=original.created_at.replace(year=1999),
        )
    )

    updated = store.get(original.id)
    assert updated is not None
    assert updated.title == "final"
    assert updated.description == "ship it"
    assert updated.priority is TaskPriority.LOW
    assert updated.category is TaskCategory.WORK
    assert updated.created_at == original.created_at
    assert store.snapshot()[0].id == original.id


def test_counts_are_derived(store: TaskStore) -> None:
    assert store.pending_count() == 0
    assert store.has_completed() is False

    store.add("a")
    store.add("b")
    store.add("c")
    store.toggle(store.snapshot()[0].id)

    assert store.pending_count() == 2
    assert store.completed_count() == 1
    assert store.has_completed() is True


def test_listeners_receive_snapshots(store: TaskStore) -> None:
    seen: list[int] = []
    unsubscribe = store.subscribe(lambda snap: seen.append(len(snap)))

    store.add("a")
    store.add("b")
    store.delete("missing")  # no change, no notification
    store.delete_completed()  # nothing completed, no notification
    unsubscribe()
    store.add("c")

    assert seen == [1, 2]


def test_failing_listener_does_not_block_mutation(store: TaskStore) -> None:
    def boom(_snap) -> None:
        raise RuntimeError("listener bug")

    store.subscribe(boom)
    store.add("still added")
    assert store.snapshot()[0].title == "still added"

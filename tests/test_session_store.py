from __future__ import annotations

import pytest

from adapters.session_store.memory_session_store import InMemorySessionStore


def test_create_and_get_session():
    store = InMemorySessionStore()

    session = store.create()

    assert store.get(session.session_id) is session
    assert len(store) == 1


def test_unknown_session_raises_key_error():
    store = InMemorySessionStore()

    with pytest.raises(KeyError):
        store.get("missing")
    with pytest.raises(KeyError):
        store.delete("missing")


def test_delete_session():
    store = InMemorySessionStore()
    session = store.create()

    store.delete(session.session_id)

    assert len(store) == 0
    with pytest.raises(KeyError):
        store.get(session.session_id)


def test_least_recently_used_session_is_evicted():
    store = InMemorySessionStore(max_sessions=2)
    first = store.create()
    second = store.create()

    store.get(first.session_id)  # first staje się najświeższa
    store.create()

    assert len(store) == 2
    assert store.get(first.session_id) is first
    with pytest.raises(KeyError):
        store.get(second.session_id)


def test_max_sessions_must_be_positive():
    with pytest.raises(ValueError):
        InMemorySessionStore(max_sessions=0)

from datetime import datetime

import pytest

from utils.store import InMemoryStore, create_store


def add_event(store, title='Meetup'):
    return store.insert_event(title, datetime(2025, 1, 1, 10, 0), 'A', 'B')


def test_create_store_seeds_single_admin():
    store = create_store('root', 'secret')

    users = store.list_users()
    assert len(users) == 1
    assert users[0].id == 1
    assert users[0].username == 'root'
    assert users[0].is_admin is True
    assert store.list_events() == []
    assert store.list_participants() == []


def test_ids_are_not_reused_after_delete():
    store = InMemoryStore()
    first = add_event(store)
    store.delete_event(first.id)
    second = add_event(store)

    assert second.id == 2


def test_ids_are_independent_per_table():
    store = create_store()
    user = store.insert_user('alice', 'pw1')
    event = add_event(store)

    assert user.id == 2
    assert event.id == 1


def test_find_user_by_credentials_is_exact():
    store = create_store()
    store.insert_user('alice', 'pw1')

    assert store.find_user_by_credentials('alice', 'pw1').username == 'alice'
    assert store.find_user_by_credentials('Alice', 'pw1') is None
    assert store.find_user_by_credentials('alice', 'PW1') is None


def test_update_user_unknown_field():
    store = create_store()
    with pytest.raises(AttributeError):
        store.update_user(1, nickname='x')


def test_delete_event_cascades_only_its_participants():
    store = create_store()
    alice = store.insert_user('alice', 'pw1')
    e1 = add_event(store, 'one')
    e2 = add_event(store, 'two')
    store.insert_participant(e1.id, alice.id, 'Alice', '1', 'CA1', 'A320')
    kept = store.insert_participant(e2.id, alice.id, 'Alice', '1', 'CA2', 'A320')

    event, removed = store.delete_event(e1.id)

    assert event.id == e1.id
    assert removed == 1
    assert store.get_event(e1.id) is None
    assert store.list_participants() == [kept]


def test_delete_user_cascades_only_their_participants():
    store = create_store()
    alice = store.insert_user('alice', 'pw1')
    bob = store.insert_user('bob', 'pw2')
    event = add_event(store)
    store.insert_participant(event.id, alice.id, 'Alice', '1', 'CA1', 'A320')
    kept = store.insert_participant(event.id, bob.id, 'Bob', '2', 'CA2', 'A320')

    _, removed = store.delete_user(alice.id)

    assert removed == 1
    assert store.get_user(alice.id) is None
    assert store.list_participants(event_id=event.id) == [kept]


def test_delete_missing_raises_key_error():
    store = create_store()
    with pytest.raises(KeyError):
        store.delete_event(99)
    with pytest.raises(KeyError):
        store.delete_user(99)


def test_delete_participants_requires_a_filter():
    with pytest.raises(ValueError):
        InMemoryStore().delete_participants()


def test_count_admins():
    store = create_store()
    store.insert_user('alice', 'pw1', is_admin=True)
    store.insert_user('bob', 'pw2')

    assert store.count_admins() == 2

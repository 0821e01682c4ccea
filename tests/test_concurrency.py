import threading

import services
from utils.errors import ConflictError

from conftest import PARTICIPATE_FORM


def run_threads(count, target):
    barrier = threading.Barrier(count)
    results = []
    lock = threading.Lock()

    def worker(index):
        barrier.wait()
        try:
            outcome = target(index)
        except ConflictError as e:
            outcome = e
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results


def test_concurrent_duplicate_participation(store, meetup):
    alice = services.register_user(store, 'alice', 'pw1').to_session()

    results = run_threads(20, lambda i: services.participate(store, meetup.id, alice, PARTICIPATE_FORM))

    assert sum(1 for r in results if isinstance(r, ConflictError)) == 19
    assert len(store.list_participants()) == 1


def test_concurrent_registration_same_username(store):
    results = run_threads(20, lambda i: services.register_user(store, 'alice', f'pw{i}'))

    assert sum(1 for r in results if isinstance(r, ConflictError)) == 19
    assert [u.username for u in store.list_users()] == ['admin', 'alice']


def test_concurrent_participation_ids_unique(store, meetup):
    users = [services.register_user(store, f'user{i}', 'pw').to_session() for i in range(20)]

    run_threads(20, lambda i: services.participate(store, meetup.id, users[i], PARTICIPATE_FORM))

    ids = [p.id for p in store.list_participants()]
    assert sorted(ids) == list(range(1, 21))

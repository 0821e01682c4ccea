import os
from datetime import datetime

os.environ.setdefault('FLASK_ENV', 'testing')

import pytest

from app import create_app
from utils.store import create_store


@pytest.fixture
def store():
    return create_store('admin', 'admin123')


@pytest.fixture
def app(store):
    return create_app('testing', store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(store):
    return store.find_user_by_username('admin')


def login(client, username, password):
    return client.post('/login', data={'username': username, 'password': password})


def register(client, username, password):
    return client.post('/register', data={'username': username, 'password': password})


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    login(client, 'admin', 'admin123')
    return client


@pytest.fixture
def meetup(store):
    return store.insert_event(
        title='Meetup',
        start_time=datetime(2025, 1, 1, 10, 0),
        departure='A',
        arrival='B',
        aircraft_types=['A320']
    )


PARTICIPATE_FORM = {
    'name': 'Alice',
    'qq': '123',
    'flightNumber': 'CA101',
    'aircraftType': 'A320'
}

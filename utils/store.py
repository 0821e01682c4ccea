"""
内存存储管理

用户、活动、参与者三张表保存在进程内存中，重启后数据丢失。
所有读写都在同一把可重入锁下进行，多线程运行时同样安全。
"""

import threading
from datetime import datetime
from flask import current_app

from models import User, Event, Participant


class InMemoryStore:
    """
    三张内存表及其 ID 计数器

    ID 由每张表独立的单调递增计数器分配，删除后不会复用。

    Example:
        >>> store = InMemoryStore()
        >>> user = store.insert_user('alice', 'pw1')
        >>> user.id
        1
        >>> with store.transaction():
        ...     if store.find_user_by_username('bob') is None:
        ...         store.insert_user('bob', 'pw2')
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._users = {}
        self._events = {}
        self._participants = {}
        self._counters = {'users': 0, 'events': 0, 'participants': 0}

    def transaction(self):
        """
        返回临界区上下文

        服务层的"检查后写入"必须包在同一个 transaction 内，
        保证每个修改要么完整生效、要么完全不生效。
        """
        return self._lock

    def _next_id(self, table):
        self._counters[table] += 1
        return self._counters[table]

    # ----------------------- 用户 -----------------------

    def list_users(self):
        with self._lock:
            return list(self._users.values())

    def get_user(self, user_id):
        with self._lock:
            return self._users.get(user_id)

    def find_user_by_username(self, username):
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return user
            return None

    def find_user_by_credentials(self, username, password):
        """用户名与密码均精确匹配（明文比较）"""
        with self._lock:
            for user in self._users.values():
                if user.username == username and user.password == password:
                    return user
            return None

    def insert_user(self, username, password, is_admin=False):
        with self._lock:
            user = User(
                id=self._next_id('users'),
                username=username,
                password=password,
                is_admin=is_admin,
                created_at=datetime.now()
            )
            self._users[user.id] = user
            return user

    def update_user(self, user_id, **fields):
        """
        更新用户字段

        Raises:
            KeyError: 用户不存在
        """
        with self._lock:
            user = self._users[user_id]
            for key, value in fields.items():
                if not hasattr(user, key):
                    raise AttributeError(f"User has no field {key!r}")
                setattr(user, key, value)
            return user

    def delete_user(self, user_id):
        """
        删除用户，先级联删除其所有参与记录

        Returns:
            tuple: (被删除的 User, 被删除的参与记录数)

        Raises:
            KeyError: 用户不存在
        """
        with self._lock:
            user = self._users[user_id]
            removed = self.delete_participants(user_id=user_id)
            del self._users[user_id]
            return user, removed

    def count_admins(self):
        with self._lock:
            return sum(1 for u in self._users.values() if u.is_admin)

    # ----------------------- 活动 -----------------------

    def list_events(self):
        with self._lock:
            return list(self._events.values())

    def get_event(self, event_id):
        with self._lock:
            return self._events.get(event_id)

    def insert_event(self, title, start_time, departure, arrival,
                     aircraft_types=None, details=None):
        with self._lock:
            event = Event(
                id=self._next_id('events'),
                title=title,
                start_time=start_time,
                departure=departure,
                arrival=arrival,
                aircraft_types=aircraft_types,
                details=details,
                created_at=datetime.now()
            )
            self._events[event.id] = event
            return event

    def delete_event(self, event_id):
        """
        删除活动，先级联删除其所有参与记录

        Returns:
            tuple: (被删除的 Event, 被删除的参与记录数)

        Raises:
            KeyError: 活动不存在
        """
        with self._lock:
            event = self._events[event_id]
            removed = self.delete_participants(event_id=event_id)
            del self._events[event_id]
            return event, removed

    # ----------------------- 参与者 -----------------------

    def list_participants(self, event_id=None, user_id=None):
        with self._lock:
            return [
                p for p in self._participants.values()
                if (event_id is None or p.event_id == event_id)
                and (user_id is None or p.user_id == user_id)
            ]

    def find_participant(self, user_id, event_id):
        with self._lock:
            for p in self._participants.values():
                if p.user_id == user_id and p.event_id == event_id:
                    return p
            return None

    def insert_participant(self, event_id, user_id, name, qq,
                           flight_number, aircraft_type):
        with self._lock:
            participant = Participant(
                id=self._next_id('participants'),
                event_id=event_id,
                user_id=user_id,
                name=name,
                qq=qq,
                flight_number=flight_number,
                aircraft_type=aircraft_type,
                participate_time=datetime.now()
            )
            self._participants[participant.id] = participant
            return participant

    def delete_participants(self, event_id=None, user_id=None):
        """
        按活动或用户批量删除参与记录

        Returns:
            int: 删除条数
        """
        if event_id is None and user_id is None:
            raise ValueError("event_id or user_id is required")

        with self._lock:
            doomed = [p.id for p in self.list_participants(event_id=event_id, user_id=user_id)]
            for participant_id in doomed:
                del self._participants[participant_id]
            return len(doomed)


def create_store(admin_username='admin', admin_password='admin123'):
    """
    创建存储并预置唯一的管理员

    Args:
        admin_username (str): 管理员用户名
        admin_password (str): 管理员密码

    Returns:
        InMemoryStore: 只包含一个管理员用户的存储，活动与参与者为空
    """
    store = InMemoryStore()
    store.insert_user(admin_username, admin_password, is_admin=True)
    return store


def get_store():
    """
    获取当前应用的存储

    Raises:
        RuntimeError: create_app() 尚未初始化存储
    """
    store = current_app.extensions.get('store')
    if store is None:
        raise RuntimeError("Store not initialized. Call create_app() first.")
    return store

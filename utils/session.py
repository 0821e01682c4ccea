"""
服务端会话管理

Cookie 中只保存不透明的会话令牌，会话内容保存在进程内存中。
会话在最后一次写入 PERMANENT_SESSION_LIFETIME（默认 24 小时）后过期。
"""

import secrets
import threading
from datetime import datetime, timezone

from flask.sessions import SessionInterface, SessionMixin
from werkzeug.datastructures import CallbackDict


class MemorySession(CallbackDict, SessionMixin):
    """
    内存会话对象

    Attributes:
        sid (str): 会话令牌
        new (bool): 本次请求新建的会话
        modified (bool): 本次请求中被修改过
    """

    def __init__(self, initial=None, sid=None, new=False):
        def on_update(self):
            self.modified = True
        CallbackDict.__init__(self, initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False


class MemorySessionInterface(SessionInterface):
    """
    以内存字典为后端的 Flask 会话接口

    Example:
        >>> app.session_interface = MemorySessionInterface()
    """

    session_class = MemorySession

    def __init__(self):
        self._lock = threading.Lock()
        self._records = {}

    @staticmethod
    def _now():
        return datetime.now(timezone.utc)

    @staticmethod
    def generate_sid():
        return secrets.token_urlsafe(32)

    def get(self, sid):
        """
        按令牌读取会话数据

        Returns:
            dict or None: 不存在或已过期时返回 None
        """
        with self._lock:
            record = self._records.get(sid)
            if record is None:
                return None
            data, expires_at = record
            if expires_at <= self._now():
                del self._records[sid]
                return None
            return dict(data)

    def set(self, sid, data, lifetime):
        with self._lock:
            self._records[sid] = (dict(data), self._now() + lifetime)

    def delete(self, sid):
        with self._lock:
            self._records.pop(sid, None)

    def destroy(self, session):
        """
        销毁会话（注销）

        删除服务端记录并清空会话，响应阶段 save_session 会删除 Cookie。
        """
        self.delete(session.sid)
        session.clear()

    def active_count(self):
        with self._lock:
            return len(self._records)

    def open_session(self, app, request):
        sid = request.cookies.get(self.get_cookie_name(app))
        if sid:
            data = self.get(sid)
            if data is not None:
                return self.session_class(data, sid=sid)
        return self.session_class(sid=self.generate_sid(), new=True)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if not session:
            if session.modified:
                self.delete(session.sid)
                response.delete_cookie(name, domain=domain, path=path)
            return

        if not session.modified:
            return

        lifetime = app.permanent_session_lifetime
        self.set(session.sid, session, lifetime)
        response.set_cookie(
            name,
            session.sid,
            expires=self._now() + lifetime,
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app)
        )

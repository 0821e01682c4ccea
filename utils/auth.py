"""
登录与管理员权限校验

会话中保存的是登录时的用户快照，这里的校验只读取快照，
不会重新查询存储。因此管理员权限变更、用户被删除等操作
要到对方重新登录后才会生效。
"""

from functools import wraps
from flask import session, redirect, url_for, current_app

from utils.responses import plain_text

FORBIDDEN_MESSAGE = '无权限访问，请使用管理员账号登录后重试。'


def get_session_user():
    """
    当前会话中的用户快照

    Returns:
        dict or None: User.to_session() 的结果，未登录时为 None
    """
    return session.get('user')


def is_authenticated():
    return get_session_user() is not None


def is_admin():
    """当前会话的用户快照是否为管理员"""
    user = get_session_user()
    return bool(user and user.get('is_admin'))


def attach_user(user):
    """
    登录：把用户快照写入会话

    Args:
        user (User): 存储中的用户记录
    """
    session['user'] = user.to_session()


def login_required(view):
    """
    需要登录

    未登录时重定向到登录页，不返回错误信息。
    """
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not is_authenticated():
            return redirect(url_for('auth.login'))
        return view(*args, **kwargs)
    return wrapped


def admin_required(view):
    """
    需要管理员权限

    未登录或非管理员时返回 403 和提示文本，不重定向。
    """
    @wraps(view)
    def wrapped(*args, **kwargs):
        user = get_session_user()
        current_app.logger.debug(
            f"管理员认证检查 | hasSession: {user is not None} | "
            f"isAdmin: {bool(user and user.get('is_admin'))} | "
            f"User: {user['username'] if user else '未登录'}"
        )
        if not is_admin():
            return plain_text(FORBIDDEN_MESSAGE, 403)
        return view(*args, **kwargs)
    return wrapped

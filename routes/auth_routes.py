"""
登录 / 注册路由

- /login: 登录页面与提交
- /register: 注册页面与提交（注册成功后自动登录）
- /logout: 注销
"""

from flask import Blueprint, request, current_app, render_template, redirect, url_for, session

import services
from utils.store import get_store
from utils.auth import attach_user, get_session_user
from utils.errors import ValidationError, AuthError

bp = Blueprint('auth', __name__)


def _redirect_after_login(user):
    """管理员进入后台，普通用户回到首页"""
    if user.is_admin:
        return redirect(url_for('admin.dashboard'))
    return redirect(url_for('event.index'))


@bp.route('/login', methods=['GET'])
def login():
    return render_template('login.html')


@bp.route('/login', methods=['POST'])
def login_submit():
    """
    登录提交

    用户名/密码为空或不匹配时重新渲染登录页并显示错误信息。
    """
    username = request.form.get('username')
    password = request.form.get('password')

    current_app.logger.info(f"登录请求 | User: {username}")

    try:
        user = services.authenticate(get_store(), username, password)
    except (ValidationError, AuthError) as e:
        current_app.logger.info(f"登录失败: {e.message} | User: {username}")
        return render_template('login.html', error=e.message, username=username)

    attach_user(user)
    current_app.logger.info(f"登录成功 | User: {username} | isAdmin: {user.is_admin}")

    return _redirect_after_login(user)


@bp.route('/register', methods=['GET'])
def register():
    return render_template('register.html')


@bp.route('/register', methods=['POST'])
def register_submit():
    """
    注册提交

    信息不完整或用户名已存在时返回 400 纯文本。
    """
    username = request.form.get('username')
    password = request.form.get('password')

    user = services.register_user(get_store(), username, password)

    # 自动登录新用户
    attach_user(user)
    current_app.logger.info(f"新用户注册: {user.username} (id={user.id})")

    return _redirect_after_login(user)


@bp.route('/logout')
def logout():
    """
    注销

    销毁会话失败时只记录日志，仍然跳转首页。
    """
    user = get_session_user()
    try:
        current_app.session_interface.destroy(session)
    except Exception as e:
        current_app.logger.error(f"注销失败: {str(e)}", exc_info=True)
    else:
        if user:
            current_app.logger.info(f"用户注销: {user['username']}")

    return redirect(url_for('event.index'))

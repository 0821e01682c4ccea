"""
管理员路由

管理员专用页面（全部需要管理员权限）
- /admin: 后台首页（活动及报名人数）
- /admin/add-event: 添加活动
- /admin/users: 用户管理
- /admin/users/toggle-admin/<id>: 切换管理员权限
- /admin/users/delete/<id>: 删除用户
- /admin/events/delete/<id>: 删除活动
"""

from flask import Blueprint, request, current_app, render_template, redirect, url_for

import services
from utils.store import get_store
from utils.auth import admin_required, get_session_user
from utils.logging_setup import log_admin_action

bp = Blueprint('admin', __name__, url_prefix='/admin')


@bp.route('')
@admin_required
def dashboard():
    """后台首页 - 每个活动的参与者与人数，以及用户列表"""
    store = get_store()
    return render_template(
        'admin.html',
        events=services.events_with_participants(store),
        users=store.list_users(),
        user=get_session_user()
    )


@bp.route('/add-event', methods=['GET'])
@admin_required
def add_event():
    return render_template('add_event.html', user=get_session_user())


@bp.route('/add-event', methods=['POST'])
@admin_required
def add_event_submit():
    """
    添加活动

    表单字段:
    - title, startTime, departure, arrival (必填)
    - aircraftTypes: 可多选
    - details: 可选
    """
    admin = get_session_user()

    event = services.add_event(
        get_store(),
        request.form,
        aircraft_types=request.form.getlist('aircraftTypes')
    )

    log_admin_action(current_app, "ADD_EVENT", admin['username'], {
        'event_id': event.id,
        'title': event.title,
        'aircraft_types': event.aircraft_types
    })
    return redirect(url_for('admin.dashboard'))


@bp.route('/users')
@admin_required
def users():
    return render_template('admin_users.html', users=get_store().list_users(), user=get_session_user())


@bp.route('/users/toggle-admin/<int:user_id>', methods=['POST'])
@admin_required
def toggle_admin(user_id):
    """切换管理员权限，不允许取消最后一个管理员"""
    admin = get_session_user()

    user = services.toggle_admin(get_store(), user_id, admin)

    action = "GRANT_ADMIN" if user.is_admin else "REVOKE_ADMIN"
    log_admin_action(current_app, action, admin['username'], {
        'user_id': user.id,
        'username': user.username
    })
    return redirect(url_for('admin.users'))


@bp.route('/users/delete/<int:user_id>', methods=['POST'])
@admin_required
def delete_user(user_id):
    """删除用户及其报名记录"""
    admin = get_session_user()

    user, removed = services.delete_user(get_store(), user_id, admin)

    log_admin_action(current_app, "DELETE_USER", admin['username'], {
        'user_id': user.id,
        'username': user.username,
        'participants_removed': removed
    })
    return redirect(url_for('admin.users'))


@bp.route('/events/delete/<int:event_id>', methods=['POST'])
@admin_required
def delete_event(event_id):
    """删除活动及其报名记录"""
    admin = get_session_user()

    event, removed = services.delete_event(get_store(), event_id)

    log_admin_action(current_app, "DELETE_EVENT", admin['username'], {
        'event_id': event.id,
        'participants_removed': removed
    })
    return redirect(url_for('admin.dashboard'))

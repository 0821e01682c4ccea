"""
活动路由

普通用户使用的页面
- /: 活动列表
- /event/<id>: 活动详情 + 参与者列表
- /event/<id>/participate: 报名（需要登录）
"""

from flask import Blueprint, request, current_app, render_template, redirect, url_for

import services
from utils.store import get_store
from utils.auth import get_session_user, login_required
from utils.logging_setup import log_api_call

bp = Blueprint('event', __name__)


@bp.route('/')
def index():
    """首页 - 活动列表"""
    store = get_store()
    return render_template('index.html', events=store.list_events(), user=get_session_user())


@bp.route('/event/<int:event_id>')
def event_detail(event_id):
    """
    活动详情页

    活动不存在时返回 404 "活动不存在"。
    """
    event, participants = services.get_event_detail(get_store(), event_id)

    return render_template(
        'event_detail.html',
        event=event,
        participants=participants,
        participant_count=len(participants),
        user=get_session_user()
    )


@bp.route('/event/<int:event_id>/participate', methods=['POST'])
@login_required
def participate(event_id):
    """
    报名参加活动

    表单字段:
    - name: 姓名 (必填)
    - qq: QQ 号 (必填)
    - flightNumber: 航班号 (必填)
    - aircraftType: 机型 (必填)
    """
    user = get_session_user()

    log_api_call(
        current_app,
        f"/event/{event_id}/participate",
        user['username'],
        {
            'flightNumber': request.form.get('flightNumber'),
            'aircraftType': request.form.get('aircraftType')
        }
    )

    participant = services.participate(get_store(), event_id, user, request.form)

    current_app.logger.info(
        f"报名成功 | User: {user['username']} | Event: {event_id} | Participant: {participant.id}"
    )
    return redirect(url_for('event.event_detail', event_id=event_id))

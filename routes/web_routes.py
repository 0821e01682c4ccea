"""
诊断路由

- /test-session: 当前会话状态
"""

from flask import Blueprint, current_app, session, jsonify

from utils.auth import get_session_user

bp = Blueprint('web', __name__)


@bp.route('/test-session')
def test_session():
    """
    会话诊断

    Returns:
        JSON: {
            'sessionId': str,
            'hasUser': bool,
            'user': {'username': str, 'isAdmin': bool} or None
        }
    """
    user = get_session_user()

    current_app.logger.debug(
        f"会话测试 | hasUser: {user is not None} | "
        f"User: {user['username'] if user else '未登录'}"
    )

    return jsonify({
        'sessionId': getattr(session, 'sid', None),
        'hasUser': user is not None,
        'user': {
            'username': user['username'],
            'isAdmin': user['is_admin']
        } if user else None
    })

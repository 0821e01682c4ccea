"""
日志轮转与级别设置

根据运行环境自动切换日志级别：开发/测试环境为 DEBUG，生产环境为 INFO。
"""

import os
import logging
from logging.handlers import RotatingFileHandler


def setup_logging(app):
    """
    Flask 应用日志设置

    Args:
        app (Flask): Flask 应用对象

    Note:
        - LOG_DIR 为 None 时不写文件（测试环境）
        - 日志轮转: 10MB × 5 个备份
        - 日志文件: <LOG_DIR>/app.log
        - 报名、注册、管理员操作以 INFO 级别记录
    """
    if app.debug or app.testing:
        log_level = logging.DEBUG
        app.logger.info("🔧 Development mode: DEBUG logging enabled")
    else:
        log_level = logging.INFO
        app.logger.info("🚀 Production mode: INFO logging enabled")

    app.logger.setLevel(log_level)

    log_dir = app.config.get('LOG_DIR')
    if not log_dir:
        return

    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'app.log')

    # 超过 10MB 自动生成 app.log.1, app.log.2...
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(log_level)

    app.logger.addHandler(file_handler)

    app.logger.info('=' * 50)
    app.logger.info('Flight Meetup Starting')
    app.logger.info(f'Log level: {logging.getLevelName(log_level)}')
    app.logger.info(f'Log file: {log_file}')
    app.logger.info('=' * 50)


def log_api_call(app, endpoint, user, params=None):
    """
    用户操作日志

    Args:
        app (Flask): Flask 应用对象
        endpoint (str): 接口路径（例如 "/event/1/participate"）
        user (str): 用户名
        params (dict, optional): 附加参数

    Example:
        >>> log_api_call(app, "/event/1/participate", "alice", {"flightNumber": "CA101"})
        # INFO - API Call: /event/1/participate | User: alice | Params: {...}
    """
    log_msg = f"API Call: {endpoint} | User: {user}"
    if params:
        log_msg += f" | Params: {params}"
    app.logger.info(log_msg)


def log_admin_action(app, action, admin, details=None):
    """
    管理员操作日志

    Args:
        app (Flask): Flask 应用对象
        action (str): 操作类型（例如 "DELETE_EVENT"）
        admin (str): 管理员用户名
        details (dict, optional): 详细信息

    Example:
        >>> log_admin_action(app, "DELETE_EVENT", "admin", {"event_id": 1})
        # INFO - Admin Action: DELETE_EVENT | Admin: admin | Details: {...}
    """
    log_msg = f"Admin Action: {action} | Admin: {admin}"
    if details:
        log_msg += f" | Details: {details}"
    app.logger.info(log_msg)

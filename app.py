"""
Flask 主应用

飞行活动发布与报名系统的服务入口。
"""

from flask import Flask
from werkzeug.exceptions import HTTPException
from config import config
from utils.store import create_store
from utils.session import MemorySessionInterface
from utils.errors import AppError
from utils.responses import plain_text
from utils.logging_setup import setup_logging
from utils.datetime_parser import format_datetime_cn, format_datetime_short
import os


def create_app(config_name=None, store=None):
    """
    Flask 应用工厂

    Args:
        config_name (str): 配置名称 ('development', 'production', 'testing')
        store (InMemoryStore, optional): 外部注入的存储，默认新建并预置管理员

    Returns:
        Flask: 配置完成的 Flask 应用
    """
    app = Flask(__name__)

    # 加载环境配置
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    # 日志设置
    setup_logging(app)

    # 服务端会话
    app.session_interface = MemorySessionInterface()

    # 内存存储初始化
    if store is None:
        store = create_store(
            app.config['SEED_ADMIN_USERNAME'],
            app.config['SEED_ADMIN_PASSWORD']
        )
    app.extensions['store'] = store
    app.logger.info(f"✅ In-memory store initialized ({len(store.list_users())} users)")

    app.add_template_filter(format_datetime_cn, 'datetime_cn')
    app.add_template_filter(format_datetime_short, 'datetime_short')

    # 注册路由
    from routes import event_routes, auth_routes, admin_routes, web_routes

    app.register_blueprint(event_routes.bp)
    app.register_blueprint(auth_routes.bp)
    app.register_blueprint(admin_routes.bp)
    app.register_blueprint(web_routes.bp)

    app.logger.info("✅ All routes registered")

    # 健康检查
    @app.route('/health')
    def health_check():
        """服务状态"""
        return {
            "status": "healthy",
            "service": "flight-meetup",
            "version": "1.0.0"
        }, 200

    @app.errorhandler(AppError)
    def handle_app_error(e):
        """业务错误以纯文本返回给用户"""
        app.logger.warning(f"{type(e).__name__}: {e.message}")
        return plain_text(e.message, e.status_code)

    @app.errorhandler(Exception)
    def handle_error(e):
        """
        全局错误处理

        记录所有未处理的异常，对用户返回统一的错误信息。
        HTTP 异常（404、405 等）原样返回。
        """
        if isinstance(e, HTTPException):
            return e

        app.logger.error(f"Unhandled exception: {str(e)}", exc_info=True)
        return plain_text("服务器错误，请稍后再试。", 500)

    return app


# 创建应用实例
app = create_app()


if __name__ == '__main__':
    # 本地开发服务器（仅开发使用）
    # 生产环境请使用 WSGI 服务器
    app.run(host='0.0.0.0', port=app.config['PORT'], debug=app.debug)

"""Flask 应用配置"""
import os
from datetime import timedelta
from dotenv import load_dotenv

# .env 文件加载
load_dotenv()


class Config:
    """基础配置类"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key'
    PORT = int(os.environ.get('PORT', 3001))
    FLASK_ENV = os.environ.get('FLASK_ENV', 'production')
    DEBUG = (FLASK_ENV == 'development')
    TESTING = False

    # 会话有效期为1天（从最后一次写入开始计算）
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)
    SESSION_COOKIE_NAME = os.environ.get('SESSION_COOKIE_NAME', 'flight_meetup_sid')
    SESSION_COOKIE_HTTPONLY = True

    # 启动时预置的唯一管理员
    SEED_ADMIN_USERNAME = os.environ.get('SEED_ADMIN_USERNAME', 'admin')
    SEED_ADMIN_PASSWORD = os.environ.get('SEED_ADMIN_PASSWORD', 'admin123')

    LOG_DIR = os.environ.get('LOG_DIR', 'logs')

    @staticmethod
    def init_app(app):
        """应用初始化时执行的设置"""
        pass


class DevelopmentConfig(Config):
    """开发环境配置"""
    DEBUG = True


class ProductionConfig(Config):
    """生产环境配置"""
    DEBUG = False


class TestingConfig(Config):
    """测试环境配置"""
    TESTING = True
    DEBUG = False
    LOG_DIR = None
    SECRET_KEY = 'test-secret-key'


# 环境名称与配置类映射
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}

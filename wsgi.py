"""
WSGI 入口

供 gunicorn / uWSGI 等 WSGI 服务器加载:
    gunicorn wsgi:application
本地开发请直接运行 app.py。
"""

import os

# 环境变量需在导入 app 之前设置
os.environ.setdefault('FLASK_ENV', 'production')

from app import app as application

# WSGI 服务器查找 'application' 名称

"""
业务错误类型

所有错误对本次请求都是终止性的，不重试，也不会部分生效。
status_code 决定以纯文本返回给用户时的 HTTP 状态码。
"""


class AppError(Exception):
    """业务错误基类"""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """必填字段缺失或格式错误"""
    status_code = 400


class ConflictError(AppError):
    """重复的用户名或重复报名"""
    status_code = 400


class AuthError(AppError):
    """用户名/密码错误或未登录"""
    status_code = 401


class NotFoundError(AppError):
    """ID 不存在"""
    status_code = 404


class InvariantError(AppError):
    """操作会导致系统中没有管理员"""
    status_code = 400


class SelfActionError(AppError):
    """试图删除当前登录的用户"""
    status_code = 400

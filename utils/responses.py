"""
响应辅助函数

所有面向用户的失败信息都以纯文本返回，不使用结构化错误体。
"""

from flask import Response


def plain_text(text, status=200):
    """
    纯文本响应

    Args:
        text (str): 展示给用户的文本
        status (int): HTTP 状态码

    Returns:
        Response: text/plain; charset=utf-8

    Example:
        >>> plain_text('活动不存在', 404)
        <Response 15 bytes [404 NOT FOUND]>
    """
    return Response(text, status=status, mimetype='text/plain')

"""
活动时间解析与格式化

添加活动表单使用 <input type="datetime-local">，提交值形如
"2025-01-01T10:00"。这里负责解析，并提供模板中使用的中文显示格式。
"""

from datetime import datetime

from utils.errors import ValidationError

WEEKDAYS = ['一', '二', '三', '四', '五', '六', '日']


def parse_start_time(value):
    """
    解析活动开始时间

    Args:
        value (str): "2025-01-01T10:00"、"2025-01-01 10:00" 或带秒的 ISO 格式

    Returns:
        datetime: 解析后的时间

    Raises:
        ValidationError: 无法解析

    Example:
        >>> parse_start_time("2025-01-01T10:00")
        datetime.datetime(2025, 1, 1, 10, 0)
    """
    try:
        return datetime.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError('活动开始时间格式不正确')


def format_datetime_cn(dt):
    """
    Example:
        >>> format_datetime_cn(datetime(2025, 1, 1, 10, 0))
        "2025年01月01日 (周三) 10:00"
    """
    if dt is None:
        return ''
    weekday = WEEKDAYS[dt.weekday()]
    return dt.strftime(f"%Y年%m月%d日 (周{weekday}) %H:%M")


def format_datetime_short(dt):
    """
    Example:
        >>> format_datetime_short(datetime(2025, 1, 1, 10, 0))
        "01-01 10:00"
    """
    if dt is None:
        return ''
    return dt.strftime("%m-%d %H:%M")

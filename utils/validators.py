"""
数据校验逻辑

表单必填字段检查与机型列表规范化。
"""

from utils.errors import ValidationError


def require_fields(values, message):
    """
    必填字段检查

    None、空字符串、只含空白的字符串都视为缺失。

    Args:
        values (iterable): 需要检查的字段值
        message (str): 校验失败时展示给用户的信息

    Raises:
        ValidationError: 任一字段缺失

    Example:
        >>> require_fields(['alice', 'pw1'], '请填写完整信息')
        >>> require_fields(['alice', ''], '请填写完整信息')
        Traceback (most recent call last):
        ...
        ValidationError: 请填写完整信息
    """
    for value in values:
        if value is None or not str(value).strip():
            raise ValidationError(message)


def normalize_aircraft_types(raw):
    """
    机型列表规范化

    表单只选一个机型时提交的是字符串，多个时是列表，
    这里统一转成去重、保持原顺序、去掉空值的字符串列表。

    Args:
        raw (str, list or None): 表单提交的 aircraftTypes

    Returns:
        list: 机型列表

    Example:
        >>> normalize_aircraft_types('A320')
        ['A320']
        >>> normalize_aircraft_types(['A320', 'B738', 'A320', ''])
        ['A320', 'B738']
        >>> normalize_aircraft_types(None)
        []
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [raw]

    result = []
    for item in raw:
        item = str(item).strip()
        if item and item not in result:
            result.append(item)
    return result

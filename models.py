"""
数据模型

用户、活动、参与者三张内存表中的记录类型。
存储与并发控制见 utils/store.py。
"""

from datetime import datetime


class User:
    """
    用户模型

    Attributes:
        id (int): 用户唯一 ID
        username (str): 用户名（唯一，区分大小写）
        password (str): 密码（明文保存）
        is_admin (bool): 是否为管理员
        created_at (datetime): 创建时间
    """
    def __init__(self, id, username, password, is_admin=False, created_at=None):
        self.id = id
        self.username = username
        self.password = password
        self.is_admin = is_admin
        self.created_at = created_at or datetime.now()

    def to_session(self):
        """
        生成写入会话的用户快照

        快照是一份拷贝，之后对用户记录的修改（例如切换管理员权限）
        不会反映到已登录的会话中，需重新登录才会生效。

        Returns:
            dict: {'id', 'username', 'password', 'is_admin', 'created_at'}
        """
        return {
            'id': self.id,
            'username': self.username,
            'password': self.password,
            'is_admin': self.is_admin,
            'created_at': self.created_at.isoformat()
        }

    def __repr__(self):
        return f"<User {self.id} {self.username!r} admin={self.is_admin}>"


class Event:
    """
    活动模型

    Attributes:
        id (int): 活动唯一 ID
        title (str): 标题
        start_time (datetime): 开始时间
        departure (str): 出发机场
        arrival (str): 到达机场
        aircraft_types (list): 允许的机型（去重，保持提交顺序）
        details (str or None): 活动详情
        created_at (datetime): 创建时间
    """
    def __init__(self, id, title, start_time, departure, arrival,
                 aircraft_types=None, details=None, created_at=None):
        self.id = id
        self.title = title
        self.start_time = start_time
        self.departure = departure
        self.arrival = arrival
        self.aircraft_types = list(aircraft_types or [])
        self.details = details
        self.created_at = created_at or datetime.now()

    def __repr__(self):
        return f"<Event {self.id} {self.title!r}>"


class Participant:
    """
    参与者模型

    同一用户对同一活动最多一条记录。

    Attributes:
        id (int): 参与记录 ID
        event_id (int): 活动 ID
        user_id (int): 报名用户 ID
        name (str): 报名时填写的姓名
        qq (str): QQ 号
        flight_number (str): 航班号
        aircraft_type (str): 选择的机型
        participate_time (datetime): 报名时间
    """
    def __init__(self, id, event_id, user_id, name, qq, flight_number,
                 aircraft_type, participate_time=None):
        self.id = id
        self.event_id = event_id
        self.user_id = user_id
        self.name = name
        self.qq = qq
        self.flight_number = flight_number
        self.aircraft_type = aircraft_type
        self.participate_time = participate_time or datetime.now()

    def __repr__(self):
        return f"<Participant {self.id} event={self.event_id} user={self.user_id}>"

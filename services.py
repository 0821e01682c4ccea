"""
业务逻辑

注册、登录、报名以及管理员对活动和用户的修改。
每个修改操作都在 store.transaction() 中完成"检查 + 写入"，
失败时抛出 utils.errors 中的错误，不会留下部分修改。
"""

from utils.errors import (
    ValidationError,
    ConflictError,
    AuthError,
    NotFoundError,
    InvariantError,
    SelfActionError
)
from utils.validators import require_fields, normalize_aircraft_types
from utils.datetime_parser import parse_start_time

LAST_ADMIN_MESSAGE = '系统至少需要保留一个管理员用户'
PARTICIPANT_FIELDS = ('name', 'qq', 'flightNumber', 'aircraftType')


# ----------------------- 注册 / 登录 -----------------------

def register_user(store, username, password):
    """
    注册新用户

    新用户一律为普通用户。

    Args:
        store (InMemoryStore): 存储
        username (str): 用户名
        password (str): 密码

    Returns:
        User: 新建的用户

    Raises:
        ValidationError: 用户名或密码为空
        ConflictError: 用户名已存在（区分大小写）
    """
    require_fields([username, password], '请填写完整信息')

    with store.transaction():
        if store.find_user_by_username(username) is not None:
            raise ConflictError('用户名已存在')
        return store.insert_user(username, password, is_admin=False)


def authenticate(store, username, password):
    """
    登录校验

    Raises:
        ValidationError: 用户名或密码为空
        AuthError: 没有用户名和密码都完全匹配的用户
    """
    if not username or not password:
        raise ValidationError('请输入用户名和密码')

    user = store.find_user_by_credentials(username, password)
    if user is None:
        raise AuthError('用户名或密码错误')
    return user


# ----------------------- 报名 -----------------------

def participate(store, event_id, session_user, form):
    """
    报名参加活动

    检查顺序: 活动存在 → 已登录 → 未重复报名 → 表单完整

    Args:
        store (InMemoryStore): 存储
        event_id (int): 活动 ID
        session_user (dict or None): 会话中的用户快照
        form (Mapping): 包含 name, qq, flightNumber, aircraftType

    Returns:
        Participant: 新建的参与记录

    Raises:
        NotFoundError: 活动不存在
        AuthError: 未登录，或会话中的用户已被删除
        ConflictError: 已经报名过该活动
        ValidationError: 表单信息不完整
    """
    with store.transaction():
        if store.get_event(event_id) is None:
            raise NotFoundError('活动不存在')

        if not session_user:
            raise AuthError('请先登录')

        # 快照只用于权限判断，报名记录必须指向仍然存在的用户
        user_id = session_user['id']
        if store.get_user(user_id) is None:
            raise AuthError('请先登录')

        if store.find_participant(user_id, event_id) is not None:
            raise ConflictError('您已经参加过该活动')

        values = [form.get(field) for field in PARTICIPANT_FIELDS]
        require_fields(values, '请填写完整的参加活动信息')

        name, qq, flight_number, aircraft_type = values
        return store.insert_participant(
            event_id=event_id,
            user_id=user_id,
            name=name,
            qq=qq,
            flight_number=flight_number,
            aircraft_type=aircraft_type
        )


# ----------------------- 管理员 -----------------------

def add_event(store, form, aircraft_types=None):
    """
    添加活动

    Args:
        store (InMemoryStore): 存储
        form (Mapping): title, startTime, departure, arrival, details
        aircraft_types (str, list or None): 表单中的 aircraftTypes，
            单选时是字符串、多选时是列表

    Returns:
        Event: 新建的活动

    Raises:
        ValidationError: 缺少标题/开始时间/出发地/到达地，或开始时间无法解析
    """
    title = form.get('title')
    start_time = form.get('startTime')
    departure = form.get('departure')
    arrival = form.get('arrival')

    require_fields([title, start_time, departure, arrival], '请填写必要的活动信息')

    return store.insert_event(
        title=title,
        start_time=parse_start_time(start_time),
        departure=departure,
        arrival=arrival,
        aircraft_types=normalize_aircraft_types(aircraft_types),
        details=form.get('details') or None
    )


def _is_last_admin(store, user):
    return user.is_admin and store.count_admins() <= 1


def toggle_admin(store, user_id, acting_user):
    """
    切换用户的管理员权限

    不论操作者是不是目标本人，都不允许取消最后一个管理员的权限。

    Returns:
        User: 修改后的用户

    Raises:
        NotFoundError: 用户不存在
        InvariantError: 目标是唯一的管理员
    """
    with store.transaction():
        user = store.get_user(user_id)
        if user is None:
            raise NotFoundError('用户不存在')

        if _is_last_admin(store, user):
            raise InvariantError(LAST_ADMIN_MESSAGE)

        return store.update_user(user_id, is_admin=not user.is_admin)


def delete_user(store, user_id, acting_user):
    """
    删除用户（级联删除其参与记录）

    Returns:
        tuple: (被删除的 User, 被删除的参与记录数)

    Raises:
        NotFoundError: 用户不存在
        SelfActionError: 删除当前登录的用户
        InvariantError: 目标是唯一的管理员
    """
    with store.transaction():
        user = store.get_user(user_id)
        if user is None:
            raise NotFoundError('用户不存在')

        if user.id == acting_user['id']:
            raise SelfActionError('不允许删除当前登录的用户')

        if _is_last_admin(store, user):
            raise InvariantError(LAST_ADMIN_MESSAGE)

        return store.delete_user(user_id)


def delete_event(store, event_id):
    """
    删除活动（级联删除其参与记录）

    Returns:
        tuple: (被删除的 Event, 被删除的参与记录数)

    Raises:
        NotFoundError: 活动不存在
    """
    with store.transaction():
        if store.get_event(event_id) is None:
            raise NotFoundError('活动不存在')
        return store.delete_event(event_id)


# ----------------------- 查询 -----------------------

def get_event_detail(store, event_id):
    """
    活动详情

    Returns:
        tuple: (Event, 该活动的参与者列表)

    Raises:
        NotFoundError: 活动不存在
    """
    with store.transaction():
        event = store.get_event(event_id)
        if event is None:
            raise NotFoundError('活动不存在')
        return event, store.list_participants(event_id=event_id)


def events_with_participants(store):
    """
    后台首页数据：每个活动附带参与者及人数

    Returns:
        list: [{'event': Event, 'participants': [...], 'participant_count': int}]
    """
    with store.transaction():
        result = []
        for event in store.list_events():
            participants = store.list_participants(event_id=event.id)
            result.append({
                'event': event,
                'participants': participants,
                'participant_count': len(participants)
            })
        return result

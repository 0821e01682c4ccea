from datetime import datetime

import pytest

from utils.errors import ValidationError
from utils.validators import require_fields, normalize_aircraft_types
from utils.datetime_parser import parse_start_time, format_datetime_cn, format_datetime_short


def test_require_fields_passes():
    require_fields(['alice', 'pw1'], 'msg')


@pytest.mark.parametrize('values', [[None], [''], ['  '], ['ok', '']])
def test_require_fields_fails(values):
    with pytest.raises(ValidationError) as exc:
        require_fields(values, '请填写完整信息')
    assert exc.value.message == '请填写完整信息'


def test_normalize_aircraft_types():
    assert normalize_aircraft_types(None) == []
    assert normalize_aircraft_types('') == []
    assert normalize_aircraft_types(' A320 ') == ['A320']
    assert normalize_aircraft_types(['B738', 'A320', 'B738', '']) == ['B738', 'A320']


@pytest.mark.parametrize('value', ['2025-01-01T10:00', '2025-01-01 10:00', '2025-01-01T10:00:00'])
def test_parse_start_time(value):
    assert parse_start_time(value) == datetime(2025, 1, 1, 10, 0)


def test_parse_start_time_invalid():
    with pytest.raises(ValidationError) as exc:
        parse_start_time('2025/01/01 10:00')
    assert exc.value.message == '活动开始时间格式不正确'


def test_format_datetime():
    dt = datetime(2025, 1, 1, 10, 0)

    assert format_datetime_cn(dt) == '2025年01月01日 (周三) 10:00'
    assert format_datetime_short(dt) == '01-01 10:00'
    assert format_datetime_cn(None) == ''

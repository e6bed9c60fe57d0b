# autopaws/utils/test_datetime_utils.py
"""
통합 시간 관리 유틸리티 기능 테스트

사용법: python -m pytest autopaws/utils/test_datetime_utils.py -v
"""

import pytest
from datetime import datetime, date, timezone, timedelta
from autopaws.utils.datetime_utils import DateTimeUtils

def test_parse_iso_datetime():
    """ISO 포맷 파싱 테스트"""
    test_cases = [
        "2024-01-15T10:30:00Z",
        "2024-01-15T10:30:00+09:00",
        "2024-01-15T10:30:00.123456Z",
        "2024-01-15T10:30:00",
        "2024-01-15",
    ]

    for iso_string in test_cases:
        dt = DateTimeUtils.parse_iso_datetime(iso_string)
        assert isinstance(dt, datetime)
        assert dt.tzinfo == timezone.utc  # UTC로 정규화되어야 함

def test_parse_iso_datetime_converts_offset_to_utc():
    dt = DateTimeUtils.parse_iso_datetime("2024-01-15T10:30:00+09:00")
    assert dt == datetime(2024, 1, 15, 1, 30, tzinfo=timezone.utc)

def test_for_firestore():
    """Firestore 변환 테스트"""
    test_data = {
        'occurred_at': date(2020, 1, 15),
        'created_at': datetime(2024, 1, 15, 10, 30),
        'nested': {
            'next_due_at': date(2023, 12, 25)
        },
        'list_data': [
            {'created_at': datetime(2024, 1, 1)}
        ]
    }

    converted = DateTimeUtils.for_firestore(test_data)

    # date는 datetime으로 변환되어야 함
    assert isinstance(converted['occurred_at'], datetime)
    assert isinstance(converted['nested']['next_due_at'], datetime)
    assert isinstance(converted['list_data'][0]['created_at'], datetime)

    # 모든 datetime은 timezone-aware여야 함
    assert converted['occurred_at'].tzinfo == timezone.utc
    assert converted['created_at'].tzinfo == timezone.utc

def test_validate_datetime_field():
    """datetime 필드 검증 테스트"""
    valid_cases = [
        "2024-01-15T10:30:00Z",
        datetime(2024, 1, 15, 10, 30),
        datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        date(2024, 1, 15),
    ]

    for case in valid_cases:
        result = DateTimeUtils.validate_datetime_field(case)
        assert isinstance(result, datetime)
        assert result.tzinfo == timezone.utc

def test_elapsed_days():
    now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    assert DateTimeUtils.elapsed_days(now - timedelta(days=365), now) == 365
    assert DateTimeUtils.elapsed_days(now - timedelta(days=1, hours=23), now) == 1
    assert DateTimeUtils.elapsed_days(now + timedelta(days=2), now) == -2

def test_to_iso_string():
    dt = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
    assert DateTimeUtils.to_iso_string(dt) == "2024-01-15T10:30:00Z"
    assert DateTimeUtils.to_iso_string(None) is None

def test_error_handling():
    """오류 처리 테스트"""
    with pytest.raises(ValueError):
        DateTimeUtils.parse_iso_datetime("invalid-date")

    with pytest.raises(ValueError):
        DateTimeUtils.parse_iso_datetime("")

    with pytest.raises(ValueError):
        DateTimeUtils.validate_datetime_field(None)

    with pytest.raises(ValueError):
        DateTimeUtils.validate_datetime_field(12345)

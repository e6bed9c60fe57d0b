# autopaws/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간/날짜 처리를 위한 중앙화된 유틸리티 모듈

이 모듈의 목적:
1. 모든 시간 관련 작업을 표준화
2. Firestore 호환성 보장
3. 모든 datetime을 UTC timezone-aware로 통일
4. 경과 일수 계산을 한 곳에서 처리
"""

import logging
from datetime import datetime, date, timezone, time, timedelta
from typing import Any, Optional
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class DateTimeUtils:
    """시간/날짜 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def parse_iso_datetime(iso_string: str) -> datetime:
        """
        ISO 포맷 문자열을 datetime 객체로 파싱

        지원 포맷:
        - 2024-01-15T10:30:00Z
        - 2024-01-15T10:30:00+09:00
        - 2024-01-15T10:30:00.123456Z
        - 2024-01-15T10:30:00
        - 2024-01-15
        """
        try:
            if not iso_string:
                raise ValueError("빈 문자열은 파싱할 수 없습니다")

            # 'Z' 접미사 처리 (UTC 표시)
            if iso_string.endswith('Z'):
                iso_string = iso_string[:-1] + '+00:00'

            dt = dateutil_parser.isoparse(iso_string)
            return DateTimeUtils.to_utc(dt)

        except Exception as e:
            logger.error(f"ISO datetime 파싱 실패: {iso_string} - {e}")
            raise ValueError(f"잘못된 ISO 날짜 형식입니다: {iso_string}")

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """timezone-naive는 UTC로 간주하고, 모든 datetime을 UTC로 정규화"""
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    @staticmethod
    def to_iso_string(dt: Optional[datetime]) -> Optional[str]:
        """datetime 객체를 ISO 포맷 문자열로 변환 (None은 그대로 반환)"""
        if dt is None:
            return None
        return DateTimeUtils.to_utc(dt).isoformat().replace('+00:00', 'Z')

    @staticmethod
    def for_firestore(obj: Any) -> Any:
        """
        Firestore 저장을 위해 객체의 날짜/시간 필드를 변환

        변환 규칙:
        - date -> datetime (00:00:00 UTC)
        - timezone-naive datetime -> timezone-aware datetime (UTC)
        - dict/list 내부 재귀적 변환
        """
        if isinstance(obj, datetime):
            return DateTimeUtils.to_utc(obj)
        elif isinstance(obj, date):
            return datetime.combine(obj, time.min).replace(tzinfo=timezone.utc)
        elif isinstance(obj, dict):
            return {k: DateTimeUtils.for_firestore(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [DateTimeUtils.for_firestore(item) for item in obj]
        return obj

    @staticmethod
    def from_firestore(obj: Any) -> Any:
        """
        Firestore에서 읽은 데이터의 datetime 필드를 적절히 변환

        변환 규칙:
        - Firestore timestamp(DatetimeWithNanoseconds) -> UTC datetime
        - dict/list 내부 재귀적 변환
        """
        if isinstance(obj, datetime):
            return DateTimeUtils.to_utc(obj)
        elif isinstance(obj, dict):
            return {k: DateTimeUtils.from_firestore(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [DateTimeUtils.from_firestore(item) for item in obj]
        return obj

    @staticmethod
    def validate_datetime_field(value: Any, field_name: str = "datetime") -> datetime:
        """
        API 요청이나 저장소에서 받은 datetime 값을 검증하고 변환

        Args:
            value: 검증할 값 (ISO 문자열, date/datetime 객체)
            field_name: 필드명 (오류 메시지용)

        Returns:
            검증된 UTC timezone-aware datetime 객체

        Raises:
            ValueError: 값이 없거나 파싱할 수 없는 경우
        """
        if value is None:
            raise ValueError(f"{field_name}은 필수 필드입니다")

        if isinstance(value, datetime):
            return DateTimeUtils.to_utc(value)
        if isinstance(value, date):
            return DateTimeUtils.for_firestore(value)
        if isinstance(value, str):
            return DateTimeUtils.parse_iso_datetime(value)

        raise ValueError(f"{field_name}은 문자열 또는 datetime 객체여야 합니다")

    @staticmethod
    def elapsed_days(earlier: datetime, later: datetime) -> int:
        """
        두 시점 사이의 경과 일수를 내림하여 반환합니다.
        earlier가 later보다 미래면 음수가 됩니다.
        """
        delta = DateTimeUtils.to_utc(later) - DateTimeUtils.to_utc(earlier)
        return int(delta.total_seconds() // SECONDS_PER_DAY)

    @staticmethod
    def days_ago(now: datetime, days: int) -> datetime:
        """now 기준 days일 전 시점"""
        return DateTimeUtils.to_utc(now) - timedelta(days=days)


# 편의를 위한 글로벌 함수들
def now() -> datetime:
    """현재 UTC 시간 반환"""
    return DateTimeUtils.now()

def parse_iso(iso_string: str) -> datetime:
    """ISO 문자열을 datetime으로 파싱"""
    return DateTimeUtils.parse_iso_datetime(iso_string)

def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """datetime을 ISO 문자열로 변환"""
    return DateTimeUtils.to_iso_string(dt)

def for_firestore(obj: Any) -> Any:
    """Firestore 저장용 변환"""
    return DateTimeUtils.for_firestore(obj)

def from_firestore(obj: Any) -> Any:
    """Firestore 읽기용 변환"""
    return DateTimeUtils.from_firestore(obj)

def validate_datetime(value: Any, field_name: str = "datetime") -> datetime:
    """datetime 필드 검증"""
    return DateTimeUtils.validate_datetime_field(value, field_name)

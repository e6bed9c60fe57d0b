# autopaws/models/health_event.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any
from enum import Enum
import logging

from marshmallow import ValidationError

from autopaws.utils.datetime_utils import DateTimeUtils

class EventCategory(Enum):
    VACCINATION = "Vaccination"
    WEIGHT_CHECK = "Weight Check"
    DENTAL_CLEANING = "Dental Cleaning"
    CHECKUP = "Checkup"
    SURGERY = "Surgery"
    MEDICATION = "Medication"
    OTHER = "Other"

    @classmethod
    def from_value(cls, value: Any) -> "EventCategory":
        """
        저장소/요청에서 받은 카테고리 문자열을 Enum 멤버로 변환합니다.
        대소문자, 공백, 밑줄 차이는 무시하며 알 수 없는 값은 OTHER로 처리합니다.
        """
        if isinstance(value, cls):
            return value
        key = _normalize(value)
        for member in cls:
            if key in (_normalize(member.value), _normalize(member.name)):
                return member
        return cls.OTHER


def _normalize(value: Any) -> str:
    return ''.join(ch for ch in str(value or '').lower() if ch.isalnum())


@dataclass(frozen=True)
class HealthEvent:
    """
    Firestore 'health_records' 컬렉션 문서 구조.
    사용자가 기록한 하나의 케어 행위 (접종, 체중 측정, 치과 관리 등).
    occurred_at은 기록 생성 시각이 아니라 실제 케어가 이뤄진 시각입니다.
    """
    category: EventCategory
    occurred_at: datetime
    description: str = ""
    next_due_at: Optional[datetime] = None
    notes: Optional[str] = None
    vet: Optional[str] = None
    record_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'category', EventCategory.from_value(self.category))
        object.__setattr__(self, 'occurred_at', _parse_occurred_at(self.occurred_at))
        object.__setattr__(self, 'next_due_at', _parse_next_due_at(self.next_due_at, self.record_id))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HealthEvent":
        """
        Firestore 문서 또는 요청 본문으로부터 HealthEvent를 생성합니다.

        - category(또는 type) 문자열은 EventCategory로 변환
        - occurred_at(또는 date)을 파싱할 수 없으면 ValidationError
        - next_due_at을 파싱할 수 없으면 경고만 남기고 None으로 처리
        """
        return cls(
            category=data.get('category', data.get('type')),
            occurred_at=data.get('occurred_at', data.get('date')),
            description=data.get('description') or "",
            next_due_at=data.get('next_due_at') or None,
            notes=data.get('notes'),
            vet=data.get('vet'),
            record_id=data.get('record_id'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Firestore 저장 및 응답 직렬화를 위한 딕셔너리 변환."""
        return {
            'record_id': self.record_id,
            'category': self.category.value,
            'occurred_at': self.occurred_at,
            'description': self.description,
            'next_due_at': self.next_due_at,
            'notes': self.notes,
            'vet': self.vet,
        }


def _parse_occurred_at(value: Any) -> datetime:
    try:
        return DateTimeUtils.validate_datetime_field(value, 'occurred_at')
    except ValueError:
        raise ValidationError(f"occurred_at 값을 시각으로 해석할 수 없습니다: {value!r}", 'occurred_at')


def _parse_next_due_at(value: Any, record_id: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return DateTimeUtils.validate_datetime_field(value, 'next_due_at')
    except ValueError:
        logging.warning(f"Invalid next_due_at '{value}' for record {record_id}. Ignoring.")
        return None

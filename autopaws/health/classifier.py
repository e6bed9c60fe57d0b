# autopaws/health/classifier.py
"""
위험도 및 트렌드 분류기

기록 수와 경과 일수만으로 영역별 라벨을 만듭니다.
체중/활동 트렌드도 실제 수치가 아니라 기록 건수로만 판단합니다.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from autopaws.models.health_event import HealthEvent
from autopaws.models.pet import PetProfile
from .constants import (
    EMPTY_TREND,
    HIGH_RISK,
    RECURRING_CARE,
    TREND_BUCKETS,
    CareArea,
)
from .history import area_history, compliance_for

RISK_MESSAGES = {
    CareArea.VACCINATION: "No vaccination records found",
    CareArea.WEIGHT: "No weight monitoring records",
    CareArea.DENTAL: "No dental care records",
    CareArea.CHECKUP: "No checkup records",
}


@dataclass(frozen=True)
class AreaStatus:
    """한 영역의 분류 결과."""
    area: CareArea
    count: int
    days_since_last: Optional[int]
    trend: str
    compliance: Optional[str] = None
    risk_level: Optional[str] = None

    @property
    def status(self) -> str:
        """대표 상태 라벨: 주기 케어는 준수 상태, 나머지는 트렌드."""
        return self.compliance or self.trend

    def to_dict(self) -> Dict:
        return {
            'status': self.status,
            'count': self.count,
            'days_since_last': self.days_since_last,
            'trend': self.trend,
            'compliance': self.compliance,
            'risk_level': self.risk_level,
        }


@dataclass(frozen=True)
class Risk:
    category: str
    severity: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {'category': self.category, 'severity': self.severity, 'message': self.message}


@dataclass(frozen=True)
class Classification:
    """classify()의 결과. 영역 선언 순서대로 상태를 보관합니다."""
    statuses: Dict[CareArea, AreaStatus] = field(default_factory=dict)

    def __getitem__(self, area: CareArea) -> AreaStatus:
        return self.statuses[area]

    def get(self, area: CareArea) -> Optional[AreaStatus]:
        return self.statuses.get(area)

    @property
    def risks(self) -> List[Risk]:
        return [
            Risk(category=status.area.value, severity=status.risk_level, message=RISK_MESSAGES[status.area])
            for status in self.statuses.values()
            if status.risk_level is not None
        ]

    def to_dict(self) -> Dict[str, Dict]:
        return {area.value: status.to_dict() for area, status in self.statuses.items()}


def classify(events: Iterable[HealthEvent], pet: Optional[PetProfile], now: datetime,
             areas: Optional[Iterable[CareArea]] = None) -> Classification:
    """
    영역별 트렌드, 준수 상태, 위험도를 분류합니다.

    Args:
        events: 건강 이벤트 목록 (정렬 불필요)
        pet: 분석 대상 프로필 (현재 분류 규칙은 프로필을 참조하지 않음)
        now: 기준 시각
        areas: 분류할 영역 (기본값: 전체 영역)

    Returns:
        Classification
    """
    events = list(events)
    wanted = set(areas) if areas is not None else set(CareArea)
    statuses = {}
    # 출력 순서를 선언 순서로 고정
    for area in CareArea:
        if area in wanted:
            statuses[area] = _classify_area(events, area, now)
    return Classification(statuses=statuses)


def _classify_area(events: List[HealthEvent], area: CareArea, now: datetime) -> AreaStatus:
    history = area_history(events, area, now)

    care = RECURRING_CARE.get(area)
    compliance = compliance_for(history.days_since_last, care) if care else None

    # ACTIVITY는 기간 기반이라 '기록 없음' 위험도를 내지 않음
    risk_level = None
    if area.category is not None and not history.has_records:
        risk_level = HIGH_RISK

    return AreaStatus(
        area=area,
        count=history.count,
        days_since_last=history.days_since_last,
        trend=trend_for(area, history.count),
        compliance=compliance,
        risk_level=risk_level,
    )


def trend_for(area: CareArea, count: int) -> str:
    """기록 수에 따른 단조 버킷 분류."""
    for minimum, label in TREND_BUCKETS[area]:
        if count >= minimum:
            return label
    return EMPTY_TREND[area]

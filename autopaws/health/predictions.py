# autopaws/health/predictions.py
"""
다음 예정일 예측기

가장 최근 이벤트 시각 + 고정 주기로 다음 예정일을 계산합니다.
기록이 없거나 주기가 정의되지 않은 카테고리는 예정일 없는 Projection을 반환합니다.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from autopaws.models.health_event import EventCategory, HealthEvent
from autopaws.utils.datetime_utils import DateTimeUtils
from .constants import LOOKAHEAD_DAYS, PROJECTION_INTERVAL_DAYS
from .history import most_recent, sort_by_recency

UPCOMING_LIMIT = 3
# 체중 측정 권장 기준 (마지막 측정 후 경과 일수)
WEIGHT_CHECK_STALE_DAYS = 60


@dataclass(frozen=True)
class Projection:
    """
    예측 결과. available이 False면 '예측 불가'이며 '아직 예정 아님'과 구분됩니다.
    """
    category: EventCategory
    next_due_at: Optional[datetime] = None
    days_until_due: Optional[int] = None
    within_lookahead: bool = False

    @property
    def available(self) -> bool:
        return self.next_due_at is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category.value,
            'available': self.available,
            'next_due_at': DateTimeUtils.to_iso_string(self.next_due_at),
            'days_until_due': self.days_until_due,
            'within_lookahead': self.within_lookahead,
        }


def project(events: Iterable[HealthEvent], category: EventCategory, now: datetime) -> Projection:
    """
    카테고리의 다음 예정일을 예측합니다.

    Args:
        events: 건강 이벤트 목록
        category: 예측할 카테고리 (접종/치과)
        now: 기준 시각

    Returns:
        Projection (예측 불가 시 available == False)
    """
    interval_days = PROJECTION_INTERVAL_DAYS.get(category)
    if interval_days is None:
        return Projection(category=category)

    last_event = most_recent(events, category)
    if last_event is None:
        return Projection(category=category)

    next_due_at = last_event.occurred_at + timedelta(days=interval_days)
    days_until_due = interval_days - DateTimeUtils.elapsed_days(last_event.occurred_at, now)
    return Projection(
        category=category,
        next_due_at=next_due_at,
        days_until_due=days_until_due,
        within_lookahead=days_until_due <= LOOKAHEAD_DAYS,
    )


def project_all(events: Iterable[HealthEvent], now: datetime) -> Dict[EventCategory, Projection]:
    """주기가 정의된 모든 카테고리의 예측."""
    events = list(events)
    return {category: project(events, category, now) for category in PROJECTION_INTERVAL_DAYS}


def short_term_predictions(events: Iterable[HealthEvent], now: datetime) -> List[Dict[str, str]]:
    """앞으로 30일 안에 필요한 케어 목록."""
    events = list(events)
    predictions = []

    vaccination = project(events, EventCategory.VACCINATION, now)
    if vaccination.within_lookahead:
        predictions.append({
            'type': EventCategory.VACCINATION.value,
            'timeframe': f"Next {LOOKAHEAD_DAYS} days",
            'prediction': "Vaccination due soon",
            'confidence': "High",
            'action': "Schedule vaccination appointment",
        })

    last_weight = most_recent(events, EventCategory.WEIGHT_CHECK)
    if last_weight and DateTimeUtils.elapsed_days(last_weight.occurred_at, now) > WEIGHT_CHECK_STALE_DAYS:
        predictions.append({
            'type': EventCategory.WEIGHT_CHECK.value,
            'timeframe': "Next 2 weeks",
            'prediction': "Weight check recommended",
            'confidence': "Medium",
            'action': "Schedule weight monitoring",
        })

    dental = project(events, EventCategory.DENTAL_CLEANING, now)
    if dental.within_lookahead:
        predictions.append({
            'type': EventCategory.DENTAL_CLEANING.value,
            'timeframe': f"Next {LOOKAHEAD_DAYS} days",
            'prediction': "Dental cleaning recommended",
            'confidence': "Medium",
            'action': "Schedule dental examination",
        })

    return predictions


def upcoming_due(events: Iterable[HealthEvent], now: datetime, limit: int = UPCOMING_LIMIT) -> List[Dict[str, Any]]:
    """
    사용자가 직접 입력한 next_due_at이 미래인 기록을 가까운 순으로 반환합니다.
    엔진이 계산한 예측(project)과는 별개입니다.
    """
    pending = [e for e in sort_by_recency(events) if e.next_due_at and e.next_due_at > now]
    pending.sort(key=lambda e: e.next_due_at)
    return [
        {
            'category': e.category.value,
            'due_at': DateTimeUtils.to_iso_string(e.next_due_at),
            'description': e.description,
        }
        for e in pending[:limit]
    ]

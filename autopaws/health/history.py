# autopaws/health/history.py
"""
이벤트 이력 조회 헬퍼.
입력 순서와 무관하게 동작하도록 최신순 정렬은 여기서 처리합니다.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from autopaws.models.health_event import EventCategory, HealthEvent
from autopaws.utils.datetime_utils import DateTimeUtils
from .constants import (
    ACTIVITY_WINDOW_DAYS,
    CareArea,
    Compliance,
    RecurringCare,
)


@dataclass(frozen=True)
class AreaHistory:
    """한 케어 영역의 이력 요약."""
    area: CareArea
    count: int
    last_event: Optional[HealthEvent]
    days_since_last: Optional[int]

    @property
    def has_records(self) -> bool:
        return self.count > 0


def sort_by_recency(events: Iterable[HealthEvent]) -> List[HealthEvent]:
    """occurred_at 기준 최신순 정렬 (동률은 입력 순서 유지)."""
    return sorted(events, key=lambda e: e.occurred_at, reverse=True)


def events_for(events: Iterable[HealthEvent], category: EventCategory) -> List[HealthEvent]:
    """특정 카테고리의 이벤트를 최신순으로 반환."""
    return sort_by_recency(e for e in events if e.category is category)


def events_since(events: Iterable[HealthEvent], now: datetime, days: int) -> List[HealthEvent]:
    """now 기준 days일 이내(경계 포함)에 발생한 이벤트."""
    cutoff = DateTimeUtils.days_ago(now, days)
    return [e for e in events if e.occurred_at >= cutoff]


def most_recent(events: Iterable[HealthEvent], category: EventCategory) -> Optional[HealthEvent]:
    matching = events_for(events, category)
    return matching[0] if matching else None


def area_history(events: List[HealthEvent], area: CareArea, now: datetime) -> AreaHistory:
    """
    영역별 이력 요약을 만듭니다.
    ACTIVITY는 최근 30일 이내 모든 이벤트 수를, 나머지는 전체 이력 중 해당 카테고리 수를 셉니다.
    """
    if area.category is None:
        matching = sort_by_recency(events_since(events, now, ACTIVITY_WINDOW_DAYS))
    else:
        matching = events_for(events, area.category)

    last_event = matching[0] if matching else None
    days_since = DateTimeUtils.elapsed_days(last_event.occurred_at, now) if last_event else None
    return AreaHistory(area=area, count=len(matching), last_event=last_event, days_since_last=days_since)


def compliance_for(days_since_last: Optional[int], care: RecurringCare) -> str:
    """
    마지막 기록 이후 경과 일수로 준수 상태를 판정합니다.
    interval 이하는 Up to Date, interval+grace 이하는 Due Soon, 그 이후는 Overdue.
    """
    if days_since_last is None:
        return Compliance.NO_RECORDS
    if days_since_last <= care.interval_days:
        return Compliance.UP_TO_DATE
    if days_since_last <= care.overdue_after_days:
        return Compliance.DUE_SOON
    return Compliance.OVERDUE

# autopaws/health/insights.py
"""
부가 인사이트 생성 모듈

점수/분류 결과를 바탕으로 알림, 마일스톤, 다음 단계, 웰니스 점수,
장기 전망, 계절별 패턴 등 화면용 요약 정보를 만듭니다.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List

from autopaws.models.health_event import EventCategory, HealthEvent
from .classifier import Classification, Risk
from .constants import (
    LOW_SCORE_ALERT_THRESHOLD,
    TRAJECTORY_WINDOW_DAYS,
    CareArea,
    Compliance,
)
from .history import events_for, events_since

OVERALL = "overall"

# 웰니스 점수: 카테고리별 기록 1건당 가산점
WELLNESS_POINTS = {
    EventCategory.CHECKUP: 10,
    EventCategory.WEIGHT_CHECK: 5,
    EventCategory.VACCINATION: 15,
}

SEASONS_BY_MONTH = {
    3: 'spring', 4: 'spring', 5: 'spring',
    6: 'summer', 7: 'summer', 8: 'summer',
    9: 'fall', 10: 'fall', 11: 'fall',
    12: 'winter', 1: 'winter', 2: 'winter',
}


def generate_alerts(classification: Classification, score: int) -> List[Risk]:
    """기준을 통과하지 못한 영역에 대해서만 알림을 만듭니다."""
    alerts = []

    vaccination = classification.get(CareArea.VACCINATION)
    if vaccination and vaccination.compliance == Compliance.OVERDUE:
        alerts.append(Risk(
            category=CareArea.VACCINATION.value,
            severity="Critical",
            message="Vaccination significantly overdue - immediate attention required",
        ))

    dental = classification.get(CareArea.DENTAL)
    if dental and dental.compliance == Compliance.OVERDUE:
        alerts.append(Risk(
            category=CareArea.DENTAL.value,
            severity="High",
            message="It's been over a year since the last dental cleaning",
        ))

    if score < LOW_SCORE_ALERT_THRESHOLD:
        alerts.append(Risk(
            category=OVERALL,
            severity="Warning",
            message="Your pet's health score is below optimal. Please consult with your veterinarian.",
        ))

    return alerts


def generate_milestones(events: List[HealthEvent]) -> List[Dict[str, str]]:
    milestones = []
    if len(events) >= 10:
        milestones.append({
            'title': "Health Tracking Champion",
            'description': "You've recorded 10+ health events! Great job staying on top of your pet's health.",
        })
    if len(events_for(events, EventCategory.VACCINATION)) >= 3:
        milestones.append({
            'title': "Vaccination Pro",
            'description': "You've maintained excellent vaccination records for your pet.",
        })
    return milestones


def generate_next_steps(events: List[HealthEvent], classification: Classification) -> List[str]:
    """사용자가 바로 실행할 수 있는 짧은 할 일 목록."""
    next_steps = []

    vaccination = classification.get(CareArea.VACCINATION)
    if vaccination and vaccination.compliance != Compliance.UP_TO_DATE:
        next_steps.append("Schedule vaccination appointment")

    dental = classification.get(CareArea.DENTAL)
    if dental and dental.compliance == Compliance.OVERDUE:
        next_steps.append("Book dental cleaning appointment")

    checkup = classification.get(CareArea.CHECKUP)
    if checkup and checkup.compliance in (Compliance.NO_RECORDS, Compliance.OVERDUE):
        next_steps.append("Schedule annual health checkup")

    if len(events_for(events, EventCategory.WEIGHT_CHECK)) < 2:
        next_steps.append("Start regular weight monitoring")

    return next_steps


def wellness_score(events: Iterable[HealthEvent]) -> int:
    """예방 케어 기록 수 기반 웰니스 점수 (최대 100)."""
    total = sum(WELLNESS_POINTS.get(event.category, 0) for event in events)
    return min(100, total)


def longevity_outlook(score: int, wellness: int) -> Dict[str, Any]:
    average = (score + wellness) / 2
    if average >= 90:
        prediction = "Excellent - Above Average"
    elif average >= 75:
        prediction = "Good - Average to Above Average"
    elif average >= 60:
        prediction = "Fair - Average"
    else:
        prediction = "Below Average - Needs Attention"

    return {
        'prediction': prediction,
        'confidence': "High" if average >= 75 else "Medium",
        'factors': ["Health monitoring", "Preventive care", "Veterinary visits"],
    }


def health_trajectory(events: List[HealthEvent], now: datetime) -> str:
    """
    최근 90일 기록 수와 그 이전 기록 수를 비교합니다.
    기록 빈도만 비교하며 실제 건강 수치 변화는 반영하지 않습니다.
    """
    if len(events) < 3:
        return "insufficient data"

    recent = len(events_since(events, now, TRAJECTORY_WINDOW_DAYS))
    older = len(events) - recent
    if recent > older:
        return "improving"
    if recent < older:
        return "declining"
    return "stable"


def wellness_forecast(score: int, trajectory: str) -> Dict[str, Any]:
    if trajectory == "improving" and score > 80:
        forecast = "Excellent - Health improving"
    elif trajectory == "declining" or score < 60:
        forecast = "Concerning - Needs attention"
    elif score > 75:
        forecast = "Good - Maintaining health"
    else:
        forecast = "Stable"

    return {
        'forecast': forecast,
        'confidence': "High" if score > 75 else "Medium",
    }


def seasonal_patterns(events: Iterable[HealthEvent]) -> Dict[str, int]:
    counts = {'spring': 0, 'summer': 0, 'fall': 0, 'winter': 0}
    for event in events:
        counts[SEASONS_BY_MONTH[event.occurred_at.month]] += 1
    return counts


def vet_visit_frequency(events: List[HealthEvent], now: datetime) -> Dict[str, Any]:
    recent = len(events_since(events, now, TRAJECTORY_WINDOW_DAYS))
    if recent >= 3:
        frequency = "Excellent"
    elif recent >= 1:
        frequency = "Good"
    else:
        frequency = "Needs Improvement"
    return {'total_visits': len(events), 'recent_visits': recent, 'frequency': frequency}


def medication_history(events: List[HealthEvent]) -> Dict[str, Any]:
    """Medication 카테고리이거나 메모에 medication이 언급된 기록."""
    records = [
        e for e in events
        if e.category is EventCategory.MEDICATION or 'medication' in (e.notes or '').lower()
    ]
    return {
        'count': len(records),
        'recommendation': "Continue medication monitoring" if records else "No medications recorded",
    }

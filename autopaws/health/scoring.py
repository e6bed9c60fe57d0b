# autopaws/health/scoring.py
"""
건강 점수 계산 엔진

100점에서 시작해 영역별 고정 가중치만큼 감점합니다.
- 기록 없음: 가중치 전체 감점
- 오래됨(Due Soon) 또는 기록 부족(min_count 미만): 가중치 절반 감점
- 매우 오래됨(Overdue): 가중치 전체 감점
현재 시각은 항상 인자로 받으므로 같은 입력에는 같은 점수가 나옵니다.
"""

import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Optional

from autopaws.models.health_event import HealthEvent
from autopaws.models.pet import PetProfile
from .constants import (
    MAX_SCORE,
    MIN_SCORE,
    PARTIAL_PENALTY_RATIO,
    SCORE_RULES,
    CareArea,
    Compliance,
)
from .history import area_history, compliance_for

logger = logging.getLogger(__name__)

# (최소 점수, 등급, 설명) - 높은 기준부터 검사
GRADES = (
    (90, "Excellent", "Your pet is in excellent health with comprehensive care"),
    (75, "Good", "Your pet is in good health with regular monitoring"),
    (60, "Fair", "Your pet's health is fair, some areas need attention"),
    (MIN_SCORE, "Needs Attention", "Your pet's health needs immediate attention and care"),
)


def compute_score(events: Iterable[HealthEvent], pet: Optional[PetProfile], now: datetime) -> int:
    """
    이벤트 이력으로 0-100 사이의 건강 점수를 계산합니다.

    Args:
        events: 건강 이벤트 목록 (정렬 불필요)
        pet: 분석 대상 프로필 (현재 점수 규칙은 프로필을 참조하지 않음)
        now: 기준 시각

    Returns:
        반올림 후 [0, 100]으로 제한된 정수 점수
    """
    penalties = area_penalties(events, now)
    score = MAX_SCORE - sum(penalties.values())
    return clamp_score(score)


def area_penalties(events: Iterable[HealthEvent], now: datetime) -> Dict[CareArea, float]:
    """영역별 감점 내역. 점수 설명이나 디버깅에 사용합니다."""
    events = list(events)
    penalties = {}
    for area, rule in SCORE_RULES.items():
        history = area_history(events, area, now)
        penalties[area] = _penalty_for(history, rule)
    summary = {area.value: penalty for area, penalty in penalties.items()}
    logger.debug(f"Score penalties: {summary}")
    return penalties


def _penalty_for(history, rule) -> float:
    if not history.has_records:
        return rule.weight

    if rule.recurring is not None:
        compliance = compliance_for(history.days_since_last, rule.recurring)
        if compliance == Compliance.OVERDUE:
            return rule.weight
        if compliance == Compliance.DUE_SOON:
            return rule.weight * PARTIAL_PENALTY_RATIO

    if rule.min_count is not None and history.count < rule.min_count:
        return rule.weight * PARTIAL_PENALTY_RATIO

    return 0


def clamp_score(score: float) -> int:
    """반올림(0.5는 올림) 후 [0, 100] 범위로 제한."""
    rounded = int(Decimal(str(score)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))
    return max(MIN_SCORE, min(MAX_SCORE, rounded))


def health_grade(score: int) -> Dict[str, str]:
    """점수에 해당하는 등급과 설명."""
    for minimum, grade, description in GRADES:
        if score >= minimum:
            return {'grade': grade, 'description': description}
    return {'grade': GRADES[-1][1], 'description': GRADES[-1][2]}

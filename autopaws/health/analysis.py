# autopaws/health/analysis.py
"""
건강 분석 파사드

프로필과 이벤트 이력을 받아 점수, 분류, 권장사항, 예측, 인사이트를
하나의 AnalysisResult로 묶습니다. 저장소 접근 없이 순수 함수로만 동작합니다.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from autopaws.models.health_event import HealthEvent
from autopaws.models.pet import PetProfile
from autopaws.utils.datetime_utils import DateTimeUtils
from . import insights
from .breeds import age_analysis, breed_profile
from .classifier import Classification, classify
from .history import sort_by_recency
from .predictions import project_all, short_term_predictions, upcoming_due
from .recommendations import COMPREHENSIVE_CHECKUP, recommend
from .scoring import compute_score, health_grade

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """analyze()의 결과. 저장하지 않고 응답 직렬화에만 사용합니다."""
    score: int
    grade: Dict[str, str]
    category_statuses: Dict[str, Dict[str, Any]]
    recommendations: List[Dict[str, str]]
    risks: List[Dict[str, str]]
    alerts: List[Dict[str, str]] = field(default_factory=list)
    predictions: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    short_term_predictions: List[Dict[str, str]] = field(default_factory=list)
    upcoming: List[Dict[str, Any]] = field(default_factory=list)
    insights: Dict[str, Any] = field(default_factory=dict)
    breed_analysis: Dict[str, Any] = field(default_factory=dict)
    age_analysis: Dict[str, Any] = field(default_factory=dict)
    total_records: int = 0
    last_updated: Optional[datetime] = None
    is_fallback: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'grade': dict(self.grade),
            'category_statuses': {k: dict(v) for k, v in self.category_statuses.items()},
            'recommendations': [dict(r) for r in self.recommendations],
            'risks': [dict(r) for r in self.risks],
            'alerts': [dict(a) for a in self.alerts],
            'predictions': {k: dict(v) for k, v in self.predictions.items()},
            'short_term_predictions': [dict(p) for p in self.short_term_predictions],
            'upcoming': [dict(u) for u in self.upcoming],
            'insights': dict(self.insights),
            'breed_analysis': dict(self.breed_analysis),
            'age_analysis': dict(self.age_analysis),
            'total_records': self.total_records,
            'last_updated': DateTimeUtils.to_iso_string(self.last_updated),
            'is_fallback': self.is_fallback,
        }


def analyze(pet: PetProfile, events: Iterable[HealthEvent], now: datetime) -> AnalysisResult:
    """
    한 마리의 반려동물에 대한 전체 건강 분석을 수행합니다.

    Args:
        pet: 분석 대상 프로필
        events: 해당 반려동물의 건강 이벤트 전체 (정렬 불필요)
        now: 기준 시각 (naive이면 UTC로 간주)

    Returns:
        AnalysisResult
    """
    now = DateTimeUtils.to_utc(now)
    events = sort_by_recency(events)

    score = compute_score(events, pet, now)
    classification = classify(events, pet, now)
    recommendations = recommend(classification, score)
    logger.info(f"Health analysis for pet {pet.pet_id}: score={score}, records={len(events)}")

    profile = breed_profile(pet.breed)
    return AnalysisResult(
        score=score,
        grade=health_grade(score),
        category_statuses=classification.to_dict(),
        recommendations=[r.to_dict() for r in recommendations],
        risks=[r.to_dict() for r in classification.risks],
        alerts=[a.to_dict() for a in insights.generate_alerts(classification, score)],
        predictions={
            category.value: projection.to_dict()
            for category, projection in project_all(events, now).items()
        },
        short_term_predictions=short_term_predictions(events, now),
        upcoming=upcoming_due(events, now),
        insights=_build_insights(events, classification, score, now),
        breed_analysis={
            'breed': pet.breed,
            'family': profile.family,
            'risks': list(profile.health_risks),
            'recommendations': list(profile.recommendations),
        },
        age_analysis=age_analysis(pet),
        total_records=len(events),
        last_updated=now,
    )


def _build_insights(events: List[HealthEvent], classification: Classification,
                    score: int, now: datetime) -> Dict[str, Any]:
    wellness = insights.wellness_score(events)
    trajectory = insights.health_trajectory(events, now)
    return {
        'milestones': insights.generate_milestones(events),
        'next_steps': insights.generate_next_steps(events, classification),
        'wellness_score': wellness,
        'longevity': insights.longevity_outlook(score, wellness),
        'trajectory': trajectory,
        'wellness_forecast': insights.wellness_forecast(score, trajectory),
        'seasonal_patterns': insights.seasonal_patterns(events),
        'vet_visits': insights.vet_visit_frequency(events, now),
        'medications': insights.medication_history(events),
    }


def default_analysis() -> AnalysisResult:
    """
    분석을 수행할 수 없을 때 반환하는 유일한 기본값.
    호출할 때마다 새 객체를 만들므로 호출자가 수정해도 다른 응답에 영향이 없습니다.
    """
    return AnalysisResult(
        score=0,
        grade=health_grade(0),
        category_statuses={},
        recommendations=[COMPREHENSIVE_CHECKUP.to_dict()],
        risks=[],
        is_fallback=True,
    )

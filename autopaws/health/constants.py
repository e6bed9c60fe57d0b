# autopaws/health/constants.py
"""
건강 점수/분류/예측이 공유하는 고정 상수 테이블.
점수 계산 규칙과 주기 정보는 모두 이 모듈에서만 정의합니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from autopaws.models.health_event import EventCategory


class CareArea(Enum):
    """
    점수 계산 및 권장사항 정렬에 쓰이는 케어 영역.
    선언 순서가 같은 우선순위 내 정렬 순서입니다.
    """
    VACCINATION = "vaccination"
    DENTAL = "dental"
    ACTIVITY = "activity"
    WEIGHT = "weight"
    CHECKUP = "checkup"

    @property
    def category(self) -> Optional[EventCategory]:
        """영역에 대응하는 이벤트 카테고리. ACTIVITY는 모든 이벤트를 대상으로 하므로 None."""
        return AREA_CATEGORIES[self]

    @property
    def rank(self) -> int:
        return list(CareArea).index(self)


AREA_CATEGORIES: Dict[CareArea, Optional[EventCategory]] = {
    CareArea.VACCINATION: EventCategory.VACCINATION,
    CareArea.DENTAL: EventCategory.DENTAL_CLEANING,
    CareArea.ACTIVITY: None,
    CareArea.WEIGHT: EventCategory.WEIGHT_CHECK,
    CareArea.CHECKUP: EventCategory.CHECKUP,
}


@dataclass(frozen=True)
class RecurringCare:
    """주기적으로 반복되어야 하는 케어의 주기와 유예 기간 (일 단위)."""
    interval_days: int
    grace_days: int

    @property
    def overdue_after_days(self) -> int:
        return self.interval_days + self.grace_days


@dataclass(frozen=True)
class ScoreRule:
    """
    영역별 감점 규칙.
    - weight: 기록이 전혀 없을 때의 감점 (전체 가중치)
    - recurring: 설정되면 경과 일수로 Due Soon(절반)/Overdue(전체) 감점
    - min_count: 설정되면 기록 수가 이보다 적을 때 절반 감점
    """
    weight: float
    recurring: Optional[RecurringCare] = None
    min_count: Optional[int] = None


VACCINATION_CARE = RecurringCare(interval_days=365, grace_days=35)
DENTAL_CARE = RecurringCare(interval_days=180, grace_days=185)
CHECKUP_CARE = RecurringCare(interval_days=180, grace_days=185)

RECURRING_CARE: Dict[CareArea, RecurringCare] = {
    CareArea.VACCINATION: VACCINATION_CARE,
    CareArea.DENTAL: DENTAL_CARE,
    CareArea.CHECKUP: CHECKUP_CARE,
}

# 다음 예정일 예측에 사용하는 주기 (예측 대상은 접종/치과만)
PROJECTION_INTERVAL_DAYS: Dict[EventCategory, int] = {
    EventCategory.VACCINATION: VACCINATION_CARE.interval_days,
    EventCategory.DENTAL_CLEANING: DENTAL_CARE.interval_days,
}

SCORE_RULES: Dict[CareArea, ScoreRule] = {
    CareArea.VACCINATION: ScoreRule(weight=25, recurring=VACCINATION_CARE),
    CareArea.WEIGHT: ScoreRule(weight=20, min_count=3),
    CareArea.DENTAL: ScoreRule(weight=15, recurring=DENTAL_CARE),
    CareArea.ACTIVITY: ScoreRule(weight=15, min_count=2),
    CareArea.CHECKUP: ScoreRule(weight=15),
}

TOTAL_WEIGHT = sum(rule.weight for rule in SCORE_RULES.values())

MAX_SCORE = 100
MIN_SCORE = 0
PARTIAL_PENALTY_RATIO = 0.5

ACTIVITY_WINDOW_DAYS = 30
LOOKAHEAD_DAYS = 30
TRAJECTORY_WINDOW_DAYS = 90

# 추천 생성기의 점수 하한 (미만이면 종합 검진 권장)
COMPREHENSIVE_CHECKUP_THRESHOLD = 70
# 점수 경고 알림 하한
LOW_SCORE_ALERT_THRESHOLD = 60


class Compliance:
    """주기 케어의 준수 상태 라벨."""
    NO_RECORDS = "No Records"
    UP_TO_DATE = "Up to Date"
    DUE_SOON = "Due Soon"
    OVERDUE = "Overdue"


class Trend:
    """기록 수 기반 트렌드 라벨. 수치 변화량은 계산하지 않습니다."""
    NO_DATA = "No Data"
    # 접종
    NEEDS_IMPROVEMENT = "Needs Improvement"
    GOOD = "Good"
    EXCELLENT = "Excellent"
    # 체중
    INSUFFICIENT_DATA = "Insufficient Data"
    ADEQUATE = "Adequate"
    WELL_MONITORED = "Well Monitored"
    # 치과
    NEEDS_ATTENTION = "Needs Attention"
    WELL_MAINTAINED = "Well Maintained"
    # 활동
    LOW = "Low"
    MODERATE = "Moderate"
    ACTIVE = "Active"
    VERY_ACTIVE = "Very Active"
    # 검진
    RECORDED = "Recorded"


# (최소 기록 수, 라벨) - 높은 기준부터 검사
TREND_BUCKETS: Dict[CareArea, tuple] = {
    CareArea.VACCINATION: ((3, Trend.EXCELLENT), (2, Trend.GOOD), (1, Trend.NEEDS_IMPROVEMENT)),
    CareArea.WEIGHT: ((5, Trend.WELL_MONITORED), (2, Trend.ADEQUATE), (1, Trend.INSUFFICIENT_DATA)),
    CareArea.DENTAL: ((2, Trend.WELL_MAINTAINED), (1, Trend.NEEDS_ATTENTION)),
    CareArea.ACTIVITY: ((5, Trend.VERY_ACTIVE), (3, Trend.ACTIVE), (1, Trend.MODERATE)),
    CareArea.CHECKUP: ((1, Trend.RECORDED),),
}

# 기록이 0건일 때의 트렌드 라벨
EMPTY_TREND: Dict[CareArea, str] = {
    CareArea.VACCINATION: Trend.NO_DATA,
    CareArea.WEIGHT: Trend.NO_DATA,
    CareArea.DENTAL: Trend.NO_DATA,
    CareArea.ACTIVITY: Trend.LOW,
    CareArea.CHECKUP: Trend.NO_DATA,
}

HIGH_RISK = "High"

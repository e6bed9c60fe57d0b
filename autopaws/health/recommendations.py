# autopaws/health/recommendations.py
"""
권장사항 생성기

분류 결과 라벨을 고정된 결정 테이블에서 조회해 권장사항을 만듭니다.
정렬은 우선순위(High → Medium → Low), 같은 우선순위에서는 영역 선언 순서입니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .classifier import Classification
from .constants import (
    COMPREHENSIVE_CHECKUP_THRESHOLD,
    CareArea,
    Compliance,
    Trend,
)


class Priority(Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        return list(Priority).index(self)


@dataclass(frozen=True)
class Recommendation:
    priority: Priority
    category: CareArea
    text: str
    action: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'priority': self.priority.value,
            'category': self.category.value,
            'text': self.text,
            'action': self.action,
        }


# (영역, 상태 라벨) -> (우선순위, 권장사항, 실행 항목)
# ACTIVITY/WEIGHT는 트렌드 라벨, 나머지는 준수 상태 라벨로 조회합니다.
DECISION_TABLE: Dict[Tuple[CareArea, str], Tuple[Priority, str, str]] = {
    (CareArea.VACCINATION, Compliance.NO_RECORDS):
        (Priority.HIGH, "Schedule initial vaccinations", "Schedule vaccination consultation"),
    (CareArea.VACCINATION, Compliance.OVERDUE):
        (Priority.HIGH, "Schedule vaccination appointment", "Contact your veterinarian"),
    (CareArea.VACCINATION, Compliance.DUE_SOON):
        (Priority.MEDIUM, "Vaccination due soon", "Schedule vaccination appointment"),

    (CareArea.DENTAL, Compliance.NO_RECORDS):
        (Priority.MEDIUM, "Consider dental cleaning appointment", "Schedule dental examination"),
    (CareArea.DENTAL, Compliance.OVERDUE):
        (Priority.HIGH, "Dental cleaning needed", "Schedule dental appointment"),
    (CareArea.DENTAL, Compliance.DUE_SOON):
        (Priority.LOW, "Dental cleaning due soon", "Book dental cleaning"),

    (CareArea.ACTIVITY, Trend.LOW):
        (Priority.MEDIUM, "Increase health monitoring", "Schedule regular checkups"),
    (CareArea.ACTIVITY, Trend.MODERATE):
        (Priority.LOW, "Log care activities more regularly", "Record health events weekly"),

    (CareArea.WEIGHT, Trend.NO_DATA):
        (Priority.MEDIUM, "Start regular weight monitoring", "Schedule weight check"),
    (CareArea.WEIGHT, Trend.INSUFFICIENT_DATA):
        (Priority.LOW, "Continue weight checks to build a baseline", "Record weight monthly"),

    (CareArea.CHECKUP, Compliance.NO_RECORDS):
        (Priority.MEDIUM, "Schedule a routine checkup", "Book annual health checkup"),
    (CareArea.CHECKUP, Compliance.OVERDUE):
        (Priority.MEDIUM, "Annual checkup overdue", "Book annual health checkup"),
}

COMPREHENSIVE_CHECKUP = Recommendation(
    priority=Priority.HIGH,
    category=CareArea.CHECKUP,
    text="Schedule a comprehensive health checkup",
    action="Contact your veterinarian",
)


def recommend(classification: Classification, score: int) -> List[Recommendation]:
    """
    분류 결과와 점수로 정렬된 권장사항 목록을 만듭니다.
    점수가 70 미만이면 종합 검진 권장을 항상 한 번 포함합니다.
    """
    matched = []
    for area, status in classification.statuses.items():
        label = status.compliance if status.compliance is not None else status.trend
        rule = DECISION_TABLE.get((area, label))
        if rule:
            priority, text, action = rule
            matched.append(Recommendation(priority=priority, category=area, text=text, action=action))

    if score < COMPREHENSIVE_CHECKUP_THRESHOLD:
        matched.append(COMPREHENSIVE_CHECKUP)

    # sorted는 안정 정렬이므로 같은 영역 내 추가 순서가 유지됨
    return sorted(matched, key=lambda r: (r.priority.rank, r.category.rank))

# autopaws/health/test_recommendations.py
"""
권장사항 생성기 테스트
"""

from autopaws.models.health_event import EventCategory
from autopaws.health.classifier import classify
from autopaws.health.constants import CareArea
from autopaws.health.recommendations import COMPREHENSIVE_CHECKUP, Priority, recommend
from autopaws.health.scoring import compute_score
from .conftest import NOW, make_event


def test_fallback_emitted_once_when_nothing_else_triggers(pet, full_care_events):
    classification = classify(full_care_events, pet, NOW)
    assert recommend(classification, 65) == [COMPREHENSIVE_CHECKUP]


def test_no_recommendations_for_healthy_history(pet, full_care_events):
    classification = classify(full_care_events, pet, NOW)
    assert recommend(classification, compute_score(full_care_events, pet, NOW)) == []


def test_empty_history_recommendations_sorted(pet):
    classification = classify([], pet, NOW)
    result = recommend(classification, compute_score([], pet, NOW))

    ranks = [r.priority.rank for r in result]
    assert ranks == sorted(ranks)
    assert [r.text for r in result].count(COMPREHENSIVE_CHECKUP.text) == 1

    high = [r for r in result if r.priority is Priority.HIGH]
    assert [r.category for r in high] == [CareArea.VACCINATION, CareArea.CHECKUP]

    medium = [r.category for r in result if r.priority is Priority.MEDIUM]
    assert medium == [CareArea.DENTAL, CareArea.ACTIVITY, CareArea.WEIGHT, CareArea.CHECKUP]


def test_recent_vaccination_scenario(pet):
    """최근 접종 1건: 접종 권장은 없고 치과/체중/검진 권장은 있음"""
    events = [make_event(EventCategory.VACCINATION, 10)]
    score = compute_score(events, pet, NOW)
    result = recommend(classify(events, pet, NOW), score)
    categories = {r.category for r in result}

    assert CareArea.VACCINATION not in categories
    assert {CareArea.DENTAL, CareArea.WEIGHT, CareArea.CHECKUP} <= categories


def test_overdue_vaccination_is_high_priority(pet, full_care_events):
    events = [e for e in full_care_events if e.category is not EventCategory.VACCINATION]
    events.append(make_event(EventCategory.VACCINATION, 500))
    result = recommend(classify(events, pet, NOW), 75)

    assert result[0].priority is Priority.HIGH
    assert result[0].text == "Schedule vaccination appointment"
    assert result[0].to_dict()['category'] == "vaccination"

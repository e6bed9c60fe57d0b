# autopaws/health/test_predictions.py
"""
다음 예정일 예측기 테스트
"""

from datetime import timedelta

from autopaws.models.health_event import EventCategory
from autopaws.health.predictions import (
    project,
    project_all,
    short_term_predictions,
    upcoming_due,
)
from .conftest import NOW, make_event


def test_projection_within_lookahead():
    event = make_event(EventCategory.VACCINATION, 340)
    projection = project([event], EventCategory.VACCINATION, NOW)

    assert projection.available
    assert projection.next_due_at == event.occurred_at + timedelta(days=365)
    assert projection.days_until_due == 25
    assert projection.within_lookahead is True


def test_projection_not_yet_due():
    projection = project([make_event(EventCategory.DENTAL_CLEANING, 10)], EventCategory.DENTAL_CLEANING, NOW)
    assert projection.days_until_due == 170
    assert projection.within_lookahead is False


def test_overdue_projection_is_negative():
    projection = project([make_event(EventCategory.VACCINATION, 400)], EventCategory.VACCINATION, NOW)
    assert projection.days_until_due == -35
    assert projection.within_lookahead is True


def test_projection_uses_most_recent_event():
    events = [make_event(EventCategory.VACCINATION, 700), make_event(EventCategory.VACCINATION, 100)]
    assert project(events, EventCategory.VACCINATION, NOW).days_until_due == 265


def test_unavailable_projection_keeps_category():
    """기록이 없거나 주기가 없는 카테고리는 예외 없이 예정일 없는 Projection"""
    missing = project([], EventCategory.VACCINATION, NOW)
    assert not missing.available
    assert missing.to_dict() == {
        'category': "Vaccination",
        'available': False,
        'next_due_at': None,
        'days_until_due': None,
        'within_lookahead': False,
    }

    no_interval = project([make_event(EventCategory.CHECKUP, 5)], EventCategory.CHECKUP, NOW)
    assert no_interval.category is EventCategory.CHECKUP
    assert not no_interval.available


def test_project_all_covers_recurring_categories():
    result = project_all([make_event(EventCategory.VACCINATION, 1)], NOW)
    assert set(result) == {EventCategory.VACCINATION, EventCategory.DENTAL_CLEANING}
    assert not result[EventCategory.DENTAL_CLEANING].available
    assert result[EventCategory.DENTAL_CLEANING].to_dict()['category'] == "Dental Cleaning"


def test_short_term_predictions():
    events = [
        make_event(EventCategory.VACCINATION, 350),
        make_event(EventCategory.WEIGHT_CHECK, 61),
        make_event(EventCategory.DENTAL_CLEANING, 20),
    ]
    types = [p['type'] for p in short_term_predictions(events, NOW)]
    assert types == ["Vaccination", "Weight Check"]


def test_upcoming_due_sorted_and_limited():
    events = [
        make_event(EventCategory.VACCINATION, 10, next_due_at=NOW + timedelta(days=40)),
        make_event(EventCategory.DENTAL_CLEANING, 10, next_due_at=NOW + timedelta(days=5)),
        make_event(EventCategory.CHECKUP, 10, next_due_at=NOW - timedelta(days=1)),
        make_event(EventCategory.MEDICATION, 3, next_due_at=NOW + timedelta(days=2)),
        make_event(EventCategory.OTHER, 3, next_due_at=NOW + timedelta(days=90)),
    ]
    result = upcoming_due(events, NOW)
    assert [u['category'] for u in result] == ["Medication", "Dental Cleaning", "Vaccination"]

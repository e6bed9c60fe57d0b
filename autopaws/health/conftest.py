# autopaws/health/conftest.py
from datetime import datetime, timedelta, timezone

import pytest

from autopaws.models.health_event import EventCategory, HealthEvent
from autopaws.models.pet import PetProfile

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_event(category, days_ago, **kwargs):
    """NOW 기준 days_ago일 전에 발생한 이벤트"""
    return HealthEvent(category=category, occurred_at=NOW - timedelta(days=days_ago), **kwargs)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def pet():
    return PetProfile(breed="Labrador Retriever", age_years=3, weight="30kg", name="Coco", pet_id="pet-1")


@pytest.fixture
def full_care_events():
    """모든 영역이 기준을 충족하는 이력"""
    return [
        make_event(EventCategory.VACCINATION, 10),
        make_event(EventCategory.DENTAL_CLEANING, 10),
        make_event(EventCategory.WEIGHT_CHECK, 5),
        make_event(EventCategory.WEIGHT_CHECK, 15),
        make_event(EventCategory.WEIGHT_CHECK, 25),
        make_event(EventCategory.CHECKUP, 20),
    ]

# autopaws/api/health/test_health_services.py
"""
건강 분석 서비스 테스트
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock
from marshmallow import ValidationError

from autopaws.api.conftest import firestore_doc
from autopaws.api.health.services import HealthAnalysisService
from autopaws.api.records.services import HealthRecordService
from autopaws.models.health_event import EventCategory, HealthEvent
from autopaws.models.pet import PetProfile

NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)

@pytest.fixture
def pet_service():
    service = MagicMock()
    service.get_pet_profile.return_value = PetProfile(breed="German Shepherd", age_years=9, name="Max")
    return service

@pytest.fixture
def record_service():
    service = MagicMock()
    service.get_events.return_value = [
        HealthEvent(category=EventCategory.VACCINATION, occurred_at=NOW - timedelta(days=340)),
    ]
    return service

def test_get_analysis(pet_service, record_service):
    service = HealthAnalysisService(pet_service, record_service)
    result = service.get_analysis('pet-1', 'user-1', now=NOW)

    assert result.is_fallback is False
    assert result.total_records == 1
    assert result.breed_analysis['family'] == "german shepherd"
    pet_service.get_pet_profile.assert_called_once_with('pet-1', 'user-1')

def test_event_store_failure_returns_fallback(pet_service, record_service):
    record_service.get_events.side_effect = RuntimeError("firestore down")
    service = HealthAnalysisService(pet_service, record_service)

    result = service.get_analysis('pet-1', 'user-1', now=NOW)

    assert result.is_fallback is True
    assert result.score == 0

def test_ownership_error_propagates(pet_service, record_service):
    pet_service.get_pet_profile.side_effect = PermissionError("권한 없음")
    service = HealthAnalysisService(pet_service, record_service)
    with pytest.raises(PermissionError):
        service.get_analysis('pet-1', 'intruder', now=NOW)
    record_service.get_events.assert_not_called()

def test_get_predictions(pet_service, record_service):
    result = HealthAnalysisService(pet_service, record_service).get_predictions('pet-1', 'user-1', now=NOW)

    vaccination = next(p for p in result['projections'] if p['category'] == "Vaccination")
    dental = next(p for p in result['projections'] if p['category'] == "Dental Cleaning")
    assert vaccination['days_until_due'] == 25
    assert vaccination['within_lookahead'] is True
    assert dental['available'] is False
    assert result['short_term_predictions'][0]['type'] == "Vaccination"

def test_get_schedule(pet_service, record_service):
    result = HealthAnalysisService(pet_service, record_service).get_schedule('pet-1', 'user-1')

    assert result['pet_name'] == "Max"
    assert result['age_analysis']['life_stage'] == "Senior"
    types = [item['type'] for item in result['schedule']]
    assert "Intensive Training" in types
    assert "Joint Care Exercise" in types

def test_malformed_stored_record_does_not_trigger_fallback(pet_service):
    """잘못된 문서는 건너뛰고 나머지 기록으로 실제 분석을 수행"""
    db = MagicMock()
    record_service = HealthRecordService(pet_service=pet_service, db=db)
    record_service.records_ref.where.return_value.stream.return_value = [
        firestore_doc({'category': 'Vaccination', 'occurred_at': NOW - timedelta(days=10)}, doc_id='good'),
        firestore_doc({'occurred_at': 'garbage'}, doc_id='bad'),
    ]

    result = HealthAnalysisService(pet_service, record_service).get_analysis('pet-1', 'user-1', now=NOW)

    assert result.is_fallback is False
    assert result.total_records == 1

def test_validation_error_from_store_is_not_masked(pet_service, record_service):
    record_service.get_events.side_effect = ValidationError("잘못된 값", 'occurred_at')
    service = HealthAnalysisService(pet_service, record_service)
    with pytest.raises(ValidationError):
        service.get_analysis('pet-1', 'user-1', now=NOW)

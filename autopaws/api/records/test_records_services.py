# autopaws/api/records/test_records_services.py
"""
건강 기록 서비스 테스트 (Firestore는 MagicMock으로 대체)
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock
from marshmallow import ValidationError

from autopaws.api.pets.services import PetProfileService
from autopaws.api.records.services import HealthRecordService
from autopaws.models.health_event import EventCategory
from autopaws.api.conftest import firestore_doc

@pytest.fixture
def db():
    return MagicMock()

@pytest.fixture
def pet_service(db):
    service = PetProfileService(db=db)
    db.collection.return_value.document.return_value.get.return_value = firestore_doc(
        {'user_id': 'user-1', 'breed': 'Pug', 'age': 3}
    )
    return service

def test_get_pet_profile_checks_owner(pet_service):
    pet = pet_service.get_pet_profile('pet-1', 'user-1')
    assert pet.breed == 'Pug'
    assert pet.pet_id == 'pet-1'

    with pytest.raises(PermissionError):
        pet_service.get_pet_profile('pet-1', 'someone-else')

def test_missing_pet_is_forbidden(db):
    service = PetProfileService(db=db)
    db.collection.return_value.document.return_value.get.return_value = firestore_doc(None)
    with pytest.raises(PermissionError):
        service.ensure_owner('ghost', 'user-1')

def test_create_record_saves_document(db, pet_service):
    service = HealthRecordService(pet_service=pet_service, db=db)
    record = service.create_record('pet-1', 'user-1', {
        'category': 'Dental Cleaning',
        'occurred_at': '2025-04-01T10:00:00Z',
        'description': 'Scaling',
        'status': 'Completed',
    })

    assert record['category'] == 'Dental Cleaning'
    assert record['pet_id'] == 'pet-1'
    assert record['occurred_at'] == datetime(2025, 4, 1, 10, tzinfo=timezone.utc)
    saved = db.collection.return_value.document.return_value.set.call_args[0][0]
    assert saved['record_id'] == record['record_id']
    assert saved['user_id'] == 'user-1'

def test_create_record_invalid_date(db, pet_service):
    service = HealthRecordService(pet_service=pet_service, db=db)
    with pytest.raises(ValidationError):
        service.create_record('pet-1', 'user-1', {'category': 'Checkup', 'occurred_at': 'n/a'})

def test_get_events_converts_documents(db, pet_service):
    service = HealthRecordService(pet_service=pet_service, db=db)
    service.records_ref.where.return_value.stream.return_value = [
        firestore_doc({'category': 'Vaccination', 'occurred_at': datetime(2025, 1, 1, tzinfo=timezone.utc)}),
        firestore_doc({'type': 'WeightCheck', 'date': '2025-02-01'}),
    ]

    events = service.get_events('pet-1')

    assert [e.category for e in events] == [EventCategory.VACCINATION, EventCategory.WEIGHT_CHECK]
    service.records_ref.where.assert_called_once_with('pet_id', '==', 'pet-1')

def test_delete_record_of_other_pet_is_not_found(db, pet_service):
    service = HealthRecordService(pet_service=pet_service, db=db)
    # 소유권 확인과 기록 조회가 같은 MagicMock 문서를 반환하므로 pet_id가 없는 문서로 간주됨
    with pytest.raises(FileNotFoundError):
        service.delete_record('pet-1', 'user-1', 'r1')

def test_get_events_skips_malformed_documents(db, pet_service):
    """발생 시각이 잘못된 문서 하나 때문에 나머지 이력을 잃지 않아야 함"""
    service = HealthRecordService(pet_service=pet_service, db=db)
    service.records_ref.where.return_value.stream.return_value = [
        firestore_doc({'category': 'Vaccination', 'occurred_at': '2025-01-01'}, doc_id='good'),
        firestore_doc({'category': 'Checkup', 'occurred_at': 'garbage'}, doc_id='bad'),
    ]

    events = service.get_events('pet-1')

    assert [e.category for e in events] == [EventCategory.VACCINATION]

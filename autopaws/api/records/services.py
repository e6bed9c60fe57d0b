# autopaws/api/records/services.py
import logging
import uuid
from typing import Dict, Any, List, Optional
from firebase_admin import firestore
from marshmallow import ValidationError

from autopaws.api.pets.services import PetProfileService
from autopaws.models.health_event import HealthEvent
from autopaws.utils.datetime_utils import DateTimeUtils

class HealthRecordService:
    """
    건강 기록(health_records 컬렉션)의 생성, 조회, 삭제를 전담하는 서비스.
    기록은 추가만 되고 수정하지 않으며, 분석 엔진에는 HealthEvent 목록으로 제공됩니다.
    """
    def __init__(self, pet_service: PetProfileService, db=None):
        self.db = db or firestore.client()
        self.records_ref = self.db.collection('health_records')
        self.pet_service = pet_service
        logging.info("HealthRecordService initialized.")

    def create_record(self, pet_id: str, user_id: str, record_data: Dict[str, Any]) -> Dict[str, Any]:
        """검증된 요청 데이터로 건강 기록을 Firestore에 저장합니다."""
        self.pet_service.ensure_owner(pet_id, user_id)
        try:
            record_id = str(uuid.uuid4())
            event = HealthEvent.from_dict({**record_data, 'record_id': record_id})

            record = event.to_dict()
            record.update({
                'pet_id': pet_id,
                'user_id': user_id,
                'status': record_data.get('status', "Completed"),
                'created_at': DateTimeUtils.now(),
            })
            self.records_ref.document(record_id).set(DateTimeUtils.for_firestore(record))

            logging.info(f"Health record created for pet {pet_id} (category: {event.category.value})")
            return record

        except Exception as e:
            logging.error(f"Failed to create health record for pet {pet_id}: {e}", exc_info=True)
            raise

    def list_records(self, pet_id: str, user_id: str, category: Optional[str] = None,
                     limit: int = 50) -> Dict[str, Any]:
        """
        반려동물의 건강 기록을 최신순으로 조회합니다.

        Args:
            pet_id: 반려동물 ID
            user_id: 요청 사용자 ID (소유권 확인용)
            category: 카테고리 필터 (EventCategory 값)
            limit: 조회 개수 제한

        Returns:
            {'records': [...], 'meta': {...}}
        """
        self.pet_service.ensure_owner(pet_id, user_id)
        try:
            query = self.records_ref.where('pet_id', '==', pet_id)
            if category:
                query = query.where('category', '==', category)
            query = query.order_by('occurred_at', direction=firestore.Query.DESCENDING)

            records = [DateTimeUtils.from_firestore(doc.to_dict()) for doc in query.limit(limit).stream()]
            return {
                'records': records,
                'meta': {'total_count': len(records), 'limit': limit, 'category': category},
            }

        except Exception as e:
            logging.error(f"Health records query failed for pet {pet_id}: {e}", exc_info=True)
            raise

    def get_events(self, pet_id: str) -> List[HealthEvent]:
        """
        분석 엔진용 전체 이력 조회. 소유권은 호출자가 먼저 확인해야 합니다.
        한 번의 쿼리로 모든 기록을 읽고 정렬은 엔진에 맡깁니다.
        발생 시각을 해석할 수 없는 문서는 경고를 남기고 건너뜁니다.
        """
        try:
            docs = self.records_ref.where('pet_id', '==', pet_id).stream()
            events = []
            for doc in docs:
                try:
                    events.append(HealthEvent.from_dict(DateTimeUtils.from_firestore(doc.to_dict())))
                except ValidationError as err:
                    logging.warning(f"Skipping malformed health record {doc.id} for pet {pet_id}: {err.messages}")
            return events
        except Exception as e:
            logging.error(f"Failed to load health events for pet {pet_id}: {e}")
            raise

    def delete_record(self, pet_id: str, user_id: str, record_id: str) -> None:
        """[소유자 전용] 건강 기록을 삭제합니다."""
        self.pet_service.ensure_owner(pet_id, user_id)
        doc_ref = self.records_ref.document(record_id)
        doc = doc_ref.get()
        if not doc.exists or doc.to_dict().get('pet_id') != pet_id:
            raise FileNotFoundError("해당 ID의 건강 기록을 찾을 수 없습니다.")

        doc_ref.delete()
        logging.info(f"Health record {record_id} deleted for pet {pet_id}")

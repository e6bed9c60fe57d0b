# autopaws/api/health/services.py
"""
건강 분석 서비스

소유권 확인, 프로필/기록 조회를 담당하고 실제 계산은 autopaws.health 엔진에 위임합니다.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from marshmallow import ValidationError

from autopaws.api.pets.services import PetProfileService
from autopaws.api.records.services import HealthRecordService
from autopaws.health import AnalysisResult, analyze, default_analysis
from autopaws.health.breeds import age_analysis, breed_profile, daily_schedule
from autopaws.health.predictions import project_all, short_term_predictions, upcoming_due
from autopaws.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)

class HealthAnalysisService:
    """반려동물 건강 분석 요청을 처리하는 서비스."""

    def __init__(self, pet_service: PetProfileService, record_service: HealthRecordService):
        self.pet_service = pet_service
        self.record_service = record_service
        logger.info("HealthAnalysisService initialized.")

    def get_analysis(self, pet_id: str, user_id: str, now: Optional[datetime] = None) -> AnalysisResult:
        """
        전체 건강 분석을 수행합니다.

        Args:
            pet_id: 반려동물 ID
            user_id: 요청 사용자 ID
            now: 기준 시각 (기본값: 현재 UTC 시각)

        Returns:
            AnalysisResult. 기록 저장소 조회에 실패하면 default_analysis()

        Raises:
            PermissionError: 소유자가 아니거나 반려동물이 없는 경우
            ValidationError: 프로필 값이 잘못된 경우
        """
        pet = self.pet_service.get_pet_profile(pet_id, user_id)
        try:
            events = self.record_service.get_events(pet_id)
        except ValidationError:
            raise
        except Exception as e:
            logger.error(f"Event store unavailable for pet {pet_id}, returning fallback analysis: {e}")
            return default_analysis()

        return analyze(pet, events, now or DateTimeUtils.now())

    def get_predictions(self, pet_id: str, user_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
        """접종/치과 다음 예정일 예측과 30일 내 단기 예측."""
        self.pet_service.ensure_owner(pet_id, user_id)
        now = DateTimeUtils.to_utc(now or DateTimeUtils.now())
        events = self.record_service.get_events(pet_id)
        return {
            'projections': [
                projection.to_dict()
                for projection in project_all(events, now).values()
            ],
            'short_term_predictions': short_term_predictions(events, now),
            'upcoming': upcoming_due(events, now),
        }

    def get_schedule(self, pet_id: str, user_id: str) -> Dict[str, Any]:
        """견종/나이 프로필과 하루 케어 일정."""
        pet = self.pet_service.get_pet_profile(pet_id, user_id)
        return {
            'pet_name': pet.name,
            'breed_profile': breed_profile(pet.breed).to_dict(),
            'age_analysis': age_analysis(pet),
            'schedule': [item.to_dict() for item in daily_schedule(pet)],
        }

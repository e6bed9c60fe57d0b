# autopaws/api/health/routes.py
"""
건강 분석 자원 라우트

자원: /api/pets/{pet_id}/health
- analysis: 점수, 영역별 상태, 권장사항, 위험도, 예측, 인사이트
- predictions: 다음 예정일 예측
- schedule: 견종/나이 기반 하루 케어 일정
"""

import logging
from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from autopaws.api.health.schemas import (
    HealthAnalysisResponseSchema,
    PredictionsResponseSchema,
    ScheduleResponseSchema,
)

logger = logging.getLogger(__name__)

health_bp = Blueprint('health_bp', __name__)

def get_health_service():
    return current_app.services['health_analysis']

@health_bp.route('/<string:pet_id>/health/analysis', methods=['GET'])
@jwt_required()
def get_health_analysis(pet_id: str):
    """
    반려동물의 전체 건강 분석 결과를 조회합니다.

    Response:
        200: 분석 결과 (저장소 장애 시 is_fallback=true인 기본 분석)
        400: 프로필 값 오류
        403: 권한 없음
    """
    try:
        user_id = get_jwt_identity()
        result = get_health_service().get_analysis(pet_id, user_id)
        return jsonify(HealthAnalysisResponseSchema().dump(result.to_dict())), 200

    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logger.error(f"건강 분석 실패 ({pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "ANALYSIS_FAILED", "message": "건강 분석 중 오류가 발생했습니다."}), 500

@health_bp.route('/<string:pet_id>/health/predictions', methods=['GET'])
@jwt_required()
def get_health_predictions(pet_id: str):
    try:
        user_id = get_jwt_identity()
        result = get_health_service().get_predictions(pet_id, user_id)
        return jsonify(PredictionsResponseSchema().dump(result)), 200

    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logger.error(f"건강 예측 실패 ({pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "PREDICTION_FAILED", "message": "건강 예측 중 오류가 발생했습니다."}), 500

@health_bp.route('/<string:pet_id>/health/schedule', methods=['GET'])
@jwt_required()
def get_care_schedule(pet_id: str):
    try:
        user_id = get_jwt_identity()
        result = get_health_service().get_schedule(pet_id, user_id)
        return jsonify(ScheduleResponseSchema().dump(result)), 200

    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logger.error(f"케어 일정 생성 실패 ({pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "SCHEDULE_FAILED", "message": "케어 일정 생성 중 오류가 발생했습니다."}), 500

# autopaws/api/records/routes.py
"""
건강 기록 자원 관리 라우트

자원: /api/pets/{pet_id}/records
- 접종, 체중 측정, 치과 관리 등 건강 이벤트의 생성, 조회, 삭제
"""

import logging
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from autopaws.api.records.schemas import (
    HealthRecordCreateSchema,
    HealthRecordSchema,
    RecordsQuerySchema,
    RecordsResponseSchema,
)

logger = logging.getLogger(__name__)

records_bp = Blueprint('records_bp', __name__)

@records_bp.route('/<string:pet_id>/records', methods=['POST'])
@jwt_required()
def create_record(pet_id: str):
    """건강 기록 생성 API 엔드포인트."""
    service = current_app.services['health_records']
    try:
        user_id = get_jwt_identity()
        validated_data = HealthRecordCreateSchema().load(request.get_json(silent=True) or {})
        created_record = service.create_record(pet_id, user_id, validated_data)
        return jsonify(HealthRecordSchema().dump(created_record)), 201

    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logger.error(f"기록 생성 API 오류 (pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "RECORD_CREATION_FAILED", "message": "기록 생성 중 오류 발생"}), 500

@records_bp.route('/<string:pet_id>/records', methods=['GET'])
@jwt_required()
def get_records(pet_id: str):
    """
    건강 기록 목록 조회 API (최신순).

    쿼리 파라미터:
    - category: 기록 유형 필터 (예: Vaccination, Weight Check)
    - limit: 조회 개수 제한 (1-100, 기본값: 50)
    """
    service = current_app.services['health_records']
    try:
        user_id = get_jwt_identity()
        params = RecordsQuerySchema().load(request.args.to_dict())
        result = service.list_records(pet_id, user_id, params.get('category'), params['limit'])
        return jsonify(RecordsResponseSchema().dump(result)), 200

    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logger.error(f"Record retrieval API error (pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": "기록 조회 중 오류가 발생했습니다."}), 500

@records_bp.route('/<string:pet_id>/records/<string:record_id>', methods=['DELETE'])
@jwt_required()
def delete_record(pet_id: str, record_id: str):
    service = current_app.services['health_records']
    try:
        user_id = get_jwt_identity()
        service.delete_record(pet_id, user_id, record_id)
        return jsonify({"message": "기록이 삭제되었습니다.", "record_id": record_id}), 200

    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except FileNotFoundError as e:
        return jsonify({"error_code": "RECORD_NOT_FOUND", "message": str(e)}), 404
    except Exception as e:
        logger.error(f"Record deletion API error (pet_id: {pet_id}, record_id: {record_id}): {e}", exc_info=True)
        return jsonify({"error_code": "DELETE_FAILED", "message": "기록 삭제 중 오류가 발생했습니다."}), 500

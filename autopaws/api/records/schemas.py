# autopaws/api/records/schemas.py
from marshmallow import Schema, fields, validate, validates, pre_load, ValidationError

from autopaws.models.health_event import EventCategory
from autopaws.utils.datetime_utils import DateTimeUtils

CATEGORY_VALUES = [category.value for category in EventCategory]

class HealthRecordCreateSchema(Schema):
    """
    POST /api/pets/<pet_id>/records 요청 본문 스키마.
    category는 'type', occurred_at은 'date', next_due_at은 'nextDueDate' 키도 허용합니다.
    """
    category = fields.Str(required=True)
    occurred_at = fields.Str(required=True)
    description = fields.Str(required=True, validate=validate.Length(min=1, max=500))
    next_due_at = fields.Str(required=False, allow_none=True)
    vet = fields.Str(required=False, allow_none=True)
    notes = fields.Str(required=False, allow_none=True)
    status = fields.Str(load_default="Completed")

    @pre_load
    def accept_aliases(self, data, **kwargs):
        """클라이언트 호환용 별칭 키를 표준 키로 변환합니다."""
        processed_data = dict(data or {})
        for alias, key in (('type', 'category'), ('date', 'occurred_at'), ('nextDueDate', 'next_due_at')):
            if alias in processed_data and key not in processed_data:
                processed_data[key] = processed_data.pop(alias)
        return processed_data

    @validates('category')
    def validate_category(self, value, **kwargs):
        if EventCategory.from_value(value) is EventCategory.OTHER and value.strip().lower() != 'other':
            raise ValidationError(f"지원하지 않는 기록 유형입니다. 가능한 유형: {', '.join(CATEGORY_VALUES)}")

    @validates('occurred_at')
    def validate_occurred_at(self, value, **kwargs):
        try:
            DateTimeUtils.validate_datetime_field(value, 'occurred_at')
        except ValueError:
            raise ValidationError("occurred_at은 ISO 8601 형식이어야 합니다.")

class HealthRecordSchema(Schema):
    """저장된 건강 기록 응답 스키마."""
    record_id = fields.Str()
    pet_id = fields.Str()
    category = fields.Str()
    occurred_at = fields.DateTime()
    description = fields.Str()
    next_due_at = fields.DateTime(allow_none=True)
    vet = fields.Str(allow_none=True)
    notes = fields.Str(allow_none=True)
    status = fields.Str(allow_none=True)
    created_at = fields.DateTime(allow_none=True)

class RecordsQuerySchema(Schema):
    """GET /api/pets/<pet_id>/records 쿼리 파라미터 검증 스키마."""
    category = fields.Str(validate=validate.OneOf(CATEGORY_VALUES))
    limit = fields.Int(validate=validate.Range(min=1, max=100), load_default=50)

    @pre_load
    def normalize_category(self, data, **kwargs):
        processed_data = dict(data)
        raw = processed_data.get('category')
        if raw:
            category = EventCategory.from_value(raw)
            # 알 수 없는 값은 그대로 두어 OneOf 검증에서 걸러지도록 함
            if category is not EventCategory.OTHER or raw.strip().lower() == 'other':
                processed_data['category'] = category.value
        return processed_data

class RecordsResponseSchema(Schema):
    records = fields.List(fields.Nested(HealthRecordSchema), dump_default=[])
    meta = fields.Dict(dump_default={})

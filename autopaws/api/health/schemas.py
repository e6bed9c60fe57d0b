# autopaws/api/health/schemas.py
from marshmallow import Schema, fields

class RecommendationSchema(Schema):
    priority = fields.Str()
    category = fields.Str()
    text = fields.Str()
    action = fields.Str()

class RiskSchema(Schema):
    """위험도 및 알림 항목 (category, severity, message)."""
    category = fields.Str()
    severity = fields.Str()
    message = fields.Str()

class HealthAnalysisResponseSchema(Schema):
    """GET /api/pets/<pet_id>/health/analysis 응답 스키마."""
    score = fields.Int()
    grade = fields.Dict()
    category_statuses = fields.Dict()
    recommendations = fields.List(fields.Nested(RecommendationSchema), dump_default=[])
    risks = fields.List(fields.Nested(RiskSchema), dump_default=[])
    alerts = fields.List(fields.Nested(RiskSchema), dump_default=[])
    predictions = fields.Dict(dump_default={})
    short_term_predictions = fields.List(fields.Dict(), dump_default=[])
    upcoming = fields.List(fields.Dict(), dump_default=[])
    insights = fields.Dict(dump_default={})
    breed_analysis = fields.Dict(dump_default={})
    age_analysis = fields.Dict(dump_default={})
    total_records = fields.Int()
    last_updated = fields.Str(allow_none=True)
    is_fallback = fields.Bool()

class ProjectionSchema(Schema):
    category = fields.Str(allow_none=True)
    available = fields.Bool()
    next_due_at = fields.Str(allow_none=True)
    days_until_due = fields.Int(allow_none=True)
    within_lookahead = fields.Bool()

class PredictionsResponseSchema(Schema):
    projections = fields.List(fields.Nested(ProjectionSchema), dump_default=[])
    short_term_predictions = fields.List(fields.Dict(), dump_default=[])
    upcoming = fields.List(fields.Dict(), dump_default=[])

class ScheduleItemSchema(Schema):
    type = fields.Str()
    time = fields.Str()
    description = fields.Str()
    priority = fields.Str()
    health_benefit = fields.Str()
    breed_specific = fields.Bool()
    weather_dependent = fields.Bool()

class ScheduleResponseSchema(Schema):
    """GET /api/pets/<pet_id>/health/schedule 응답 스키마."""
    pet_name = fields.Str(allow_none=True)
    breed_profile = fields.Dict()
    age_analysis = fields.Dict()
    schedule = fields.List(fields.Nested(ScheduleItemSchema), dump_default=[])

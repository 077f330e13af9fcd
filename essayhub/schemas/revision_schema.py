from marshmallow import fields, validate
from essayhub.schemas.order_schema import RequestSchema, SupportingFileSchema


class ChecklistEntrySchema(RequestSchema):
    selected = fields.Boolean(load_default=False)
    value = fields.String(allow_none=True, load_default=None)


class RevisionDeadlineSchema(RequestSchema):
    date = fields.String(required=True)
    time = fields.String(
        required=True,
        validate=validate.Regexp(r"^\d{1,2}:\d{2}$", error="Time must be HH:MM"),
    )


class RevisionRequestSchema(RequestSchema):
    email = fields.Email(required=True)
    order_id = fields.Integer(required=True, data_key="orderId")
    checklist = fields.Dict(
        keys=fields.String(), values=fields.Nested(ChecklistEntrySchema), load_default=dict
    )
    deadline = fields.Nested(RevisionDeadlineSchema, required=True)
    supporting_files = fields.List(
        fields.Nested(SupportingFileSchema), load_default=list, data_key="supportingFiles"
    )


class RateWriterSchema(RequestSchema):
    order_id = fields.Integer(required=True, data_key="orderId")
    rating = fields.Float(required=True, validate=validate.Range(min=1, max=5))

from marshmallow import fields
from essayhub.schemas.order_schema import RequestSchema


class EducationLevelQuerySchema(RequestSchema):
    academic_inclined = fields.Boolean(allow_none=True, load_default=None, data_key="academicInclined")
    order_inclined = fields.Boolean(allow_none=True, load_default=None, data_key="orderInclined")


class ServiceTypeQuerySchema(RequestSchema):
    extra = fields.Boolean(load_default=False)

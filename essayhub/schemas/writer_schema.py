from marshmallow import fields
from essayhub.schemas.order_schema import RequestSchema


class ClientRefSchema(RequestSchema):
    email = fields.Email(required=True)


class WriterInviteSchema(RequestSchema):
    email = fields.Email(required=True)
    writer_email = fields.Email(required=True, data_key="writerEmail")

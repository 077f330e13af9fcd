from marshmallow import fields, validate, EXCLUDE
from essayhub.extensions import ma

VISIBILITY_LABELS = ("public", "private")


class RequestSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE


class SupportingFileSchema(RequestSchema):
    file_url = fields.String(required=True, data_key="fileUrl")
    original_name = fields.String(required=True, data_key="originalName")


class PaymentExtraSchema(RequestSchema):
    id = fields.Integer(required=True)


class PaymentSummarySchema(RequestSchema):
    currency_code = fields.String(required=True, data_key="currencyCode")
    extras_list = fields.List(fields.Nested(PaymentExtraSchema), load_default=list, data_key="extrasList")
    extras_total_price = fields.Float(load_default=0.0, data_key="extrasTotalPrice")
    total_price = fields.Float(required=True, data_key="totalPrice")
    cpp = fields.Float(required=True)


class PlaceOrderSchema(RequestSchema):
    email = fields.Email(required=True)
    # 0 / missing creates a new order
    order_id = fields.Integer(load_default=0, allow_none=True, data_key="orderId")
    service_type = fields.String(required=True, data_key="serviceType")
    type = fields.String(load_default="public", validate=validate.OneOf(VISIBILITY_LABELS))
    paper_subject = fields.Integer(allow_none=True, load_default=None, data_key="paperSubject")
    assignment_type = fields.Integer(allow_none=True, load_default=None, data_key="assignmentType")
    citation_style_id = fields.Integer(allow_none=True, load_default=None, data_key="citationStyleId")
    study_level = fields.Integer(allow_none=True, load_default=None, data_key="studyLevel")
    deadline_date = fields.Date(allow_none=True, load_default=None, data_key="deadlineDate")
    deadline_time = fields.Integer(allow_none=True, load_default=None, data_key="deadlineTime")
    page_count = fields.Integer(load_default=1, validate=validate.Range(min=1), data_key="pageCount")
    sources = fields.Integer(load_default=0, validate=validate.Range(min=0))
    topic = fields.String(allow_none=True, load_default=None)
    instructions = fields.String(allow_none=True, load_default=None)
    supporting_files = fields.List(
        fields.Nested(SupportingFileSchema), load_default=list, data_key="supportingFiles"
    )
    payment_summary = fields.Nested(PaymentSummarySchema, required=True, data_key="paymentSummary")


class SavePaymentSchema(RequestSchema):
    email = fields.Email(required=True)
    order_id = fields.Integer(load_default=0, allow_none=True, data_key="orderId")
    payment_summary = fields.Nested(PaymentSummarySchema, required=True, data_key="paymentSummary")


class OrderStatusUpdateSchema(RequestSchema):
    order_id = fields.Integer(required=True, data_key="orderId")
    # the chosen writer's user id
    writer_id = fields.Integer(required=True, data_key="writerId")
    type = fields.String(required=True, validate=validate.OneOf(VISIBILITY_LABELS))


class OrderRefSchema(RequestSchema):
    email = fields.Email(required=True)
    order_id = fields.Integer(required=True, data_key="orderId")


class OrderQuerySchema(RequestSchema):
    email = fields.Email(required=True)
    multiple = fields.Boolean(load_default=False)
    order_id = fields.Integer(allow_none=True, load_default=None, data_key="orderId")
    order_status_id = fields.Integer(allow_none=True, load_default=None, data_key="orderStatusID")


class OrderDetailsQuerySchema(RequestSchema):
    email = fields.Email(required=True)
    order_id = fields.Integer(allow_none=True, load_default=None, data_key="orderId")


class RemoveFileSchema(RequestSchema):
    order_id = fields.Integer(required=True, data_key="orderId")
    # the file's URL
    filename = fields.String(required=True)


class OrderBidsQuerySchema(RequestSchema):
    order_id = fields.Integer(required=True, data_key="orderId")

from marshmallow import ValidationError
from essayhub.utils.exceptions import RequestValidationError


def load_request(schema, data):
    try:
        return schema.load(data or {})
    except ValidationError as err:
        raise RequestValidationError(details=err.messages)

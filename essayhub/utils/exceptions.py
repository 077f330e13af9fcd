class ServiceError(Exception):
    def __init__(self, code="SERVICE_ERROR", message="Service error", details=None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class LookupFailure(ServiceError):
    """A row the workflow cannot proceed without is missing."""

    def __init__(self, message, details=None):
        super().__init__("LOOKUP_FAILED", message, details)


class RequestValidationError(ServiceError):
    def __init__(self, details=None):
        super().__init__("VALIDATION_ERROR", "Invalid request", details)

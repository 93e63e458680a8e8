class ServiceError(Exception):
    status = 400

    def __init__(self, code="SERVICE_ERROR", message="Service error", details=None, status=None):
        self.code = code
        self.message = message
        self.details = details or {}
        if status is not None:
            self.status = status
        super().__init__(message)


class FetchError(ServiceError):
    """Listing the leaderboard failed: store unreachable, query error or timeout."""

    status = 503

    def __init__(self, message="Could not load the leaderboard", details=None):
        super().__init__(code="FETCH_FAILED", message=message, details=details)


class WriteError(ServiceError):
    """An increment or insert did not reach the store."""

    status = 503

    def __init__(self, code="WRITE_FAILED", message="Could not save the change", details=None, status=None):
        super().__init__(code=code, message=message, details=details, status=status)


class ValidationError(ServiceError):
    status = 400

    def __init__(self, message="Invalid input", details=None):
        super().__init__(code="VALIDATION_ERROR", message=message, details=details)

"""
Application Errors

Every validation failure in ptlist is a ``bad_request``: the request is
rejected with HTTP 400, a stable code and a short description. Errors are
raised from the validation and generation layers and rendered into the JSON
envelope by the exception handler registered in ``ptlist.main``.
"""

TIMEZONE_ERROR = "could not parse timezone"
INVOCATION_POINTS_ERROR = "cannot parse invocation points"
PERIOD_ERROR = "could not parse period"
TOO_MANY_TIMESTAMPS_ERROR = "too many timestamps requested"


class ApplicationError(Exception):
    def __init__(self, message: str, status_code: int = 400, code: str = "bad_request"):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    def __repr__(self) -> str:
        return f"ApplicationError(status_code={self.status_code}, code={self.code!r}, message={self.message!r})"


def bad_request(message: str) -> ApplicationError:
    return ApplicationError(message, status_code=400, code="bad_request")

class IntakeError(Exception):
    """
    Base class for failures that are reported back to the requester.
    `message` is safe to show publicly; internal detail belongs in the log.
    """
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(IntakeError):
    """Missing or malformed input field."""
    status_code = 400
    default_message = "Missing fields"


class AuthError(IntakeError):
    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(IntakeError):
    status_code = 404
    default_message = "Not found"


class StorageError(IntakeError):
    """Reading or writing a collection on disk failed."""
    status_code = 500
    default_message = "Storage failure"

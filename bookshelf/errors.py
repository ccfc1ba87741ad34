class BookshelfError(Exception):
    """Base error carrying the message and HTTP status shown to callers."""

    status_code = 500

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        payload = {"success": False, "error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(BookshelfError):
    status_code = 400


class IdentityRequired(BookshelfError):
    status_code = 401


class NotFound(BookshelfError):
    status_code = 404


class StorageUnavailable(BookshelfError):
    status_code = 500


class OperationFailed(BookshelfError):
    status_code = 500


class ConstraintViolation(OperationFailed):
    pass

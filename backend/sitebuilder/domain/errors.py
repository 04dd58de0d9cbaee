from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from .validation import FieldViolation


class BuilderError(Exception):
    """
    Base class for every error an action reports back to the caller.

    The message must already be human-readable: the UI renders it verbatim.
    """

    status_code = 400
    default_message = "Request could not be completed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def public_error(self) -> Any:
        return self.message


class AuthenticationRequired(BuilderError):
    status_code = 401
    default_message = "You must be logged in"


class PermissionDenied(BuilderError):
    # Also used for resources looked up by id that do not exist, so that
    # callers cannot probe for existence.
    status_code = 403
    default_message = "Not found or you do not have permission"


class ValidationFailed(BuilderError):
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, violations: List["FieldViolation"]):
        self.violations = list(violations)
        super().__init__(", ".join(v.message for v in self.violations))

    @property
    def public_error(self) -> Any:
        return [v.to_dict() for v in self.violations]


class ConflictError(BuilderError):
    status_code = 409
    default_message = "Resource already exists"


class NotFound(BuilderError):
    status_code = 404
    default_message = "Not found"


class UnexpectedError(BuilderError):
    status_code = 500
    default_message = "An unexpected error occurred"

from __future__ import annotations

from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Dict, Optional

from flask import current_app

from sitebuilder.extensions import db
from sitebuilder.domain.errors import AuthenticationRequired, BuilderError, UnexpectedError
from sitebuilder.models.user import User


@dataclass
class ActionResult:
    """Uniform result of every mutating action."""

    success: bool
    error: Any = None
    data: Any = None
    status_code: int = field(default=200, repr=False)

    @classmethod
    def ok(cls, data: Any = None, status_code: int = 200) -> "ActionResult":
        return cls(success=True, data=data, status_code=status_code)

    @classmethod
    def failure(cls, error: BuilderError) -> "ActionResult":
        return cls(success=False, error=error.public_error, status_code=error.status_code)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": self.success}
        if self.error is not None:
            body["error"] = self.error
        if self.data is not None:
            body["data"] = self.data
        return body

    @property
    def error_message(self) -> Optional[str]:
        """The error as a single line, as the UI renders it."""
        if self.error is None:
            return None
        if isinstance(self.error, str):
            return self.error
        return ", ".join(item["message"] for item in self.error)


def require_principal(principal: Optional[User], doing: str) -> User:
    if principal is None:
        raise AuthenticationRequired(f"You must be logged in to {doing}")
    return principal


def server_action(description: str, *, success_status: int = 200):
    """
    Wrap an action so nothing escapes it as an exception.

    Builder errors become failed results carrying their message. Anything
    else is logged with its traceback and reported with a generic message.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs) -> ActionResult:
            try:
                data = fn(*args, **kwargs)
            except BuilderError as exc:
                db.session.rollback()
                current_app.logger.info("%s rejected: %s", description, exc.message)
                return ActionResult.failure(exc)
            except Exception:
                db.session.rollback()
                current_app.logger.exception("Error %s", description)
                return ActionResult.failure(UnexpectedError())

            return ActionResult.ok(data, status_code=success_status)
        return wrapper
    return decorator

from typing import Optional

from flask import current_app
from flask_jwt_extended import (
    create_access_token,
    get_jwt_identity,
    verify_jwt_in_request,
)
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from sitebuilder.extensions import db
from sitebuilder.models.user import User


def get_current_principal() -> Optional[User]:
    """
    Resolve the authenticated principal of the current request.

    A missing, malformed or expired token, or one naming an unknown or
    disabled user, resolves to None rather than raising.
    """
    try:
        verify_jwt_in_request(optional=True)
    except (JWTExtendedException, PyJWTError) as exc:
        current_app.logger.debug("Ignoring invalid session token: %s", exc)
        return None

    identity = get_jwt_identity()
    if not identity:
        return None

    user = db.session.get(User, identity)
    if not user or not user.is_active:
        return None
    return user


def issue_token(user: User) -> str:
    return create_access_token(identity=user.id, additional_claims={"email": user.email})

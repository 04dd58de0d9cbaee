from .auth import auth_bp
from .dashboard import dashboard_bp
from .public import public_bp

__all__ = ["auth_bp", "dashboard_bp", "public_bp"]

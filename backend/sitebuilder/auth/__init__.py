from .identity import get_current_principal, issue_token

__all__ = ["get_current_principal", "issue_token"]

from urllib.parse import urlencode
from flask import current_app, g, redirect, request
from sitebuilder.auth.identity import get_current_principal


def _matches(path, prefixes):
    return any(path.startswith(prefix) for prefix in prefixes)


def access_policy(app):
    @app.before_request
    def enforce_route_policy():
        path = request.path
        config = current_app.config

        is_protected = _matches(path, config["PROTECTED_ROUTE_PREFIXES"])
        is_auth_route = _matches(path, config["AUTH_ROUTE_PREFIXES"])

        # Everything else passes through unchecked
        if not is_protected and not is_auth_route:
            return None

        principal = get_current_principal()
        g.current_user = principal

        if is_protected and principal is None:
            query = urlencode({"callbackUrl": path})
            return redirect(f"{config['LOGIN_PATH']}?{query}")

        if is_auth_route and principal is not None:
            return redirect(config["DASHBOARD_PATH"])

        return None

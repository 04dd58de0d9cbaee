from typing import Any, Mapping, Optional

from sitebuilder.application.sites.create_site import create_site
from sitebuilder.domain.validation import validate_site_form
from sitebuilder.models.user import User
from sitebuilder.normalizers.site import normalize_site
from .base import require_principal, server_action


@server_action("creating site", success_status=201)
def create_site_action(form: Mapping[str, Any], principal: Optional[User]):
    user = require_principal(principal, "create a site")
    data = validate_site_form(form)

    site = create_site(
        owner_id=user.id,
        name=data.name,
        subdomain=data.subdomain,
        description=data.description,
    )
    return normalize_site(site)

from typing import Optional
from flask import current_app
from sqlalchemy.exc import IntegrityError
from sitebuilder.extensions import db
from sitebuilder.cache import revalidate_path, revalidate_tag
from sitebuilder.domain.errors import ConflictError
from sitebuilder.models.site import Site
from sitebuilder.utils.transaction import transactional
from sitebuilder.application.paths import DASHBOARD_PATH, USER_SITES_TAG

SUBDOMAIN_TAKEN = "Subdomain already taken"


def subdomain_taken(subdomain: str) -> bool:
    return db.session.execute(
        db.select(Site.id).where(Site.subdomain == subdomain)
    ).first() is not None


def create_site(
    *,
    owner_id: str,
    name: str,
    subdomain: str,
    description: Optional[str] = None,
) -> Site:
    """
    Create a site bound to a globally unique subdomain.

    The pre-check is advisory: a concurrent insert can still win the race,
    in which case the unique constraint fires and is reported the same way.
    """
    if subdomain_taken(subdomain):
        raise ConflictError(SUBDOMAIN_TAKEN)

    site = Site()
    site.user_id = owner_id
    site.name = name
    site.subdomain = subdomain
    site.description = description or None

    try:
        with transactional():
            db.session.add(site)
            db.session.flush()
    except IntegrityError as exc:
        current_app.logger.warning("Subdomain %s claimed concurrently", subdomain)
        raise ConflictError(SUBDOMAIN_TAKEN) from exc

    current_app.logger.info("Site %s created for user %s", site.id, owner_id)

    revalidate_tag(USER_SITES_TAG)
    revalidate_path(DASHBOARD_PATH)

    return site

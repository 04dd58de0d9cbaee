from typing import List, Optional
from sitebuilder.extensions import db
from sitebuilder.models.site import Site


def list_sites_for_owner(owner_id: str) -> List[Site]:
    """Sites of the owner, newest first."""
    return list(
        db.session.execute(
            db.select(Site)
            .where(Site.user_id == owner_id)
            .order_by(Site.created_at.desc(), Site.id.desc())
        ).scalars()
    )


def get_site_for_owner(site_id: str, owner_id: str) -> Optional[Site]:
    return db.session.execute(
        db.select(Site).where(Site.id == site_id, Site.user_id == owner_id)
    ).scalar_one_or_none()


def get_site_by_subdomain(subdomain: str) -> Optional[Site]:
    return db.session.execute(
        db.select(Site).where(Site.subdomain == subdomain)
    ).scalar_one_or_none()

from typing import List, Optional
from sitebuilder.extensions import db
from sitebuilder.models.page import Page
from sitebuilder.models.site import Site


def get_page_by_slug(site_id: str, slug: str) -> Optional[Page]:
    return db.session.execute(
        db.select(Page).where(Page.site_id == site_id, Page.slug == slug)
    ).scalar_one_or_none()


def get_page_for_owner(page_id: str, owner_id: str) -> Optional[Page]:
    """The page, if its parent site belongs to the owner."""
    return db.session.execute(
        db.select(Page)
        .join(Site, Page.site_id == Site.id)
        .where(Page.id == page_id, Site.user_id == owner_id)
    ).scalar_one_or_none()


def list_pages_for_site(site_id: str, *, published_only: bool = False) -> List[Page]:
    """Pages of a site, newest first."""
    query = db.select(Page).where(Page.site_id == site_id)
    if published_only:
        query = query.where(Page.published.is_(True))

    return list(
        db.session.execute(
            query.order_by(Page.created_at.desc(), Page.id.desc())
        ).scalars()
    )


def get_published_page(subdomain: str, slug: str) -> Optional[Page]:
    return db.session.execute(
        db.select(Page)
        .join(Site, Page.site_id == Site.id)
        .where(
            Site.subdomain == subdomain,
            Page.slug == slug,
            Page.published.is_(True),
        )
    ).scalar_one_or_none()

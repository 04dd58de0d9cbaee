from typing import Optional
from flask import current_app
from sqlalchemy.exc import IntegrityError
from sitebuilder.extensions import db
from sitebuilder.cache import revalidate_path
from sitebuilder.domain.errors import ConflictError, PermissionDenied
from sitebuilder.models.page import Page
from sitebuilder.models.site import Site
from sitebuilder.utils.transaction import transactional
from sitebuilder.application.ownership import verify_site_ownership
from sitebuilder.application.paths import public_site_path, site_detail_path
from .queries import get_page_by_slug

SITE_FORBIDDEN = "Site not found or you do not have permission"
SLUG_TAKEN = "A page with this slug already exists"


def create_page(
    *,
    owner_id: str,
    site_id: str,
    slug: str,
    title: Optional[str] = None,
) -> Page:
    """
    Create an empty, unpublished page on one of the owner's sites.

    Steps short-circuit in order:
    - the site must belong to the owner
    - the slug must be free on that site
    - insert, title defaulting to the slug
    """
    if not verify_site_ownership(site_id, owner_id):
        raise PermissionDenied(SITE_FORBIDDEN)

    if get_page_by_slug(site_id, slug) is not None:
        raise ConflictError(SLUG_TAKEN)

    page = Page()
    page.site_id = site_id
    page.slug = slug
    page.title = title or slug
    page.content = []
    page.published = False

    try:
        with transactional():
            db.session.add(page)
            db.session.flush()
    except IntegrityError as exc:
        # Typically raised by the (site_id, slug) unique constraint
        current_app.logger.warning("Slug %s claimed concurrently on site %s", slug, site_id)
        raise ConflictError(SLUG_TAKEN) from exc

    current_app.logger.info("Page %s created on site %s", page.id, site_id)

    subdomain = db.session.execute(
        db.select(Site.subdomain).where(Site.id == site_id)
    ).scalar_one_or_none()

    revalidate_path(site_detail_path(site_id))
    if subdomain:
        revalidate_path(public_site_path(subdomain))

    return page

from sitebuilder.extensions import db
from sitebuilder.models.page import Page
from sitebuilder.models.site import Site


def verify_site_ownership(site_id: str, principal_id: str) -> bool:
    """True only if the site exists and belongs to the principal."""
    if not site_id or not principal_id:
        return False

    owner_id = db.session.execute(
        db.select(Site.user_id).where(Site.id == site_id)
    ).scalar_one_or_none()
    return owner_id is not None and owner_id == principal_id


def verify_page_parent_ownership(page_id: str, principal_id: str) -> bool:
    """
    True only if the page exists and its site belongs to the principal.

    Pages have no owner of their own; ownership always goes through the site.
    """
    if not page_id or not principal_id:
        return False

    owner_id = db.session.execute(
        db.select(Site.user_id)
        .join(Page, Page.site_id == Site.id)
        .where(Page.id == page_id)
    ).scalar_one_or_none()
    return owner_id is not None and owner_id == principal_id

from flask import current_app
from sitebuilder.cache import revalidate_path
from sitebuilder.domain.errors import PermissionDenied
from sitebuilder.models.page import Page
from sitebuilder.utils.transaction import transactional
from sitebuilder.application.paths import public_site_path, site_detail_path
from .queries import get_page_for_owner
from .save_page_content import PAGE_FORBIDDEN, revalidate_page


def set_page_published(
    *,
    page_id: str,
    owner_id: str,
    published: bool,
) -> Page:
    """Publish or unpublish one of the owner's pages."""
    page = get_page_for_owner(page_id, owner_id)
    if page is None:
        raise PermissionDenied(PAGE_FORBIDDEN)

    if page.published == published:
        return page

    with transactional():
        page.published = published

    current_app.logger.info(
        "Page %s %s", page.id, "published" if published else "unpublished"
    )

    revalidate_page(page)
    revalidate_path(site_detail_path(page.site_id), public_site_path(page.site.subdomain))

    return page

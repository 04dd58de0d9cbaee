from typing import Any, List
from flask import current_app
from sitebuilder.cache import revalidate_path
from sitebuilder.domain.blocks import dump_content
from sitebuilder.domain.errors import PermissionDenied
from sitebuilder.models.page import Page
from sitebuilder.utils.transaction import transactional
from sitebuilder.application.paths import editor_path, public_page_path
from .queries import get_page_for_owner

PAGE_FORBIDDEN = "Page not found or you do not have permission"


def save_page_content(
    *,
    page_id: str,
    content: List[Any],
    owner_id: str,
) -> Page:
    """
    Replace a page's content document wholesale.

    Last write wins: there is no version check, so two editors saving the
    same page overwrite each other in full.
    """
    page = get_page_for_owner(page_id, owner_id)
    if page is None:
        raise PermissionDenied(PAGE_FORBIDDEN)

    with transactional():
        page.content = dump_content(content)

    current_app.logger.info("Saved %d blocks on page %s", len(page.content), page.id)

    revalidate_page(page)

    return page


def revalidate_page(page: Page) -> None:
    """Drop the cached editor view and the page's public render."""
    site = page.site
    revalidate_path(
        editor_path(site.id, page.slug),
        public_page_path(site.subdomain, page.slug),
    )

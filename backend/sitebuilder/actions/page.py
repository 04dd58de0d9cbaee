from typing import Any, Mapping, Optional

from sitebuilder.application.pages.create_page import create_page
from sitebuilder.application.pages.publish_page import set_page_published
from sitebuilder.application.pages.save_page_content import save_page_content
from sitebuilder.domain.validation import validate_content, validate_page_form
from sitebuilder.models.user import User
from sitebuilder.normalizers.page import normalize_page
from .base import require_principal, server_action


@server_action("creating page", success_status=201)
def create_page_action(form: Mapping[str, Any], principal: Optional[User]):
    user = require_principal(principal, "create a page")
    data = validate_page_form(form)

    page = create_page(
        owner_id=user.id,
        site_id=data.site_id,
        slug=data.slug,
        title=data.title,
    )
    return normalize_page(page)


@server_action("saving page content")
def save_page_content_action(page_id: str, content: Any, principal: Optional[User]):
    user = require_principal(principal, "save a page")
    blocks = validate_content(page_id, content)

    page = save_page_content(page_id=page_id, content=blocks, owner_id=user.id)
    return normalize_page(page, include_content=True)


@server_action("changing page visibility")
def set_page_published_action(page_id: str, published: bool, principal: Optional[User]):
    user = require_principal(principal, "publish a page")

    page = set_page_published(page_id=page_id, owner_id=user.id, published=published)
    return normalize_page(page)

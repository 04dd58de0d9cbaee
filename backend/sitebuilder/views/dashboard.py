"""Read views of the builder: dashboard, site detail and editor load."""
from flask import Blueprint, g, jsonify
from sitebuilder.extensions import render_cache
from sitebuilder.application.paths import (
    DASHBOARD_PATH,
    USER_SITES_TAG,
    editor_path,
    site_detail_path,
)
from sitebuilder.application.pages.queries import get_page_by_slug
from sitebuilder.application.sites.queries import get_site_for_owner, list_sites_for_owner
from sitebuilder.domain.errors import AuthenticationRequired, NotFound
from sitebuilder.normalizers.page import normalize_page
from sitebuilder.normalizers.site import normalize_site

dashboard_bp = Blueprint("dashboard", __name__)


def current_owner():
    user = g.get("current_user")
    if user is None:
        raise AuthenticationRequired()
    return user


@dashboard_bp.route("", methods=["GET"])
def dashboard():
    owner = current_owner()

    def render():
        return {"sites": [normalize_site(s) for s in list_sites_for_owner(owner.id)]}

    return jsonify(render_cache.get_or_render(
        DASHBOARD_PATH,
        render,
        variant=owner.id,
        tags=(USER_SITES_TAG,),
    ))


@dashboard_bp.route("/site/<site_id>", methods=["GET"])
def site_detail(site_id):
    owner = current_owner()

    def render():
        site = get_site_for_owner(site_id, owner.id)
        if site is None:
            raise NotFound("Site not found")
        return {"site": normalize_site(site, include_pages=True)}

    return jsonify(render_cache.get_or_render(
        site_detail_path(site_id), render, variant=owner.id
    ))


@dashboard_bp.route("/site/<site_id>/editor/<slug>", methods=["GET"])
def editor(site_id, slug):
    owner = current_owner()

    def render():
        site = get_site_for_owner(site_id, owner.id)
        page = get_page_by_slug(site_id, slug) if site else None
        if page is None:
            raise NotFound("Page not found")
        return {
            "site": {"id": site.id, "name": site.name},
            "page": normalize_page(page, include_content=True),
        }

    return jsonify(render_cache.get_or_render(
        editor_path(site_id, slug), render, variant=owner.id
    ))

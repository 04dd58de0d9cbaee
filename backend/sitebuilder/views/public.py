"""Public renders of published pages, addressed by subdomain."""
from flask import Blueprint, jsonify
from sitebuilder.extensions import render_cache
from sitebuilder.application.paths import public_page_path, public_site_path
from sitebuilder.application.pages.queries import get_published_page, list_pages_for_site
from sitebuilder.application.sites.queries import get_site_by_subdomain
from sitebuilder.domain.errors import NotFound

public_bp = Blueprint("public", __name__)


@public_bp.route("/<subdomain>", methods=["GET"])
def site_index(subdomain):
    def render():
        site = get_site_by_subdomain(subdomain)
        if site is None:
            raise NotFound("Site not found")
        return {
            "name": site.name,
            "description": site.description,
            "pages": [
                {"slug": p.slug, "title": p.title or p.slug, "path": public_page_path(subdomain, p.slug)}
                for p in list_pages_for_site(site.id, published_only=True)
            ],
        }

    return jsonify(render_cache.get_or_render(public_site_path(subdomain), render))


@public_bp.route("/<subdomain>/<slug>", methods=["GET"])
def page(subdomain, slug):
    def render():
        found = get_published_page(subdomain, slug)
        if found is None:
            raise NotFound("Page not found")
        return {
            "site": found.site.name,
            "slug": found.slug,
            "title": found.title or found.slug,
            "content": found.content or [],
        }

    return jsonify(render_cache.get_or_render(public_page_path(subdomain, slug), render))

from flask import current_app
from .page import normalize_page


def site_url(subdomain):
    if not subdomain:
        return None
    protocol = current_app.config["SITE_PROTOCOL"]
    root_domain = current_app.config["ROOT_DOMAIN"]
    return f"{protocol}://{subdomain}.{root_domain}"


def normalize_site(site, include_pages=False):
    data = {
        "id": site.id,
        "name": site.name,
        "subdomain": site.subdomain,
        "custom_domain": site.custom_domain,
        "logo": site.logo,
        "description": site.description,
        "url": site_url(site.subdomain),
        "user_id": site.user_id,
        "created_at": site.created_at.isoformat(),
    }

    if include_pages:
        pages = sorted(site.pages, key=lambda p: (p.created_at, p.id), reverse=True)
        data["pages"] = [normalize_page(p) for p in pages]

    return data

"""Display paths of the views a write can make stale."""

DASHBOARD_PATH = "/admin"
USER_SITES_TAG = "user-sites"


def site_detail_path(site_id: str) -> str:
    return f"/admin/site/{site_id}"


def editor_path(site_id: str, slug: str) -> str:
    return f"/admin/site/{site_id}/editor/{slug}"


def public_site_path(subdomain: str) -> str:
    return f"/s/{subdomain}"


def public_page_path(subdomain: str, slug: str) -> str:
    return f"/s/{subdomain}/{slug}"

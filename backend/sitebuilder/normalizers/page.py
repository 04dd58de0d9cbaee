def normalize_page(page, include_content=False):
    data = {
        "id": page.id,
        "site_id": page.site_id,
        "slug": page.slug,
        "title": page.title or page.slug,
        "published": bool(page.published),
        "created_at": page.created_at.isoformat(),
    }

    if include_content:
        data["content"] = page.content or []

    return data

"""Pytest configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret")

from sitebuilder import create_app
from sitebuilder.auth.identity import issue_token
from sitebuilder.extensions import db, render_cache
from sitebuilder.models import Page, Site, User


@pytest.fixture
def app():
    """Application on an in-memory SQLite database."""
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        render_cache.clear()
        yield app
        db.session.remove()
        db.drop_all()
        render_cache.clear()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Factory for principals."""
    counter = {"n": 0}

    def _make_user(email=None, password="password123", is_active=True):
        counter["n"] += 1
        user = User()
        user.email = email or f"user{counter['n']}@example.com"
        user.set_password(password)
        user.is_active = is_active
        db.session.add(user)
        db.session.commit()
        return user

    return _make_user


@pytest.fixture
def alice(make_user):
    return make_user("alice@example.com")


@pytest.fixture
def bob(make_user):
    return make_user("bob@example.com")


@pytest.fixture
def auth_headers(app):
    def _auth_headers(user):
        return {"Authorization": f"Bearer {issue_token(user)}"}

    return _auth_headers


@pytest.fixture
def make_site(app):
    """Factory for sites; ``age`` pushes created_at into the past."""

    def _make_site(owner, subdomain, name=None, age=timedelta(0)):
        site = Site()
        site.user_id = owner.id
        site.name = name or subdomain.title()
        site.subdomain = subdomain
        site.created_at = datetime.now(timezone.utc) - age
        db.session.add(site)
        db.session.commit()
        return site

    return _make_site


@pytest.fixture
def make_page(app):
    def _make_page(site, slug, content=None, published=False, age=timedelta(0)):
        page = Page()
        page.site_id = site.id
        page.slug = slug
        page.title = slug
        page.content = content or []
        page.published = published
        page.created_at = datetime.now(timezone.utc) - age
        db.session.add(page)
        db.session.commit()
        return page

    return _make_page


@pytest.fixture
def hero_document():
    return [
        {
            "id": "block-1",
            "type": "hero",
            "props": {"title": "Huge Sale", "subtitle": "50% Off", "image": "/placeholder.jpg"},
        },
        {
            "id": "block-2",
            "type": "testimonial",
            "props": {"quote": "Great shop", "stars": 5},
        },
    ]

"""Tests for page creation, content saves and publishing."""

import copy
from unittest.mock import patch

import pytest

from sitebuilder.actions import (
    create_page_action,
    save_page_content_action,
    set_page_published_action,
)
from sitebuilder.application.pages.create_page import create_page
from sitebuilder.application.pages.queries import (
    get_page_by_slug,
    get_published_page,
    list_pages_for_site,
)
from sitebuilder.domain.errors import ConflictError
from sitebuilder.editor import load_editor, local_saver
from sitebuilder.extensions import db, render_cache
from sitebuilder.models import Page


@pytest.fixture
def shop(alice, make_site):
    return make_site(alice, "my-shop")


class TestCreatePageAction:
    """Tests for the createPage action."""

    def test_requires_principal(self, shop):
        result = create_page_action({"siteId": shop.id, "slug": "about"}, None)

        assert result.success is False
        assert result.error == "You must be logged in to create a page"

    def test_creates_empty_page(self, alice, shop):
        result = create_page_action({"siteId": shop.id, "slug": "about", "title": ""}, alice)

        assert result.success is True
        assert result.status_code == 201
        page = db.session.get(Page, result.data["id"])
        assert page.content == []
        assert page.title == "about"
        assert page.published is False

    def test_slug_unique_per_site(self, alice, shop):
        assert create_page_action({"siteId": shop.id, "slug": "about"}, alice).success

        result = create_page_action({"siteId": shop.id, "slug": "about"}, alice)

        assert result.success is False
        assert result.error == "A page with this slug already exists"
        assert result.status_code == 409

    def test_same_slug_on_other_site(self, alice, shop, make_site):
        other = make_site(alice, "other-shop")
        create_page_action({"siteId": shop.id, "slug": "about"}, alice)

        assert create_page_action({"siteId": other.id, "slug": "about"}, alice).success

    def test_foreign_and_missing_site_look_the_same(self, bob, shop):
        foreign = create_page_action({"siteId": shop.id, "slug": "about"}, bob)
        missing = create_page_action({"siteId": "no-such-site", "slug": "about"}, bob)

        assert foreign.error == missing.error == "Site not found or you do not have permission"
        assert foreign.status_code == missing.status_code == 403

    def test_ownership_checked_before_slug(self, alice, bob, shop):
        """A non-owner learns nothing about which slugs exist."""
        create_page_action({"siteId": shop.id, "slug": "about"}, alice)

        result = create_page_action({"siteId": shop.id, "slug": "about"}, bob)

        assert result.error == "Site not found or you do not have permission"

    def test_constraint_violation_reported_as_conflict(self, alice, shop):
        create_page(owner_id=alice.id, site_id=shop.id, slug="about")

        with patch("sitebuilder.application.pages.create_page.get_page_by_slug", return_value=None):
            with pytest.raises(ConflictError):
                create_page(owner_id=alice.id, site_id=shop.id, slug="about")

    def test_invalidates_site_views(self, alice, shop):
        render_cache.get_or_render(f"/admin/site/{shop.id}", lambda: {}, variant=alice.id)
        render_cache.get_or_render("/s/my-shop", lambda: {})

        create_page(owner_id=alice.id, site_id=shop.id, slug="about")

        assert not render_cache.is_cached(f"/admin/site/{shop.id}", alice.id)
        assert not render_cache.is_cached("/s/my-shop")


class TestSavePageContent:
    """Tests for the savePageContent action."""

    def test_replaces_content(self, alice, shop, make_page, hero_document):
        page = make_page(shop, "home", content=[{"id": "old", "type": "hero", "props": {}}])

        result = save_page_content_action(page.id, hero_document, alice)

        assert result.success is True
        assert result.data["content"] == hero_document
        assert db.session.get(Page, page.id).content == hero_document

    def test_idempotent(self, alice, shop, make_page, hero_document):
        page = make_page(shop, "home")

        save_page_content_action(page.id, copy.deepcopy(hero_document), alice)
        first = copy.deepcopy(db.session.get(Page, page.id).content)
        save_page_content_action(page.id, copy.deepcopy(hero_document), alice)

        assert db.session.get(Page, page.id).content == first == hero_document

    def test_last_write_wins(self, alice, shop, make_page, hero_document):
        """Two editors saving the same page: the later save replaces the earlier in full."""
        page = make_page(shop, "home")

        save_page_content_action(page.id, hero_document, alice)
        save_page_content_action(page.id, hero_document[:1], alice)

        assert db.session.get(Page, page.id).content == hero_document[:1]

    def test_other_owner_is_denied(self, bob, shop, make_page, hero_document):
        page = make_page(shop, "home")

        foreign = save_page_content_action(page.id, hero_document, bob)
        missing = save_page_content_action("no-such-page", hero_document, bob)

        assert foreign.success is False
        assert foreign.error == missing.error == "Page not found or you do not have permission"
        assert db.session.get(Page, page.id).content == []

    def test_requires_principal(self, shop, make_page):
        page = make_page(shop, "home")

        result = save_page_content_action(page.id, [], None)

        assert result.error == "You must be logged in to save a page"

    def test_rejects_malformed_document(self, alice, shop, make_page):
        page = make_page(shop, "home")

        result = save_page_content_action(page.id, [{"type": "hero"}], alice)

        assert result.success is False
        assert result.status_code == 400
        assert isinstance(result.error, list)
        assert result.error[0]["field"] == "content.0.id"

    def test_stores_free_form_hero_props(self, alice, shop, make_page):
        page = make_page(shop, "home")
        document = [{"id": "b1", "type": "hero", "props": {"title": 123, "image": {"src": "/a.jpg"}}}]

        result = save_page_content_action(page.id, document, alice)

        assert result.success is True
        assert db.session.get(Page, page.id).content == document

    def test_invalidates_public_url_not_page_id(self, alice, shop, make_page, hero_document):
        page = make_page(shop, "home", published=True)
        render_cache.get_or_render("/s/my-shop/home", lambda: {})
        render_cache.get_or_render(f"/admin/site/{shop.id}/editor/home", lambda: {}, variant=alice.id)

        save_page_content_action(page.id, hero_document, alice)

        assert not render_cache.is_cached("/s/my-shop/home")
        assert not render_cache.is_cached(f"/admin/site/{shop.id}/editor/home", alice.id)

    def test_editor_round_trip(self, alice, shop, make_page):
        """Load a page into the editor, edit it and save it back in-process."""
        page = make_page(shop, "home")
        editor = load_editor(page, saver=local_saver(alice))

        block = editor.add_block("hero")
        result = editor.save()

        assert result.success is True
        stored = db.session.get(Page, page.id).content
        assert [b["id"] for b in stored] == [block.id]
        assert stored[0]["props"]["title"] == "Huge Sale"


class TestPublishing:
    """Tests for publishing pages."""

    def test_publish_and_unpublish(self, alice, shop, make_page):
        page = make_page(shop, "home")

        assert set_page_published_action(page.id, True, alice).data["published"] is True
        assert get_published_page("my-shop", "home").id == page.id

        assert set_page_published_action(page.id, False, alice).data["published"] is False
        assert get_published_page("my-shop", "home") is None

    def test_other_owner_cannot_publish(self, bob, shop, make_page):
        page = make_page(shop, "home")

        result = set_page_published_action(page.id, True, bob)

        assert result.success is False
        assert db.session.get(Page, page.id).published is False


class TestPageQueries:
    def test_get_page_by_slug(self, shop, make_page):
        page = make_page(shop, "home")

        assert get_page_by_slug(shop.id, "home").id == page.id
        assert get_page_by_slug(shop.id, "nope") is None

    def test_list_pages_newest_first(self, shop, make_page):
        from datetime import timedelta

        old = make_page(shop, "old", age=timedelta(days=2))
        new = make_page(shop, "new", age=timedelta(days=1), published=True)

        assert [p.id for p in list_pages_for_site(shop.id)] == [new.id, old.id]
        assert [p.id for p in list_pages_for_site(shop.id, published_only=True)] == [new.id]

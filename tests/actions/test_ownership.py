"""Tests for the ownership guard."""

from sitebuilder.application.ownership import (
    verify_page_parent_ownership,
    verify_site_ownership,
)


class TestOwnershipGuard:
    def test_site_owner(self, alice, bob, make_site):
        site = make_site(alice, "my-shop")

        assert verify_site_ownership(site.id, alice.id) is True
        assert verify_site_ownership(site.id, bob.id) is False
        assert verify_site_ownership("missing", alice.id) is False

    def test_page_ownership_goes_through_site(self, alice, bob, make_site, make_page):
        page = make_page(make_site(alice, "my-shop"), "home")

        assert verify_page_parent_ownership(page.id, alice.id) is True
        assert verify_page_parent_ownership(page.id, bob.id) is False
        assert verify_page_parent_ownership("missing", alice.id) is False

    def test_empty_ids(self, alice):
        assert verify_site_ownership("", alice.id) is False
        assert verify_page_parent_ownership("", alice.id) is False

import re
from dataclasses import dataclass

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

SUBDOMAIN_MAX_LENGTH = 30
SLUG_MAX_LENGTH = 100


def derive_label(text: str, max_length: int) -> str:
    """Turn free text into a subdomain/slug candidate."""
    label = _DISALLOWED.sub("", text.lower())
    label = _WHITESPACE.sub("-", label)
    label = _HYPHENS.sub("-", label)
    return label[:max_length]


@dataclass
class DerivedField:
    """
    A form field filled in from another field until the user types in it.

    Once ``manually_edited`` is set it stays set; source changes are then
    ignored.
    """

    max_length: int
    value: str = ""
    manually_edited: bool = False

    def on_source_change(self, source: str) -> str:
        if not self.manually_edited:
            self.value = derive_label(source, self.max_length)
        return self.value

    def on_direct_edit(self, value: str) -> str:
        self.manually_edited = True
        self.value = value
        return self.value


@dataclass
class SiteFormState:
    name: str = ""
    description: str = ""

    def __post_init__(self):
        self.subdomain = DerivedField(SUBDOMAIN_MAX_LENGTH)

    def set_name(self, name: str) -> None:
        self.name = name
        self.subdomain.on_source_change(name)

    def to_form(self) -> dict:
        return {
            "name": self.name,
            "subdomain": self.subdomain.value,
            "description": self.description,
        }


@dataclass
class PageFormState:
    site_id: str
    title: str = ""

    def __post_init__(self):
        self.slug = DerivedField(SLUG_MAX_LENGTH)

    def set_title(self, title: str) -> None:
        self.title = title
        self.slug.on_source_change(title)

    def to_form(self) -> dict:
        return {
            "siteId": self.site_id,
            "slug": self.slug.value,
            "title": self.title,
        }

"""
Form validation for the builder actions.

Each operation has a fixed schema: a list of fields, each with the rules it
must satisfy. Unlike a fail-fast validator, every rule of every field is
evaluated so the caller can report all problems at once (e.g. a subdomain
that is both too short and contains uppercase letters yields two violations).

Once the raw input passes, it is handed to a pydantic model which gives the
action a typed, normalized value.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Type

from pydantic import BaseModel, ConfigDict, ValidationError

from .blocks import ContentDocumentError, parse_content
from .errors import ValidationFailed

LABEL_PATTERN = re.compile(r"^[a-z0-9-]+$")


@dataclass(frozen=True)
class FieldViolation:
    field: str
    rule: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "rule": self.rule, "message": self.message}


@dataclass(frozen=True)
class Rule:
    name: str
    message: str
    check: Callable[[Any], bool]


def min_length(n: int, message: str) -> Rule:
    return Rule("min_length", message, lambda v: len(v) >= n)


def max_length(n: int, message: str) -> Rule:
    return Rule("max_length", message, lambda v: len(v) <= n)


def matches(pattern: re.Pattern, message: str) -> Rule:
    return Rule("pattern", message, lambda v: pattern.match(v) is not None)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    rules: Sequence[Rule] = ()
    required: bool = True


@dataclass(frozen=True)
class Schema:
    model: Type[BaseModel]
    fields: Sequence[FieldSpec] = field(default_factory=tuple)


# -------------------------------------------------
# Typed inputs
# -------------------------------------------------
class CreateSiteInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    subdomain: str
    description: Optional[str] = None


class CreatePageInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    site_id: str
    slug: str
    title: Optional[str] = None


CREATE_SITE = Schema(
    CreateSiteInput,
    (
        FieldSpec(
            "name",
            "Name",
            (min_length(3, "Name must be at least 3 characters"),),
        ),
        FieldSpec(
            "subdomain",
            "Subdomain",
            (
                min_length(3, "Subdomain must be at least 3 characters"),
                max_length(30, "Subdomain must be at most 30 characters"),
                matches(
                    LABEL_PATTERN,
                    "Subdomain can only contain lowercase letters, numbers, and hyphens",
                ),
            ),
        ),
        FieldSpec("description", "Description", required=False),
    ),
)

CREATE_PAGE = Schema(
    CreatePageInput,
    (
        FieldSpec("siteId", "Site ID", (min_length(1, "Site ID is required"),)),
        FieldSpec(
            "slug",
            "Slug",
            (
                min_length(1, "Slug is required"),
                max_length(100, "Slug must be at most 100 characters"),
                matches(
                    LABEL_PATTERN,
                    "Slug can only contain lowercase letters, numbers, and hyphens",
                ),
            ),
        ),
        FieldSpec("title", "Title", required=False),
    ),
)

# Form field name -> model attribute
_FIELD_ALIASES = {"siteId": "site_id", "pageId": "page_id"}


def check_fields(schema: Schema, raw: Mapping[str, Any]) -> tuple[Dict[str, Any], List[FieldViolation]]:
    """
    Run every rule of the schema against the raw input.

    Returns the cleaned values (optional blanks dropped) and the violations.
    """
    cleaned: Dict[str, Any] = {}
    violations: List[FieldViolation] = []

    for spec in schema.fields:
        value = raw.get(spec.name)

        if value is None or (not spec.required and value == ""):
            if spec.required:
                violations.append(
                    FieldViolation(spec.name, "required", f"{spec.label} is required")
                )
            continue

        if not isinstance(value, str):
            violations.append(
                FieldViolation(spec.name, "type", f"{spec.label} must be a string")
            )
            continue

        failed = [rule for rule in spec.rules if not rule.check(value)]
        violations.extend(FieldViolation(spec.name, r.name, r.message) for r in failed)

        if not failed:
            cleaned[_FIELD_ALIASES.get(spec.name, spec.name)] = value

    return cleaned, violations


def validate_form(schema: Schema, raw: Mapping[str, Any]):
    """
    Validate raw form input against a schema.

    Returns an instance of ``schema.model``; raises ValidationFailed with the
    full list of violations otherwise.
    """
    cleaned, violations = check_fields(schema, raw)
    if violations:
        raise ValidationFailed(violations)

    try:
        return schema.model.model_validate(cleaned)
    except ValidationError as exc:
        raise ValidationFailed([
            FieldViolation(
                ".".join(str(part) for part in err["loc"]) or "form",
                err["type"],
                err["msg"],
            )
            for err in exc.errors()
        ]) from exc


def validate_site_form(raw: Mapping[str, Any]) -> CreateSiteInput:
    return validate_form(CREATE_SITE, raw)


def validate_page_form(raw: Mapping[str, Any]) -> CreatePageInput:
    return validate_form(CREATE_PAGE, raw)


def validate_content(page_id: Any, content: Any) -> list:
    """Validate a page content save request; returns the parsed blocks."""
    violations: List[FieldViolation] = []

    if not isinstance(page_id, str) or not page_id:
        violations.append(FieldViolation("pageId", "required", "Page ID is required"))

    blocks: list = []
    if content is None:
        violations.append(FieldViolation("content", "required", "Content is required"))
    else:
        try:
            blocks = parse_content(content)
        except ContentDocumentError as exc:
            violations.extend(
                FieldViolation(path, rule, message) for path, rule, message in exc.problems
            )

    if violations:
        raise ValidationFailed(violations)
    return blocks

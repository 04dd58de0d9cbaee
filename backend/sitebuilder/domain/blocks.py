"""
Page content blocks.

A page's content document is an ordered list of blocks. Known block types get
their own model with typed props; anything else is carried by ``CustomBlock``
with a free-form mapping so new block types can ship without a migration.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
)

HERO = "hero"
CUSTOM = "custom"


class HeroProps(BaseModel):
    # Props are free-form; the named keys are never type-checked.
    model_config = ConfigDict(extra="allow")

    title: Any = None
    subtitle: Any = None
    image: Any = None


class HeroBlock(BaseModel):
    id: str = Field(min_length=1)
    type: Literal["hero"] = HERO
    props: HeroProps = Field(default_factory=HeroProps)


class CustomBlock(BaseModel):
    id: str = Field(min_length=1)
    type: str = Field(min_length=1)
    props: Dict[str, Any] = Field(default_factory=dict)


def _block_tag(value: Any) -> str:
    block_type = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return HERO if block_type == HERO else CUSTOM


Block = Annotated[
    Union[
        Annotated[HeroBlock, Tag(HERO)],
        Annotated[CustomBlock, Tag(CUSTOM)],
    ],
    Discriminator(_block_tag),
]

_document = TypeAdapter(List[Block])

# Default props for blocks added from the editor sidebar
BLOCK_DEFAULTS: Dict[str, Dict[str, Any]] = {
    HERO: {
        "title": "Huge Sale",
        "subtitle": "50% Off",
        "image": "/placeholder.jpg",
    },
}


class ContentDocumentError(ValueError):
    """Raised when a content document is malformed.

    ``problems`` is a list of (field path, rule, message) tuples.
    """

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__("; ".join(message for _, _, message in self.problems))


def _problem_path(loc) -> str:
    # Drop the union tag pydantic inserts after the block index.
    parts = list(loc)
    if len(parts) > 1 and parts[1] in (HERO, CUSTOM):
        del parts[1]
    return ".".join(["content", *(str(part) for part in parts)])


def make_block(block_type: str, block_id: str, props: Optional[Dict[str, Any]] = None):
    """Build a block of the given type, using the type's default props."""
    if props is None:
        props = dict(BLOCK_DEFAULTS.get(block_type, {}))
    return _document.validate_python([{"id": block_id, "type": block_type, "props": props}])[0]


def parse_content(content: Any) -> list:
    """
    Parse a raw content document (list of block mappings) into block models.

    Block ids must be unique within the document.
    """
    if not isinstance(content, list):
        raise ContentDocumentError([("content", "type", "Content must be a list of blocks")])

    try:
        blocks = _document.validate_python(content)
    except ValidationError as exc:
        raise ContentDocumentError(
            (
                _problem_path(err["loc"]),
                err["type"],
                err["msg"],
            )
            for err in exc.errors()
        ) from exc

    seen = set()
    for index, block in enumerate(blocks):
        if block.id in seen:
            raise ContentDocumentError([
                (f"content.{index}.id", "unique", "Block ids must be unique within a page")
            ])
        seen.add(block.id)

    return blocks


def dump_content(blocks) -> List[Dict[str, Any]]:
    """
    Serialize blocks back to a JSON-ready document.

    Only fields present in the input are written, so the stored document
    mirrors what the editor sent.
    """
    return _document.dump_python(list(blocks), mode="json", exclude_unset=True)

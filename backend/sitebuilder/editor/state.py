"""
Client-side block editor.

The editor holds the page's block list in memory. Nothing touches the server
until ``save()``, which sends the whole list as one document; the server
stores exactly that list, so a successful save needs no reconciliation.
"""
from __future__ import annotations

import uuid
from typing import Any, Callable, List, Optional, Sequence

from sitebuilder.actions.base import ActionResult
from sitebuilder.actions.page import save_page_content_action
from sitebuilder.domain.blocks import dump_content, make_block, parse_content

Saver = Callable[[str, List[dict]], ActionResult]


class BlockEditor:
    def __init__(
        self,
        page_id: str,
        blocks: Sequence[Any] = (),
        *,
        saver: Optional[Saver] = None,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ):
        self.page_id = page_id
        self._blocks = parse_content(list(blocks))
        self._saver = saver
        self._new_id = id_factory
        self.selected_block_id: Optional[str] = None
        self.dirty = False
        self.last_result: Optional[ActionResult] = None

    @property
    def blocks(self) -> tuple:
        return tuple(self._blocks)

    @property
    def selected_block(self):
        for block in self._blocks:
            if block.id == self.selected_block_id:
                return block
        return None

    def _index_of(self, block_id: str) -> Optional[int]:
        for index, block in enumerate(self._blocks):
            if block.id == block_id:
                return index
        return None

    def add_block(self, block_type: str):
        """Append a block with the type's default props. It is not selected."""
        block_id = self._new_id()
        while self._index_of(block_id) is not None:
            block_id = self._new_id()

        block = make_block(block_type, block_id)
        self._blocks.append(block)
        self.dirty = True
        return block

    def select_block(self, block_id: str) -> None:
        if self._index_of(block_id) is not None:
            self.selected_block_id = block_id

    def remove_block(self, block_id: str) -> None:
        index = self._index_of(block_id)
        if index is None:
            return

        del self._blocks[index]
        if self.selected_block_id == block_id:
            self.selected_block_id = None
        self.dirty = True

    def to_document(self) -> List[dict]:
        return dump_content(self._blocks)

    def save(self) -> ActionResult:
        """Submit the full block list; on success the state is persisted."""
        if self._saver is None:
            raise RuntimeError("Editor has no saver configured")

        result = self._saver(self.page_id, self.to_document())
        self.last_result = result
        if result.success:
            self.dirty = False
        return result


def local_saver(principal) -> Saver:
    """A saver that calls the save action in-process as ``principal``."""
    def save(page_id: str, document: List[dict]) -> ActionResult:
        return save_page_content_action(page_id, document, principal)

    return save


def load_editor(page, *, saver: Optional[Saver] = None) -> BlockEditor:
    """Build an editor from a stored page."""
    return BlockEditor(page.id, page.content or [], saver=saver)

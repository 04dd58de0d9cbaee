from __future__ import annotations

from threading import Lock
from typing import Any, Callable, Dict, Iterable, Optional, Set, Tuple

from flask import Flask, current_app

CacheKey = Tuple[str, Optional[str]]


class RenderCache:
    """
    In-process cache of rendered read views.

    Entries are keyed by (display path, variant) and may carry tags.
    Writes mark entries stale through ``revalidate_path`` / ``revalidate_tag``;
    the next read rebuilds them.
    """

    def __init__(self, app: Optional[Flask] = None):
        self._entries: Dict[CacheKey, Any] = {}
        self._tags: Dict[str, Set[CacheKey]] = {}
        # Bumped on every invalidation touching a path or tag
        self._generations: Dict[Tuple[str, str], int] = {}
        self._lock = Lock()
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.extensions["render_cache"] = self

    def get_or_render(
        self,
        path: str,
        render: Callable[[], Any],
        *,
        variant: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> Any:
        """
        Return the cached render for (path, variant), rendering it on a miss.

        A render that was overtaken by an invalidation of its path or one of its
        tags is returned to the caller but not stored.
        """
        key = (path, variant)
        tags = tuple(tags)
        with self._lock:
            if key in self._entries:
                return self._entries[key]
            generation = self._generation(path, tags)

        value = render()

        with self._lock:
            if self._generation(path, tags) == generation:
                self._entries[key] = value
                for tag in tags:
                    self._tags.setdefault(tag, set()).add(key)
        return value

    def is_cached(self, path: str, variant: Optional[str] = None) -> bool:
        with self._lock:
            return (path, variant) in self._entries

    def _generation(self, path: str, tags: Tuple[str, ...]) -> Tuple[int, ...]:
        marks = [("path", path), *(("tag", tag) for tag in tags)]
        return tuple(self._generations.get(mark, 0) for mark in marks)

    def _bump(self, kind: str, name: str) -> None:
        self._generations[(kind, name)] = self._generations.get((kind, name), 0) + 1

    def invalidate_path(self, path: str) -> int:
        with self._lock:
            self._bump("path", path)
            stale = {key for key in self._entries if key[0] == path}
            for key in stale:
                del self._entries[key]
            for keys in self._tags.values():
                keys -= stale
        return len(stale)

    def invalidate_tag(self, tag: str) -> int:
        with self._lock:
            self._bump("tag", tag)
            keys = self._tags.pop(tag, set())
            dropped = 0
            for key in keys:
                self._bump("path", key[0])
                if self._entries.pop(key, None) is not None:
                    dropped += 1
        return dropped

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._tags.clear()


def _cache() -> RenderCache:
    return current_app.extensions["render_cache"]


def revalidate_path(*paths: str) -> None:
    """Mark the cached renders of the given display paths stale.

    Never raises: a failed invalidation must not fail the write that
    triggered it.
    """
    for path in paths:
        try:
            dropped = _cache().invalidate_path(path)
            current_app.logger.debug("Revalidated %s (%d entries)", path, dropped)
        except Exception:
            current_app.logger.warning("Failed to revalidate path %s", path, exc_info=True)


def revalidate_tag(*tags: str) -> None:
    for tag in tags:
        try:
            dropped = _cache().invalidate_tag(tag)
            current_app.logger.debug("Revalidated tag %s (%d entries)", tag, dropped)
        except Exception:
            current_app.logger.warning("Failed to revalidate tag %s", tag, exc_info=True)

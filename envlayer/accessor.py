"""
envlayer/accessor.py
Typed lookups over the EnvironmentStore.

Resolution order (first hit wins, hits are coerced and cached):
  cache → env → server → OS environment → default (returned as-is, uncached)
"""

from __future__ import annotations

import logging
from typing import Any

from envlayer.coercion import convert
from envlayer.store import EnvironmentStore, default_store

logger = logging.getLogger(__name__)


class Accessor:

    def __init__(self, store: EnvironmentStore | None = None):
        self.store = store if store is not None else default_store()
        self._resolving: set[str] = set()

    def get(self, name: str, default: Any = None) -> Any:
        """Return the coerced value of *name*, or *default* if unset."""
        cache = self.store.cache
        if name in cache:
            return cache[name]

        if name in self._resolving:
            # ${A} inside A, or a longer cycle: substitute nothing
            logger.debug("[accessor] cycle on %s, using default", name)
            return default

        found, raw = self.store.get_raw(name)
        if not found:
            return default

        self._resolving.add(name)
        try:
            value = convert(raw, self.get)
        finally:
            self._resolving.discard(name)
        if not self._resolving:
            # values built inside a cycle depend on where resolution started
            cache[name] = value
        return value

    def env(self, name: str, default: Any = None) -> Any:
        return self.get(name, default)

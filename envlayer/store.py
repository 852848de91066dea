"""
envlayer/store.py
Layered key/value state that loaded configuration is merged into.

Layers, in lookup order:
  cache    values already coerced by the accessor
  env      first in-process mapping
  server   second in-process mapping
  environ  the OS environment-variable table (os.environ unless injected)

Not thread-safe: guard concurrent load/get calls externally.
"""

from __future__ import annotations

import logging
import os
from typing import Any, MutableMapping

logger = logging.getLogger(__name__)


class EnvironmentStore:

    def __init__(self, environ: MutableMapping[str, str] | None = None):
        self.env: dict[str, Any] = {}
        self.server: dict[str, Any] = {}
        self.environ = os.environ if environ is None else environ
        self.cache: dict[str, Any] = {}

    def has(self, name: str) -> bool:
        """True if *name* is set in any process layer (cache excluded)."""
        return name in self.env or name in self.server or name in self.environ

    def get_raw(self, name: str) -> tuple[bool, Any]:
        """Return (found, raw value) from the first process layer holding *name*."""
        for layer in (self.env, self.server, self.environ):
            if name in layer:
                return True, layer[name]
        return False, None

    def set_if_absent(self, key: str, value: Any) -> bool:
        """Set *key* in both in-process layers unless any layer already has it.

        String values also go to the OS table. Returns True if the key was set.
        """
        if self.has(key):
            logger.debug("[store] %s already set, keeping existing value", key)
            return False
        if isinstance(value, str):
            self.environ[key] = value
        self.env[key] = value
        self.server[key] = value
        return True

    def clear_cache(self):
        self.cache.clear()


_default: EnvironmentStore | None = None


def default_store() -> EnvironmentStore:
    """Get or create the process-wide store backed by os.environ."""
    global _default
    if _default is None:
        _default = EnvironmentStore()
    return _default

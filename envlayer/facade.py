"""
envlayer/facade.py
Process-wide entry points: load once at startup, then get() anywhere.

    import envlayer
    envlayer.load(".")                 # .env or .env.yaml in the cwd
    port = envlayer.get("PORT", 8000)

The shared instance is created lazily and is NOT thread-safe; load before
spawning threads, or serialise calls yourself.
"""

from __future__ import annotations

from typing import Any

from envlayer.accessor import Accessor
from envlayer.loader import Loader
from envlayer.store import EnvironmentStore, default_store


class DotEnv:
    """One store shared by a Loader and an Accessor."""

    def __init__(self, store: EnvironmentStore | None = None):
        self.store = store if store is not None else default_store()
        self.loader = Loader(self.store)
        self.accessor = Accessor(self.store)

    def load(self, path: str, strict: bool = True) -> dict[str, Any]:
        return self.loader.load(path, strict=strict)

    def create(self, path: str, debug: bool = True) -> dict[str, Any]:
        """Alias of load(); *debug* selects strict mode."""
        return self.loader.load(path, strict=debug)

    def get(self, name: str, default: Any = None) -> Any:
        return self.accessor.get(name, default)

    env = get


_instance: DotEnv | None = None


def get_instance() -> DotEnv:
    """Get or create the shared DotEnv instance."""
    global _instance
    if _instance is None:
        _instance = DotEnv()
    return _instance


def set_instance(instance: DotEnv | None):
    """Replace the shared instance (None → recreate lazily on next use)."""
    global _instance
    _instance = instance


def load(path: str, strict: bool = True) -> dict[str, Any]:
    return get_instance().load(path, strict=strict)


def create(path: str, debug: bool = True) -> dict[str, Any]:
    return get_instance().create(path, debug=debug)


def get(name: str, default: Any = None) -> Any:
    return get_instance().get(name, default)


def env(name: str, default: Any = None) -> Any:
    """Shorthand for get()."""
    return get_instance().get(name, default)

"""
envlayer/loader.py
Resolve, parse and merge a `.env` / `.env.yaml` file into the EnvironmentStore.

Existing keys always win: a key already present in any store layer
(including the real OS environment) is never overwritten.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from envlayer.errors import ConfigError, InvalidFilename, NotFound, UnreadableFile
from envlayer.parser import parse_text
from envlayer.store import EnvironmentStore, default_store
from envlayer.structured import read_structured

logger = logging.getLogger(__name__)

ENV_FILENAME = ".env"
STRUCTURED_FILENAME = ".env.yaml"
RECOGNIZED_FILENAMES = (ENV_FILENAME, STRUCTURED_FILENAME)


def resolve(path: str) -> str:
    """Map *path* to the file to load; directories are searched for
    `.env` first, then `.env.yaml`."""
    if os.path.isdir(path):
        for name in RECOGNIZED_FILENAMES:
            candidate = os.path.join(path, name)
            if os.path.isfile(candidate):
                return candidate
        raise NotFound(
            f'The file ".env" or ".env.yaml" could not be found in {path}', path)

    if not os.path.isfile(path):
        raise NotFound(f"The {path} file could not be found.", path)

    if os.path.basename(path) not in RECOGNIZED_FILENAMES:
        raise InvalidFilename(
            'The file to be loaded must be a ".env" or ".env.yaml" file.', path)
    return path


def parse_file(path: str) -> dict[str, Any]:
    """Resolve and parse *path* into a RawAssoc without touching any store."""
    path = resolve(path)
    logger.debug("[loader] reading %s", path)

    if os.path.basename(path) == STRUCTURED_FILENAME:
        return read_structured(path)

    try:
        with open(path, encoding="utf-8-sig") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableFile(f'The "{path}" file could not be read: {e}', path) from e
    if "\0" in text:
        # os.environ cannot hold NUL in names or values
        raise UnreadableFile(f'The "{path}" file contains a NUL byte.', path)
    return parse_text(text)


class Loader:
    """Merges parsed files into an EnvironmentStore."""

    def __init__(self, store: EnvironmentStore | None = None):
        self.store = store if store is not None else default_store()

    def load(self, path: str, strict: bool = True) -> dict[str, Any]:
        """
        Load *path* (a `.env`/`.env.yaml` file or a directory holding one).

        Args:
            path: file or directory
            strict: raise ConfigError on failure; otherwise return quietly

        Returns:
            the keys newly set by this call, with their raw values.
        """
        try:
            assoc = parse_file(path)
        except ConfigError as e:
            if strict:
                raise
            logger.debug("[loader] ignoring %s (%s): %s", path, e.kind, e)
            return {}
        return self.merge(assoc)

    def merge(self, assoc: dict[str, Any]) -> dict[str, Any]:
        applied = {}
        for key, value in assoc.items():
            if self.store.set_if_absent(key, value):
                applied[key] = value
        logger.info("[loader] merged %d of %d keys", len(applied), len(assoc),
                    extra={"extra_data": {"merged": sorted(applied),
                                          "kept": sorted(set(assoc) - set(applied))}})
        return applied

"""
envlayer: layered `.env` loading with typed, interpolated lookups.
"""

from envlayer.accessor import Accessor
from envlayer.errors import (
    ConfigError,
    ErrorKind,
    InvalidFilename,
    InvalidStructuredContent,
    NotFound,
    UnreadableFile,
)
from envlayer.facade import DotEnv, create, env, get, get_instance, load, set_instance
from envlayer.loader import Loader, parse_file, resolve
from envlayer.store import EnvironmentStore, default_store

__all__ = [
    "Accessor",
    "ConfigError",
    "DotEnv",
    "EnvironmentStore",
    "ErrorKind",
    "InvalidFilename",
    "InvalidStructuredContent",
    "Loader",
    "NotFound",
    "UnreadableFile",
    "create",
    "default_store",
    "env",
    "get",
    "get_instance",
    "load",
    "parse_file",
    "resolve",
    "set_instance",
]

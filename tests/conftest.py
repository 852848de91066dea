"""
tests/conftest.py
Shared fixtures for envlayer tests.
Every test gets its own store over a plain dict, so the real
process environment is never read or written.
"""

import logging

import pytest

from envlayer import DotEnv, EnvironmentStore, set_instance


@pytest.fixture
def environ():
    """Stand-in for os.environ."""
    return {}


@pytest.fixture
def store(environ):
    return EnvironmentStore(environ=environ)


@pytest.fixture
def dotenv(store):
    return DotEnv(store)


@pytest.fixture
def shared_dotenv(store):
    """Install an isolated instance behind the module-level load()/get()."""
    instance = DotEnv(store)
    set_instance(instance)
    yield instance
    set_instance(None)


@pytest.fixture
def write_env(tmp_path):
    """Write *text* to <tmp>/<subdir>/<name> and return the file path."""
    def _write(text, name=".env", subdir=""):
        directory = tmp_path / subdir if subdir else tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)

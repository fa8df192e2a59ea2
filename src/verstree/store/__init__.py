"""Version store implementations.

- base: the VersionStore protocol the hierarchy builder reads from
- memory: dict-backed store for embedding and tests
- filesystem: store persisted under .verstree/history/
"""

from .base import VersionStore
from .filesystem import FileVersionStore, identity_for, identity_key, path_for
from .memory import InMemoryVersionStore

__all__ = [
    "FileVersionStore",
    "InMemoryVersionStore",
    "VersionStore",
    "identity_for",
    "identity_key",
    "path_for",
]

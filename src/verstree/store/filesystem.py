"""Directory-backed version store.

Layout under the store root (normally .verstree/):

    history/index.json            tracked files in first-recorded order
    history/<key>/v<N>/content.txt
    history/<key>/v<N>/meta.json

<key> is a short SHA256 of the file identity. Version numbering starts at v1
and only grows; the newest version has the highest N and index 0.
"""

import hashlib
import logging
import shutil
from datetime import datetime
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from pydantic import BaseModel, Field, ValidationError

from ..constants import (
    CONTENT_FILENAME,
    HISTORY_DIR_NAME,
    IDENTITY_KEY_LENGTH,
    INDEX_FILENAME,
    META_FILENAME,
)
from ..errors import StoreError, VersionNotFoundError
from ..models import VersionMeta, VersionSnapshot

logger = logging.getLogger(__name__)


class IndexEntry(BaseModel):
    """One tracked file in index.json."""

    identity: str
    key: str


class StoreIndex(BaseModel):
    """Contents of history/index.json."""

    files: list[IndexEntry] = Field(default_factory=list)


def identity_for(path: Path) -> str:
    """Return the canonical identity (file:// URI) of a path."""
    return path.expanduser().resolve().as_uri()


def path_for(file_identity: str) -> Path:
    """Return the filesystem path for an identity produced by identity_for."""
    parsed = urlparse(file_identity)
    if parsed.scheme != "file":
        return Path(file_identity)
    return Path(url2pathname(parsed.path))


def identity_key(file_identity: str) -> str:
    """Return the history directory name for a file identity."""
    return hashlib.sha256(file_identity.encode()).hexdigest()[:IDENTITY_KEY_LENGTH]


class FileVersionStore:
    """VersionStore persisted as plain files under a store directory."""

    def __init__(self, root: Path, max_versions: int = 0) -> None:
        """
        Args:
            root: Store directory (e.g. .verstree)
            max_versions: Versions kept per file, 0 keeps all of them
        """
        self.root = root
        self.max_versions = max_versions

    @property
    def history_dir(self) -> Path:
        return self.root / HISTORY_DIR_NAME

    def _index_path(self) -> Path:
        return self.history_dir / INDEX_FILENAME

    def _load_index(self) -> StoreIndex:
        index_path = self._index_path()
        if not index_path.exists():
            return StoreIndex()
        try:
            return StoreIndex.model_validate_json(index_path.read_text())
        except (ValidationError, UnicodeDecodeError, OSError) as e:
            raise StoreError(f"Corrupt store index {index_path}: {e}") from e

    def _write_index(self, index: StoreIndex) -> None:
        self.history_dir.mkdir(parents=True, exist_ok=True)
        self._index_path().write_text(index.model_dump_json(indent=2))

    def _file_dir(self, file_identity: str) -> Path:
        return self.history_dir / identity_key(file_identity)

    def get_current_version(self, file_identity: str) -> int:
        """Return the highest version number recorded for a file (0 if none)."""
        file_dir = self._file_dir(file_identity)
        if not file_dir.exists():
            return 0
        versions = [
            int(d.name[1:])
            for d in file_dir.iterdir()
            if d.is_dir() and d.name.startswith("v") and d.name[1:].isdigit()
        ]
        return max(versions) if versions else 0

    def _load_versions(self, file_identity: str) -> list[tuple[VersionMeta, str]]:
        """Return (meta, content) pairs newest first. Corrupt entries are skipped."""
        file_dir = self._file_dir(file_identity)
        if not file_dir.exists():
            return []

        versions = []
        for version_dir in file_dir.iterdir():
            if not (version_dir.is_dir() and version_dir.name.startswith("v")):
                continue
            meta_path = version_dir / META_FILENAME
            if not meta_path.exists() or not (version_dir / CONTENT_FILENAME).exists():
                logger.warning("Skipping incomplete version %s", version_dir)
                continue
            try:
                meta = VersionMeta.model_validate_json(meta_path.read_text())
                content = (version_dir / CONTENT_FILENAME).read_bytes().decode("utf-8")
            except (ValidationError, UnicodeDecodeError, OSError) as e:
                logger.warning("Skipping corrupt version %s: %s", version_dir, e)
                continue
            versions.append((meta, content))

        return sorted(versions, key=lambda v: v[0].version, reverse=True)

    def _version_at(self, file_identity: str, index: int) -> tuple[VersionMeta, str]:
        versions = self._load_versions(file_identity)
        if not versions:
            raise VersionNotFoundError(f"File is not tracked: {file_identity}")
        if not 0 <= index < len(versions):
            raise VersionNotFoundError(
                f"Version index {index} out of range for {file_identity} ({len(versions)} versions)"
            )
        return versions[index]

    def get_all_versioned_files(self) -> list[str]:
        return [entry.identity for entry in self._load_index().files]

    def get_all_versions(self, file_identity: str) -> list[str]:
        return [content for _, content in self._load_versions(file_identity)]

    def get_version_timestamp(self, file_identity: str, index: int) -> datetime:
        meta, _ = self._version_at(file_identity, index)
        return meta.created_at

    def get_snapshot(self, file_identity: str, index: int) -> VersionSnapshot:
        """Return the snapshot at `index` (0 = newest)."""
        meta, content = self._version_at(file_identity, index)
        return VersionSnapshot(
            content=content,
            timestamp=meta.created_at,
            index=index,
        )

    def record(self, file_identity: str, content: str) -> int:
        """Append a new version of a file.

        Args:
            file_identity: Identity of the file (see identity_for)
            content: Full text of the file

        Returns:
            The new version number, or 0 if content matches the latest version
        """
        versions = self._load_versions(file_identity)
        if versions and versions[0][1] == content:
            logger.debug("Unchanged, not recording %s", file_identity)
            return 0

        index = self._load_index()
        key = identity_key(file_identity)
        if not any(entry.identity == file_identity for entry in index.files):
            index.files.append(IndexEntry(identity=file_identity, key=key))
            self._write_index(index)

        new_version = self.get_current_version(file_identity) + 1
        version_dir = self._file_dir(file_identity) / f"v{new_version}"
        try:
            version_dir.mkdir(parents=True, exist_ok=True)
            data = content.encode("utf-8")
            (version_dir / CONTENT_FILENAME).write_bytes(data)
            meta = VersionMeta(
                version=new_version,
                file_identity=file_identity,
                sha256=hashlib.sha256(data).hexdigest(),
                line_count=content.count("\n") + 1,
            )
            (version_dir / META_FILENAME).write_text(meta.model_dump_json(indent=2))
        except OSError as e:
            raise StoreError(f"Failed to write {version_dir}: {e}") from e

        logger.debug("Recorded v%d of %s", new_version, file_identity)

        if self.max_versions > 0:
            self._prune_old_versions(file_identity)

        return new_version

    def _prune_old_versions(self, file_identity: str) -> None:
        """Remove versions beyond max_versions, keeping newest."""
        file_dir = self._file_dir(file_identity)
        version_dirs = sorted(
            [
                d
                for d in file_dir.iterdir()
                if d.is_dir() and d.name.startswith("v") and d.name[1:].isdigit()
            ],
            key=lambda d: int(d.name[1:]),
            reverse=True,
        )

        for old_dir in version_dirs[self.max_versions :]:
            logger.debug("Pruning %s", old_dir)
            shutil.rmtree(old_dir)

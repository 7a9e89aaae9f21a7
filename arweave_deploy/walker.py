"""
Incremental deploy of the build output.

Every file under the build root is uploaded once and remembered in the
manifest by its relative path. Later runs skip any path the manifest
already knows, whether or not its content changed.
"""
import logging
from pathlib import PurePosixPath
from typing import Any, Callable, Dict, Optional

from .config import DeploySettings
from .content_store import ContentStore, authenticate, guess_content_type
from .errors import LocalFileError, MissingBuildOutputError
from .manifest import MANIFEST_CONTENT_TYPE, ContentId, Manifest, ManifestStore
from .tree import FileTree, LocalTree

logger = logging.getLogger(__name__)


class DeployWalker:
    """Walks a file tree and uploads whatever the manifest has not seen"""

    def __init__(self, store: ContentStore, tree: FileTree, manifest_store: ManifestStore):
        self.store = store
        self.tree = tree
        self.manifest_store = manifest_store
        self.manifest: Optional[Manifest] = None
        self.uploaded = 0
        self.skipped = 0

    def run(self) -> ContentId:
        """Upload new files, finalize the manifest and return the manifest's id"""
        if not self.tree.exists():
            raise MissingBuildOutputError()

        self.manifest = self.manifest_store.load()
        self._process_dir(PurePosixPath())

        entry_point = self.manifest.find_entry_point()
        if entry_point:
            self.manifest.index.path = entry_point

        try:
            self.manifest_store.save(self.manifest)
        except OSError as e:
            raise LocalFileError(f"Could not write {self.manifest_store.path}: {e}") from e
        return self._upload_manifest()

    def _process_dir(self, rel: PurePosixPath):
        try:
            names = self.tree.list_dir(rel)
        except OSError as e:
            raise LocalFileError(f"Could not list {rel.as_posix()}: {e}") from e

        for name in names:
            child = rel / name
            if self.tree.is_dir(child):
                self._process_dir(child)
                continue
            self._process_file(child)

    def _process_file(self, rel: PurePosixPath):
        key = rel.as_posix()
        if self.manifest.has(key):
            logger.info("- %s (unchanged, skipping)", key)
            self.skipped += 1
            return

        logger.info("- %s (changed, uploading)", key)
        try:
            size = self.tree.size(rel)
            result = self.store.upload(lambda: self.tree.open(rel), size, guess_content_type(rel.name))
        except OSError as e:
            raise LocalFileError(f"Could not read {key}: {e}") from e
        self.manifest.record(key, result.id)
        self.uploaded += 1

    def _upload_manifest(self) -> ContentId:
        path = self.manifest_store.path
        try:
            size = path.stat().st_size
            result = self.store.upload(lambda: open(path, "rb"), size, MANIFEST_CONTENT_TYPE)
        except OSError as e:
            raise LocalFileError(f"Could not read {path}: {e}") from e
        logger.info("Uploaded manifest (%d new, %d unchanged)", self.uploaded, self.skipped)
        return result.id


def deploy(
    jwk: Dict[str, Any],
    settings: Optional[DeploySettings] = None,
    store_factory: Callable[[Dict[str, Any]], ContentStore] = authenticate,
) -> ContentId:
    """Deploy the build output with the given wallet and return the manifest id"""
    settings = settings or DeploySettings()
    tree = LocalTree(settings.build_dir)
    # Checked before authenticating so a missing build never touches the wallet.
    if not tree.exists():
        raise MissingBuildOutputError()

    walker = DeployWalker(store_factory(jwk), tree, ManifestStore(settings.manifest_path))
    return walker.run()

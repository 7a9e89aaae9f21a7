"""
Path manifest model and its on-disk store.

The manifest maps every uploaded file (relative to the build root, with
forward slashes) to the content id returned by the store. A path that is
already present is never uploaded again.
"""
import logging
import re
from pathlib import Path, PurePosixPath
from typing import Dict, NewType, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

ContentId = NewType("ContentId", str)

MANIFEST_KIND = "arweave/paths"
MANIFEST_VERSION = "0.2.0"
MANIFEST_CONTENT_TYPE = "application/x.arweave-manifest+json"

# Hashed entry document emitted by the site build, e.g. index-3f2a9c.html
ENTRY_POINT_PATTERN = re.compile(r"index-.*\.html", re.IGNORECASE)


class IndexEntry(BaseModel):
    path: str = ""


class PathEntry(BaseModel):
    id: ContentId


class Manifest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: str = Field(default=MANIFEST_KIND, alias="manifest")
    version: str = MANIFEST_VERSION
    index: IndexEntry = Field(default_factory=IndexEntry)
    paths: Dict[str, PathEntry] = Field(default_factory=dict)

    def has(self, key: str) -> bool:
        return key in self.paths

    def record(self, key: str, content_id: ContentId) -> None:
        self.paths[key] = PathEntry(id=content_id)

    def find_entry_point(self) -> Optional[str]:
        """Return the first path whose file name looks like index-<hash>.html"""
        for key in self.paths:
            if ENTRY_POINT_PATTERN.fullmatch(PurePosixPath(key).name):
                return key
        return None

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


class ManifestStore:
    """Reads and writes the manifest at a single well-known location"""

    def __init__(self, path: Path):
        self.path = Path(path)

    @staticmethod
    def default() -> Manifest:
        return Manifest()

    def load(self) -> Manifest:
        """Load the stored manifest, or an empty one if it is missing or unreadable"""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No manifest at %s, starting fresh", self.path)
            return self.default()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read manifest %s (%s), starting fresh", self.path, e)
            return self.default()

        try:
            return Manifest.model_validate_json(text)
        except ValueError as e:
            logger.warning("Ignoring malformed manifest %s: %s", self.path, e)
            return self.default()

    def save(self, manifest: Manifest) -> None:
        self.path.write_text(manifest.to_json(), encoding="utf-8")

"""
Deploy settings.

File locations are fixed and resolved against the working directory.
Only the gateway used for viewer links and the log level can be tuned
through the environment.
"""
import os
from dataclasses import dataclass
from pathlib import Path

WALLET_FILE = "wallet.json"
BUILD_DIR = "dist"
MANIFEST_FILE = "manifest.json"

DEFAULT_GATEWAY = "https://arweave.net"
DEFAULT_LOG_LEVEL = "info"


@dataclass
class DeploySettings:
    root: Path = Path(".")
    gateway: str = DEFAULT_GATEWAY
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, root: Path = Path(".")) -> "DeploySettings":
        """Load settings from environment variables with safe defaults"""
        gateway = os.getenv("TURBO_DEPLOY_GATEWAY") or DEFAULT_GATEWAY
        log_level = os.getenv("TURBO_DEPLOY_LOG_LEVEL") or DEFAULT_LOG_LEVEL
        return cls(root=Path(root), gateway=gateway.rstrip("/"), log_level=log_level.lower())

    @property
    def wallet_path(self) -> Path:
        return self.root / WALLET_FILE

    @property
    def build_dir(self) -> Path:
        return self.root / BUILD_DIR

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_FILE

    def viewer_url(self, content_id: str) -> str:
        return f"{self.gateway}/{content_id}"

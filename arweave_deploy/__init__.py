"""
Arweave site deploy - incremental static site uploads through Turbo
"""
from .errors import (
    ConfigurationError,
    DeployError,
    MissingBuildOutputError,
    UploadError,
    WalletFormatError,
    WalletNotFoundError,
)
from .manifest import ContentId, Manifest, ManifestStore
from .walker import DeployWalker, deploy

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ContentId",
    "DeployError",
    "DeployWalker",
    "Manifest",
    "ManifestStore",
    "MissingBuildOutputError",
    "UploadError",
    "WalletFormatError",
    "WalletNotFoundError",
    "deploy",
]

"""
Errors raised during a deploy run
"""


class DeployError(RuntimeError):
    """Base class for every failure that aborts a deploy"""


class ConfigurationError(DeployError):
    """Wallet or settings could not be loaded"""


class WalletNotFoundError(ConfigurationError):
    pass


class WalletFormatError(ConfigurationError):
    pass


class MissingBuildOutputError(DeployError):
    """Build output directory is absent"""

    def __init__(self, message: str = "Dist folder not found. Run npm run build first."):
        super().__init__(message)


class LocalFileError(DeployError):
    """A build file or the manifest could not be read or written"""


class UploadError(DeployError):
    """Content store rejected or failed an upload"""

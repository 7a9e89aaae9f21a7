"""
Content store boundary.

Anything that accepts a byte stream and hands back a permanent content id
can act as a store. Stores receive a factory rather than an open stream so
they can reopen the source if they need more than one pass over it. The
Turbo adapter is the production implementation; tests provide their own.
"""
import mimetypes
from dataclasses import dataclass
from typing import Any, BinaryIO, Callable, Dict, Protocol

from .errors import ConfigurationError, UploadError
from .manifest import ContentId

DEFAULT_CONTENT_TYPE = "application/octet-stream"

StreamFactory = Callable[[], BinaryIO]


@dataclass(frozen=True)
class UploadResult:
    id: ContentId


class ContentStore(Protocol):
    def upload(self, stream_factory: StreamFactory, size: int, content_type: str) -> UploadResult: ...


def guess_content_type(name: str) -> str:
    content_type, _ = mimetypes.guess_type(name)
    return content_type or DEFAULT_CONTENT_TYPE


def _import_turbo():
    try:
        from turbo_sdk import ArweaveSigner, Turbo
    except ImportError as exc:  # pragma: no cover - runtime dependency
        raise ConfigurationError(
            "Turbo SDK is not available. Install it with `pip install arweave-site-deploy[turbo]`."
        ) from exc
    return Turbo, ArweaveSigner


class TurboContentStore:
    """Uploads data items to Arweave through the Turbo bundling service"""

    def __init__(self, turbo: Any):
        self.turbo = turbo

    @classmethod
    def authenticated(cls, jwk: Dict[str, Any]) -> "TurboContentStore":
        Turbo, ArweaveSigner = _import_turbo()
        try:
            return cls(Turbo(ArweaveSigner(jwk)))
        except Exception as e:
            raise ConfigurationError(f"Wallet is not a usable Arweave key: {e!r}") from e

    def upload(self, stream_factory: StreamFactory, size: int, content_type: str) -> UploadResult:
        tags = [{"name": "Content-Type", "value": content_type}]
        try:
            result = self.turbo.upload(stream_factory=stream_factory, data_size=size, tags=tags)
        except Exception as e:
            raise UploadError(f"Turbo upload failed: {e}") from e
        return UploadResult(id=ContentId(str(result.id)))


def authenticate(jwk: Dict[str, Any]) -> ContentStore:
    return TurboContentStore.authenticated(jwk)

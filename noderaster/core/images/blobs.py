"""
Blob Store
==========

Process-local registry of binary blobs addressed by ``blob:`` object URLs.
URLs stay valid until revoked or until the process exits; nothing is
written to disk.
"""

from typing import Dict, Optional
import threading
import uuid

from noderaster.config.logging import get_logger
from noderaster.config.settings import get_settings
from noderaster.models.schemas import Blob

logger = get_logger(__name__)


class BlobNotFoundError(KeyError):
    """Exception raised when an object URL does not reference a live blob."""

    pass


class BlobStore:
    """In-memory blob registry."""

    def __init__(self, origin: Optional[str] = None):
        self.origin = origin or get_settings().blob_origin
        self._blobs: Dict[str, Blob] = {}
        self._lock = threading.Lock()
        self.logger = logger.bind(component="blob_store")

    def create_object_url(self, data: bytes, content_type: str = "") -> str:
        """
        Register a blob and return a URL referencing it.

        Args:
            data: Blob contents
            content_type: Media type recorded on the blob

        Returns:
            Object URL of the form ``blob:<origin>/<uuid>``
        """
        blob = Blob(data=bytes(data), type=content_type)
        url = f"blob:{self.origin}/{uuid.uuid4()}"
        with self._lock:
            self._blobs[url] = blob

        self.logger.debug("Blob registered", url=url, size=blob.size, content_type=content_type)
        return url

    def get(self, url: str) -> Blob:
        """Look up the blob behind an object URL."""
        with self._lock:
            try:
                return self._blobs[url]
            except KeyError:
                raise BlobNotFoundError(url) from None

    def revoke_object_url(self, url: str) -> None:
        """Release a blob; unknown URLs are ignored."""
        with self._lock:
            removed = self._blobs.pop(url, None)
        if removed is not None:
            self.logger.debug("Blob revoked", url=url)

    def clear(self) -> None:
        with self._lock:
            self._blobs.clear()

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._blobs

    def __len__(self) -> int:
        with self._lock:
            return len(self._blobs)


# Global blob store instance
_global_blob_store: Optional[BlobStore] = None


def get_blob_store() -> BlobStore:
    """Get the process-wide blob store."""
    global _global_blob_store
    if _global_blob_store is None:
        _global_blob_store = BlobStore()
    return _global_blob_store

"""
Encoded Image Cache
===================

Holds at most one encoded image per node, keyed by node id.
"""

from typing import Dict, Optional


class EncodedImageCache:
    """Node id to data URI mapping. Writers are not coordinated; the last write wins."""

    def __init__(self) -> None:
        self._entries: Dict[str, str] = {}

    def get(self, node_id: str) -> Optional[str]:
        """Cached data URI for a node, or None."""
        return self._entries.get(node_id)

    def set(self, node_id: str, data_uri: str) -> None:
        """Store the data URI for a node."""
        self._entries[node_id] = data_uri

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# Global cache instance
_global_cache: Optional[EncodedImageCache] = None


def get_encoded_image_cache() -> EncodedImageCache:
    """Get the process-wide encoded image cache."""
    global _global_cache
    if _global_cache is None:
        _global_cache = EncodedImageCache()
    return _global_cache

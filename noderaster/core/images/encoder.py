"""
PNG Data URI Encoding
=====================

Conversion between raw PNG bytes and ``data:image/png;base64,...`` URIs.
"""

import base64

PNG_DATA_URI_PREFIX = "data:image/png;base64,"


def bytes_to_data_uri(data: bytes) -> str:
    """
    Encode raw PNG bytes as a data URI.

    Args:
        data: PNG-encoded pixel data, possibly empty

    Returns:
        Data URI with the standard base64 encoding of ``data``
    """
    return PNG_DATA_URI_PREFIX + base64.b64encode(bytes(data)).decode("ascii")


def data_uri_to_bytes(data_uri: str) -> bytes:
    """Strip the fixed PNG data URI prefix and decode the base64 payload."""
    return base64.b64decode(data_uri[len(PNG_DATA_URI_PREFIX):])

"""
Images Module
=============

Node image export and synthetic placeholder images.

Components:
- encoder: PNG bytes to base64 data URIs
- fills: Image paint classification
- surfaces: Off-screen and browser canvas drawing surfaces
- placeholder: Placeholder images stamped with their dimensions
- blobs: In-memory blob store handing out object URLs
- conversion_warnings: Conversion warning collector
- cache: Encoded image cache keyed by node id
- exporter: Node export pipeline
"""

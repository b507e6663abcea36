"""
Node Raster
===========

Raster export of design-host nodes.

This package provides:
- Base64 PNG data URI export of host nodes with child suppression and caching
- Paint list classification (image fills, multiple fills)
- Synthetic placeholder images rendered off-screen with Pillow or in a browser canvas
"""

__version__ = "1.0.0"
__author__ = "Node Raster Team"

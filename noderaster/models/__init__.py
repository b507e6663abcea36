"""
Models
======

Pydantic models for host nodes, paints, export settings and in-memory blobs.
"""

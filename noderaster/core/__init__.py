"""
Core Module
===========

Image export, placeholder generation and browser rendering support.
"""

"""
Rendering Module
===============

Browser automation used to provide a windowed drawing environment.

Components:
- browser_pool: Pool of Playwright browsers handing out pages
"""

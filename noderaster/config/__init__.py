"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Main package settings and environment configuration
- logging: Structured logging configuration
"""

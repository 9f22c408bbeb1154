"""
Application configuration using Pydantic settings.

Re-exports the settings from community_issues.config so the web app and the
CLI read the same environment.
"""

from community_issues.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]

"""Command-line front end for the issue API."""

from .main import main

__all__ = ["main"]

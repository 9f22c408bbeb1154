"""
Community Issue Reporter core library.

This package holds everything that is not HTTP plumbing: the Issue model,
the in-memory issue repository, configuration, logging, and the client side
(HTTP data layer, feed/stats/form state and the CLI).

Usage:
    # Config
    from community_issues.config import get_settings, Settings

    # Logging
    from community_issues.logging import get_logger, configure_logging

    # Store
    from community_issues.repositories import IssueRepository

    # Client
    from community_issues.client import IssueApiClient, IssueSession
"""

__version__ = "1.0.0"

"""
Application constants for the Community Issue Reporter.

Contains field limits, required fields, and the category options offered by
the client.
"""

# =============================================================================
# Issue Fields
# =============================================================================

# Values longer than these are truncated before storage, never rejected
FIELD_MAX_LENGTHS = {
    "title": 120,
    "description": 2000,
    "category": 80,
    "location": 160,
    "contact": 120,
}

# Order matters: missing-field errors list names in this order
REQUIRED_FIELDS = ("title", "description", "category", "location")

OPTIONAL_FIELDS = ("contact",)


# =============================================================================
# Categories
# =============================================================================

# The server accepts any category string; these are the client's options
ISSUE_CATEGORIES = ("Safety", "Infrastructure", "Health", "Environment", "Other")

DEFAULT_CATEGORY = "Safety"


# =============================================================================
# Client Messages
# =============================================================================

DEFAULT_ERROR_MESSAGES = {
    "fetch_issues": "Failed to load issues",
    "fetch_issue": "Failed to load issue",
    "create_issue": "Failed to submit issue",
    "update_status": "Failed to update status",
}

EMPTY_FEED_MESSAGE = "No issues yet. Be the first to report!"
NO_MATCHES_MESSAGE = "No issues match your filters."

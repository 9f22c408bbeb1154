"""Web backend package."""

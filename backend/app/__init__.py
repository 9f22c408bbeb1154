"""FastAPI application for the Community Issue Reporter."""

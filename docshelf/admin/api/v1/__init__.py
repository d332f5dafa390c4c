"""Admin API v1 endpoints."""

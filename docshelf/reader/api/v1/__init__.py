"""Reader API v1 endpoints."""

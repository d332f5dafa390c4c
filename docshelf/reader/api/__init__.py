"""Reader API."""

"""Admin panel: authenticated content management."""

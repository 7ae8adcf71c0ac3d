"""Books Store API package."""

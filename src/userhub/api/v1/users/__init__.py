"""User profile endpoints."""

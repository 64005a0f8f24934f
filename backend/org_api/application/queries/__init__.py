"""Listing queries (read side)."""

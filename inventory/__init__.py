"""Pantry inventory and restock service."""

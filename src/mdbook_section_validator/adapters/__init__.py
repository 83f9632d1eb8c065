"""Adapters for remote checks and rendering."""

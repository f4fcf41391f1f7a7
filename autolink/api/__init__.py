"""Autolink API layer."""

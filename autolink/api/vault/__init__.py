"""Vault domain: collect page descriptors from Markdown files on disk."""

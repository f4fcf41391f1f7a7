"""Autolink - automatic wikilink insertion for Markdown text."""

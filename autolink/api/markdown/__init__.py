"""Markdown structure helpers: protected spans, tables and frontmatter."""

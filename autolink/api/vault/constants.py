"""Frontmatter keys recognized on vault pages."""

DISABLED_KEYS = ("autolink-off", "autolink-disabled")
SCOPED_KEYS = ("autolink-scoped", "autolink-restrict-namespace")
EXCLUDED_KEYS = ("autolink-exclude", "autolink-prevent-linking")
ALIAS_KEYS = ("aliases", "alias")

MARKDOWN_SUFFIX = ".md"

"""Entry matching (keywords, regular expressions, whole words)."""

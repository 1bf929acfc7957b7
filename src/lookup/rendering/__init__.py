"""Output formatting for lookup results."""

"""File access for lookup: suffix-keyed openers and line sources."""

"""Logging setup for lookup (stdlib ``logging`` under the 'lookup' namespace)."""

"""Observability — logging setup shared by all entry points."""

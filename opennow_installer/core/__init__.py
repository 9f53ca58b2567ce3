"""Core layer — models, config, observability, services."""

"""Adapters to external services."""

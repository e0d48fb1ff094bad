"""Metadata use cases."""

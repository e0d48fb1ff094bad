"""Application layer orchestrating the sort pipeline."""

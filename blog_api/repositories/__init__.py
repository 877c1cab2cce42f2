"""Explicit data-access functions, one module per table."""

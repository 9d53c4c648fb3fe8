"""Shared library code: errors, logging, and field validation."""

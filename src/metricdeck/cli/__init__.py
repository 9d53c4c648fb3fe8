"""Command-line interface for metricdeck."""

"""Click commands for the metricdeck CLI."""

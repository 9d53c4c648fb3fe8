"""Content configuration and loading for metricdeck.

Main components:
- ContentLoader: Load and validate the manifest and collection files
- load_corpus: One-call helper for host applications and the CLI
- Environment variable overrides (METRICDECK_* variables)
- Default settings and category metadata
"""

from metricdeck.config.loader import ContentLoader, load_corpus

__all__ = [
    "ContentLoader",
    "load_corpus",
]

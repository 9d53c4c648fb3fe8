"""metricdeck - Glossary terms and guides for a metrics reference site.

metricdeck holds the content model for a SaaS, paid-ads and finance
glossary: typed content blocks, glossary terms authored as compact seeds,
long-form guides, and the compiler that merges them into one slug-indexed,
cross-checked corpus.

Main features:
- Typed content blocks (headings, paragraphs, bullet lists, tables)
- Deterministic seed expansion for glossary terms
- Corpus compilation with an explicit duplicate slug policy
- Cross-reference validation between terms and guides
"""

from metricdeck.config.loader import ContentLoader, load_corpus
from metricdeck.content.compiler import build_corpus
from metricdeck.content.resolver import CrossReferenceResolver
from metricdeck.lib.errors import ConfigError, DuplicateSlugError, MetricDeckError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ContentLoader",
    "ConfigError",
    "CrossReferenceResolver",
    "DuplicateSlugError",
    "MetricDeckError",
    "build_corpus",
    "load_corpus",
]

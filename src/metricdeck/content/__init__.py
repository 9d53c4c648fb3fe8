"""Seed expansion, corpus compilation, and cross-reference validation."""

from metricdeck.content.compiler import build_corpus
from metricdeck.content.report import ContentReport, build_report
from metricdeck.content.resolver import CrossReferenceResolver
from metricdeck.content.seed import build_sections, expand_seed
from metricdeck.models.config import CollectionDefaults

__all__ = [
    "CollectionDefaults",
    "ContentReport",
    "CrossReferenceResolver",
    "build_corpus",
    "build_report",
    "build_sections",
    "expand_seed",
]

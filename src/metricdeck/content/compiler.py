"""Corpus compiler.

Merges ordered term and guide collections into one immutable, slug-indexed
Corpus. Compilation is pure and runs once per process or build.

Duplicate slugs are a data-integrity defect. Every collision is recorded,
then resolved by the configured DuplicatePolicy:

- ``error``: raise DuplicateSlugError listing every collision.
- ``last-wins``: the later record replaces the earlier one at the earlier
  one's position, and a warning is logged.

Either way the corpus never holds two records with the same slug.
"""

from collections.abc import Iterable, Sequence
from types import MappingProxyType
from typing import TypeVar

from metricdeck.lib.errors import DuplicateSlugError
from metricdeck.lib.logging_config import get_logger
from metricdeck.models.corpus import (
    Corpus,
    DuplicatePolicy,
    DuplicateSlug,
    GuideCollection,
    RecordKind,
    TermCollection,
)
from metricdeck.models.guide import Guide
from metricdeck.models.term import GlossaryTerm

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", GlossaryTerm, Guide)


def _merge(
    kind: RecordKind,
    batches: Iterable[tuple[str, Sequence[RecordT]]],
) -> tuple[dict[str, RecordT], list[DuplicateSlug]]:
    """Merge (collection name, records) batches into a slug-keyed dict.

    Dict insertion order keeps the first occurrence's position; a later
    duplicate overwrites the value in place.

    Returns:
        Tuple of (slug -> record, duplicate reports)
    """
    merged: dict[str, RecordT] = {}
    owners: dict[str, str] = {}
    duplicates: list[DuplicateSlug] = []

    for collection_name, records in batches:
        for record in records:
            if record.slug in merged:
                duplicates.append(
                    DuplicateSlug(
                        kind=kind,
                        slug=record.slug,
                        first_collection=owners[record.slug],
                        duplicate_collection=collection_name,
                    )
                )
            merged[record.slug] = record
            owners[record.slug] = collection_name

    return merged, duplicates


def build_corpus(
    term_collections: Sequence[TermCollection],
    guide_collections: Sequence[GuideCollection],
    *,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.ERROR,
) -> Corpus:
    """Compile term and guide collections into a Corpus.

    Args:
        term_collections: Term collections in merge order
        guide_collections: Guide collections in merge order
        duplicate_policy: How to resolve slug collisions

    Returns:
        Immutable Corpus with slug indexes

    Raises:
        DuplicateSlugError: If any slug collides and the policy is ERROR
    """
    policy = DuplicatePolicy(duplicate_policy)

    terms, term_dups = _merge(
        "term", ((c.name, c.terms) for c in term_collections)
    )
    guides, guide_dups = _merge(
        "guide", ((c.name, c.guides) for c in guide_collections)
    )
    duplicates = term_dups + guide_dups

    if duplicates:
        if policy is DuplicatePolicy.ERROR:
            raise DuplicateSlugError(duplicates)
        for dup in duplicates:
            logger.warning(f"Duplicate slug resolved (last wins): {dup.describe()}")

    corpus = Corpus(
        terms=tuple(terms.values()),
        guides=tuple(guides.values()),
        term_index=MappingProxyType(terms),
        guide_index=MappingProxyType(guides),
        duplicates=tuple(duplicates),
    )
    logger.info(
        f"Compiled corpus: {len(corpus.terms)} terms from "
        f"{len(term_collections)} collection(s), {len(corpus.guides)} guides"
    )
    return corpus

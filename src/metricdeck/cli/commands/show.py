"""CLI commands for inspecting compiled content.

Implements 'metricdeck show' (dump one record as JSON) and 'metricdeck list'
(title-sorted listing of terms and guides).
"""

import json
import sys
from typing import Any

import click

from metricdeck.config.defaults import get_category
from metricdeck.config.loader import load_corpus
from metricdeck.content.resolver import CrossReferenceResolver
from metricdeck.lib.errors import (
    ContentIntegrityError,
    DuplicateSlugError,
    MetricDeckError,
)
from metricdeck.lib.logging_config import get_logger, setup_logging
from metricdeck.models.config import ContentSettings
from metricdeck.models.content import CATEGORY_SLUGS
from metricdeck.models.corpus import Corpus
from metricdeck.models.guide import Guide
from metricdeck.models.term import GlossaryTerm

logger = get_logger(__name__)


def _load(content_dir: str | None) -> Corpus:
    """Load the corpus, exiting with the same codes as 'metricdeck validate'."""
    try:
        return load_corpus(ContentSettings(content_dir=content_dir))
    except (DuplicateSlugError, ContentIntegrityError) as e:
        logger.error(f"Content defects: {e}")
        click.echo(f"Content Error: {e}", err=True)
        sys.exit(1)
    except MetricDeckError as e:
        logger.error(f"Failed to load corpus: {e}", exc_info=True)
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(2)


def _record_payload(
    record: GlossaryTerm | Guide, resolver: CrossReferenceResolver
) -> dict[str, Any]:
    """Serialize a record by alias with its resolved inbound/outbound links."""
    payload = record.model_dump(mode="json", by_alias=True)
    if isinstance(record, GlossaryTerm):
        payload["resolvedGuides"] = [
            g.slug for g in resolver.resolve_term_relations(record)
        ]
        payload["linkedFromGuides"] = [
            g.slug for g in resolver.guides_linking_to_term(record.slug)
        ]
    else:
        payload["resolvedGlossaryTerms"] = [
            t.slug for t in resolver.resolve_guide_relations(record)
        ]
        payload["linkedFromTerms"] = [
            t.slug for t in resolver.terms_linking_to_guide(record.slug)
        ]
    return payload


@click.command()
@click.argument("slug")
@click.option(
    "--kind",
    type=click.Choice(["term", "guide"]),
    default=None,
    help="Record kind (default: try term, then guide)",
)
@click.option(
    "--content-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory holding content.yaml",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def show(slug: str, kind: str | None, content_dir: str | None, verbose: bool) -> None:
    """Print one compiled term or guide as JSON.

    SLUG is the term or guide slug.
    """
    setup_logging(verbose=verbose)
    corpus = _load(content_dir)

    record: GlossaryTerm | Guide | None = None
    if kind in (None, "term"):
        record = corpus.get_term(slug)
    if record is None and kind in (None, "guide"):
        record = corpus.get_guide(slug)

    if record is None:
        click.echo(f"Not found: no {kind or 'term or guide'} '{slug}'", err=True)
        sys.exit(1)

    resolver = CrossReferenceResolver(corpus)
    click.echo(json.dumps(_record_payload(record, resolver), indent=2, ensure_ascii=False))


@click.command(name="list")
@click.option(
    "--category",
    type=click.Choice(list(CATEGORY_SLUGS)),
    default=None,
    help="Only list records in this category",
)
@click.option(
    "--content-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory holding content.yaml",
)
def list_records(category: str | None, content_dir: str | None) -> None:
    """List glossary terms (by title) and guides."""
    setup_logging()
    corpus = _load(content_dir)

    if category:
        meta = get_category(category)
        if meta is not None:
            click.echo(f"{meta.title}: {meta.description}")
        terms = corpus.terms_in_category(category)
        guides = corpus.guides_in_category(category)
    else:
        terms = corpus.terms_by_title()
        guides = list(corpus.guides)

    click.echo(f"Glossary terms ({len(terms)}):")
    for term in terms:
        click.echo(f"  {term.slug}\t{term.title}")
    click.echo(f"Guides ({len(guides)}):")
    for guide in guides:
        click.echo(f"  {guide.slug}\t{guide.title}")

"""Seed expansion: authoring shorthand to canonical glossary terms.

Section layout is fixed. Every term opens with its definition, then adds
Formula, Example, "How to use it" and "Common mistakes" blocks in that
order, each only when the seed provides the source field.
"""

from metricdeck.models.blocks import (
    DEFINITION_HEADING,
    BulletListBlock,
    ContentBlock,
    HeadingBlock,
    ParagraphBlock,
)
from metricdeck.models.config import CollectionDefaults
from metricdeck.models.term import GlossaryTerm, TermSeed

FORMULA_HEADING = "Formula"
EXAMPLE_HEADING = "Example"
USAGE_HEADING = "How to use it"
MISTAKES_HEADING = "Common mistakes"


def _paragraph_pair(heading: str, text: str | None) -> list[ContentBlock]:
    if not text or not text.strip():
        return []
    return [HeadingBlock(text=heading), ParagraphBlock(text=text)]


def _bullets_pair(heading: str, items: tuple[str, ...]) -> list[ContentBlock]:
    if not items:
        return []
    return [HeadingBlock(text=heading), BulletListBlock(items=items)]


def build_sections(seed: TermSeed) -> tuple[ContentBlock, ...]:
    """Derive the ordered section blocks for a seed.

    Args:
        seed: Authored term seed

    Returns:
        Blocks in rendering order, starting with the Definition pair
    """
    sections: list[ContentBlock] = [
        HeadingBlock(text=DEFINITION_HEADING),
        ParagraphBlock(text=seed.description),
    ]
    sections.extend(_paragraph_pair(FORMULA_HEADING, seed.formula))
    sections.extend(_paragraph_pair(EXAMPLE_HEADING, seed.example))
    sections.extend(_bullets_pair(USAGE_HEADING, seed.bullets))
    sections.extend(_bullets_pair(MISTAKES_HEADING, seed.mistakes))
    return tuple(sections)


def expand_seed(seed: TermSeed, defaults: CollectionDefaults) -> GlossaryTerm:
    """Expand a seed into a canonical glossary term.

    Args:
        seed: Authored term seed
        defaults: Collection-level category and date fallbacks

    Returns:
        Canonical GlossaryTerm with materialized sections
    """
    return GlossaryTerm(
        slug=seed.slug,
        title=seed.title,
        description=seed.description,
        category=seed.category or defaults.category,
        updated_at=seed.updated_at or defaults.updated_at,
        sections=build_sections(seed),
        faqs=seed.faqs,
        related_guide_slugs=seed.related_guide_slugs,
        related_calculator_slugs=seed.related_calculator_slugs,
    )

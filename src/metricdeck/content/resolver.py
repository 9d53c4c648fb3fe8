"""Cross-reference resolution for a compiled corpus.

Terms point at guides (``relatedGuideSlugs``) and guides point at terms
(``relatedGlossarySlugs``). A reference to a slug that does not exist is a
content defect: lookups skip it so the rest of the page still renders, and
``validate_corpus`` collects every one of them for authors to fix.

Calculator identifiers belong to an external system and are passed through
without validation.
"""

from collections import defaultdict
from types import MappingProxyType

from metricdeck.lib.logging_config import get_logger
from metricdeck.models.corpus import Corpus, DanglingReference
from metricdeck.models.guide import Guide
from metricdeck.models.term import GlossaryTerm

logger = get_logger(__name__)

TERM_GUIDE_RELATION = "relatedGuideSlugs"
GUIDE_TERM_RELATION = "relatedGlossarySlugs"


class CrossReferenceResolver:
    """Resolves and validates slug references within a Corpus.

    The inverse ("what links to me") indexes are computed once at
    construction; the resolver holds no other state.
    """

    def __init__(self, corpus: Corpus) -> None:
        """Build inverse relation indexes for the given corpus."""
        self.corpus = corpus

        guides_by_term: dict[str, list[Guide]] = defaultdict(list)
        for guide in corpus.guides:
            for slug in dict.fromkeys(guide.related_glossary_slugs):
                guides_by_term[slug].append(guide)

        terms_by_guide: dict[str, list[GlossaryTerm]] = defaultdict(list)
        for term in corpus.terms:
            for slug in dict.fromkeys(term.related_guide_slugs):
                terms_by_guide[slug].append(term)

        self._guides_by_term = MappingProxyType(
            {slug: tuple(items) for slug, items in guides_by_term.items()}
        )
        self._terms_by_guide = MappingProxyType(
            {slug: tuple(items) for slug, items in terms_by_guide.items()}
        )

    def resolve_term_relations(self, term: GlossaryTerm) -> list[Guide]:
        """Return the guides a term references, in declaration order.

        Missing guide slugs are skipped and logged.
        """
        guides: list[Guide] = []
        for slug in term.related_guide_slugs:
            guide = self.corpus.get_guide(slug)
            if guide is None:
                logger.warning(
                    f"Term '{term.slug}' references missing guide '{slug}'"
                )
                continue
            guides.append(guide)
        return guides

    def resolve_guide_relations(self, guide: Guide) -> list[GlossaryTerm]:
        """Return the glossary terms a guide references, in declaration order.

        Missing term slugs are skipped and logged.
        """
        terms: list[GlossaryTerm] = []
        for slug in guide.related_glossary_slugs:
            term = self.corpus.get_term(slug)
            if term is None:
                logger.warning(
                    f"Guide '{guide.slug}' references missing glossary term '{slug}'"
                )
                continue
            terms.append(term)
        return terms

    def validate_corpus(self) -> list[DanglingReference]:
        """Collect every dangling reference in the corpus.

        Terms are checked first, then guides, each in corpus order and
        declaration order.

        Returns:
            All dangling references; empty for a well-formed corpus
        """
        dangling: list[DanglingReference] = []

        for term in self.corpus.terms:
            for slug in term.related_guide_slugs:
                if slug not in self.corpus.guide_index:
                    dangling.append(
                        DanglingReference(
                            source_kind="term",
                            source_slug=term.slug,
                            relation=TERM_GUIDE_RELATION,
                            target_slug=slug,
                        )
                    )

        for guide in self.corpus.guides:
            for slug in guide.related_glossary_slugs:
                if slug not in self.corpus.term_index:
                    dangling.append(
                        DanglingReference(
                            source_kind="guide",
                            source_slug=guide.slug,
                            relation=GUIDE_TERM_RELATION,
                            target_slug=slug,
                        )
                    )

        if dangling:
            logger.warning(f"Found {len(dangling)} dangling cross-reference(s)")
        else:
            logger.debug("No dangling cross-references found")
        return dangling

    def guides_linking_to_term(self, slug: str) -> tuple[Guide, ...]:
        """Guides whose relatedGlossarySlugs include the given term slug."""
        return self._guides_by_term.get(slug, ())

    def terms_linking_to_guide(self, slug: str) -> tuple[GlossaryTerm, ...]:
        """Terms whose relatedGuideSlugs include the given guide slug."""
        return self._terms_by_guide.get(slug, ())

    def calculator_slugs(self) -> list[str]:
        """Distinct calculator identifiers referenced anywhere, first-seen order.

        Collects term and guide ``relatedCalculatorSlugs`` and guide example
        ``calculatorSlug`` values, unresolved.
        """
        seen: dict[str, None] = {}
        for term in self.corpus.terms:
            seen.update(dict.fromkeys(term.related_calculator_slugs))
        for guide in self.corpus.guides:
            seen.update(dict.fromkeys(guide.related_calculator_slugs))
            seen.update(dict.fromkeys(ex.calculator_slug for ex in guide.examples))
        return list(seen)

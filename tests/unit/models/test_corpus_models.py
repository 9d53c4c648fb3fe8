"""Tests for the compiled Corpus and its report models."""

from collections.abc import Callable

import pytest

from metricdeck.content.compiler import build_corpus
from metricdeck.lib.errors import SlugNotFoundError
from metricdeck.models.corpus import (
    Corpus,
    DanglingReference,
    DuplicateSlug,
    GuideCollection,
    TermCollection,
)
from metricdeck.models.guide import Guide
from metricdeck.models.term import GlossaryTerm


@pytest.fixture
def corpus(
    make_term: Callable[..., GlossaryTerm],
    make_guide: Callable[..., Guide],
) -> Corpus:
    """Corpus spanning all three categories."""
    return build_corpus(
        [
            TermCollection(
                name="core",
                terms=(
                    make_term("mrr", title="MRR"),
                    make_term("arr", title="ARR"),
                    make_term("wacc", title="WACC", category="finance"),
                    make_term("cpc", title="cpc", category="paid-ads"),
                ),
            )
        ],
        [
            GuideCollection(
                name="guides",
                guides=(
                    make_guide("roas-guide", category="paid-ads"),
                    make_guide("arr-guide"),
                    make_guide("dcf-valuation-guide", category="finance"),
                ),
            )
        ],
    )


@pytest.mark.unit
class TestCorpusLookups:
    """Tests for Corpus lookup helpers."""

    def test_require_term(self, corpus: Corpus) -> None:
        """Test require_term returns the indexed record."""
        assert corpus.require_term("arr").title == "ARR"

    def test_require_term_missing(self, corpus: Corpus) -> None:
        """Test require_term raises on an unknown slug."""
        with pytest.raises(SlugNotFoundError) as exc_info:
            corpus.require_term("ltv")
        assert exc_info.value.slug == "ltv"

    def test_require_guide_missing(self, corpus: Corpus) -> None:
        """Test require_guide raises on an unknown slug."""
        with pytest.raises(SlugNotFoundError, match="No guide with slug 'mrr-guide'"):
            corpus.require_guide("mrr-guide")


@pytest.mark.unit
class TestCorpusListings:
    """Tests for sorted and category listings."""

    def test_terms_by_title_case_insensitive(self, corpus: Corpus) -> None:
        """Test glossary order is by title, ignoring case."""
        assert [t.title for t in corpus.terms_by_title()] == [
            "ARR",
            "cpc",
            "MRR",
            "WACC",
        ]

    def test_terms_by_title_leaves_corpus_order(self, corpus: Corpus) -> None:
        """Test sorting does not reorder the compiled terms."""
        corpus.terms_by_title()
        assert [t.slug for t in corpus.terms] == ["mrr", "arr", "wacc", "cpc"]

    def test_terms_in_category(self, corpus: Corpus) -> None:
        """Test category filtering keeps title order."""
        assert [t.slug for t in corpus.terms_in_category("saas-metrics")] == [
            "arr",
            "mrr",
        ]
        assert [t.slug for t in corpus.terms_in_category("finance")] == ["wacc"]

    def test_guides_in_category(self, corpus: Corpus) -> None:
        """Test guide category filtering keeps corpus order."""
        assert [g.slug for g in corpus.guides_in_category("paid-ads")] == [
            "roas-guide"
        ]


@pytest.mark.unit
class TestDefectDescriptions:
    """Tests for DuplicateSlug and DanglingReference descriptions."""

    def test_duplicate_describe(self) -> None:
        """Test duplicate description names both collections."""
        dup = DuplicateSlug(
            kind="term",
            slug="gross-margin",
            first_collection="finance",
            duplicate_collection="finance-extra",
        )
        assert dup.describe() == (
            "term 'gross-margin' in 'finance-extra' duplicates the one in 'finance'"
        )

    def test_dangling_describe_for_guide(self) -> None:
        """Test a guide's dangling reference names a missing glossary term."""
        ref = DanglingReference(
            source_kind="guide",
            source_slug="roas-guide",
            relation="relatedGlossarySlugs",
            target_slug="poas",
        )
        assert ref.describe() == (
            "guide 'roas-guide' references missing glossary term 'poas' "
            "(relatedGlossarySlugs)"
        )

"""Tests for the corpus compiler in metricdeck.content.compiler."""

import logging
from collections.abc import Callable

import pytest

from metricdeck.content.compiler import build_corpus
from metricdeck.lib.errors import DuplicateSlugError
from metricdeck.models.corpus import (
    DuplicatePolicy,
    GuideCollection,
    TermCollection,
)
from metricdeck.models.guide import Guide
from metricdeck.models.term import GlossaryTerm


@pytest.mark.unit
class TestBuildCorpus:
    """Tests for build_corpus ordering and indexing."""

    def test_collection_then_item_order(
        self, make_term: Callable[..., GlossaryTerm]
    ) -> None:
        """Test terms are ordered by collection, then by position within it."""
        corpus = build_corpus(
            [
                TermCollection(name="core", terms=(make_term("mrr"), make_term("arr"))),
                TermCollection(name="saas", terms=(make_term("cac"),)),
            ],
            [],
        )
        assert [t.slug for t in corpus.terms] == ["mrr", "arr", "cac"]

    def test_lookup_returns_same_record(
        self,
        make_term: Callable[..., GlossaryTerm],
        make_guide: Callable[..., Guide],
    ) -> None:
        """Test every compiled record is retrievable by its slug."""
        term = make_term("arr")
        guide = make_guide("arr-guide")
        corpus = build_corpus(
            [TermCollection(name="core", terms=(term,))],
            [GuideCollection(name="guides", guides=(guide,))],
        )

        assert corpus.get_term("arr") == term
        assert corpus.get_guide("arr-guide") == guide
        for t in corpus.terms:
            assert corpus.get_term(t.slug) is t
        for g in corpus.guides:
            assert corpus.get_guide(g.slug) is g

    def test_missing_slug_returns_none(
        self, make_term: Callable[..., GlossaryTerm]
    ) -> None:
        """Test lookup of an unknown slug is an absence, not an error."""
        corpus = build_corpus(
            [TermCollection(name="core", terms=(make_term("arr"),))], []
        )
        assert corpus.get_term("nope") is None
        assert corpus.get_guide("arr") is None

    def test_empty_collections(self) -> None:
        """Test compiling nothing yields an empty corpus."""
        corpus = build_corpus([], [])
        assert corpus.terms == ()
        assert corpus.guides == ()
        assert corpus.duplicates == ()

    def test_indexes_are_read_only(
        self, make_term: Callable[..., GlossaryTerm]
    ) -> None:
        """Test the slug index cannot be mutated after compilation."""
        corpus = build_corpus(
            [TermCollection(name="core", terms=(make_term("arr"),))], []
        )
        with pytest.raises(TypeError):
            corpus.term_index["mrr"] = make_term("mrr")  # type: ignore[index]

    def test_terms_and_guides_may_share_a_slug(
        self,
        make_term: Callable[..., GlossaryTerm],
        make_guide: Callable[..., Guide],
    ) -> None:
        """Test term and guide slug spaces are independent."""
        corpus = build_corpus(
            [TermCollection(name="core", terms=(make_term("roas"),))],
            [GuideCollection(name="guides", guides=(make_guide("roas"),))],
        )
        assert corpus.get_term("roas") is not None
        assert corpus.get_guide("roas") is not None


@pytest.mark.unit
class TestDuplicateSlugs:
    """Tests for duplicate slug detection and policies."""

    def test_error_policy_reports_collision(
        self, make_term: Callable[..., GlossaryTerm]
    ) -> None:
        """Test a term duplicated across collections yields one report."""
        with pytest.raises(DuplicateSlugError) as exc_info:
            build_corpus(
                [
                    TermCollection(
                        name="finance", terms=(make_term("gross-margin"),)
                    ),
                    TermCollection(
                        name="finance-extra", terms=(make_term("gross-margin"),)
                    ),
                ],
                [],
            )

        duplicates = exc_info.value.duplicates
        assert len(duplicates) == 1
        assert duplicates[0].kind == "term"
        assert duplicates[0].slug == "gross-margin"
        assert duplicates[0].first_collection == "finance"
        assert duplicates[0].duplicate_collection == "finance-extra"
        assert "gross-margin" in str(exc_info.value)

    def test_error_policy_collects_all_collisions(
        self,
        make_term: Callable[..., GlossaryTerm],
        make_guide: Callable[..., Guide],
    ) -> None:
        """Test every collision is reported, not just the first."""
        with pytest.raises(DuplicateSlugError) as exc_info:
            build_corpus(
                [
                    TermCollection(name="a", terms=(make_term("arr"), make_term("arr"))),
                    TermCollection(name="b", terms=(make_term("mrr"), make_term("mrr"))),
                ],
                [
                    GuideCollection(
                        name="guides",
                        guides=(make_guide("roas-guide"), make_guide("roas-guide")),
                    )
                ],
            )

        assert [(d.kind, d.slug) for d in exc_info.value.duplicates] == [
            ("term", "arr"),
            ("term", "mrr"),
            ("guide", "roas-guide"),
        ]
        assert "3 duplicate slug(s)" in str(exc_info.value)

    def test_error_is_default_policy(
        self, make_term: Callable[..., GlossaryTerm]
    ) -> None:
        """Test duplicates fail the build without an explicit policy."""
        with pytest.raises(DuplicateSlugError):
            build_corpus(
                [TermCollection(name="a", terms=(make_term("arr"), make_term("arr")))],
                [],
            )

    def test_last_wins_keeps_later_record(
        self,
        make_term: Callable[..., GlossaryTerm],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test last-wins keeps one record, the later one, at the first position."""
        first = make_term("gross-margin", title="Gross Margin (old)")
        later = make_term("gross-margin", title="Gross Margin", category="finance")

        with caplog.at_level(logging.WARNING, logger="metricdeck"):
            corpus = build_corpus(
                [
                    TermCollection(name="finance", terms=(first, make_term("wacc"))),
                    TermCollection(name="finance-extra", terms=(later,)),
                ],
                [],
                duplicate_policy=DuplicatePolicy.LAST_WINS,
            )

        assert [t.slug for t in corpus.terms] == ["gross-margin", "wacc"]
        assert corpus.get_term("gross-margin") == later
        assert len(corpus.duplicates) == 1
        assert "last wins" in caplog.text
        assert "gross-margin" in caplog.text

    def test_policy_accepts_string_value(
        self, make_term: Callable[..., GlossaryTerm]
    ) -> None:
        """Test the policy may be given by its string value."""
        corpus = build_corpus(
            [TermCollection(name="a", terms=(make_term("arr"), make_term("arr")))],
            [],
            duplicate_policy="last-wins",  # type: ignore[arg-type]
        )
        assert len(corpus.terms) == 1

    def test_no_duplicates_no_reports(
        self, make_term: Callable[..., GlossaryTerm]
    ) -> None:
        """Test a clean compile records no duplicates."""
        corpus = build_corpus(
            [TermCollection(name="a", terms=(make_term("arr"), make_term("mrr")))],
            [],
            duplicate_policy=DuplicatePolicy.LAST_WINS,
        )
        assert corpus.duplicates == ()

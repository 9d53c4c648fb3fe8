"""Build-time content report.

Aggregates every defect found in a compiled corpus so authors can fix them
in a single pass instead of one failed build at a time.
"""

from pydantic import BaseModel, ConfigDict, Field

from metricdeck.content.resolver import CrossReferenceResolver
from metricdeck.lib.errors import ContentIntegrityError
from metricdeck.models.corpus import Corpus, DanglingReference, DuplicateSlug


class ContentReport(BaseModel):
    """Defects found in a compiled corpus."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    term_count: int = Field(..., description="Number of compiled terms")
    guide_count: int = Field(..., description="Number of compiled guides")
    duplicates: tuple[DuplicateSlug, ...] = Field(
        default=(), description="Duplicate slugs resolved during compilation"
    )
    dangling_references: tuple[DanglingReference, ...] = Field(
        default=(), description="References to slugs that do not exist"
    )

    @property
    def ok(self) -> bool:
        """True when the corpus has no defects."""
        return not self.duplicates and not self.dangling_references

    def summary(self) -> str:
        """Multi-line human-readable summary of the report."""
        lines = [
            f"{self.term_count} terms, {self.guide_count} guides: "
            f"{len(self.duplicates)} duplicate slug(s), "
            f"{len(self.dangling_references)} dangling reference(s)"
        ]
        lines.extend(f"  - {dup.describe()}" for dup in self.duplicates)
        lines.extend(f"  - {ref.describe()}" for ref in self.dangling_references)
        return "\n".join(lines)

    def raise_for_defects(self) -> None:
        """Raise ContentIntegrityError if the report has any defect."""
        if not self.ok:
            raise ContentIntegrityError(self)


def build_report(
    corpus: Corpus, resolver: CrossReferenceResolver | None = None
) -> ContentReport:
    """Validate a corpus and collect all defects into a ContentReport."""
    resolver = resolver or CrossReferenceResolver(corpus)
    return ContentReport(
        term_count=len(corpus.terms),
        guide_count=len(corpus.guides),
        duplicates=corpus.duplicates,
        dangling_references=tuple(resolver.validate_corpus()),
    )

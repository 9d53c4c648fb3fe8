"""Custom exception hierarchy for metricdeck content loading and compilation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from metricdeck.content.report import ContentReport
    from metricdeck.models.corpus import DuplicateSlug


class MetricDeckError(Exception):
    """Base exception for all metricdeck errors.

    All metricdeck-specific exceptions inherit from this class, enabling
    centralized exception handling in build scripts and the CLI.
    """

    pass


class ConfigError(MetricDeckError):
    """Exception raised for configuration and authoring errors.

    Raised when a content file or the content manifest cannot be parsed, or
    when an authored record fails schema validation.

    Attributes:
        field: The configuration field or error code that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name or error code
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(MetricDeckError):
    """Exception raised when a content file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class DuplicateSlugError(MetricDeckError):
    """Exception raised when two records claim the same slug.

    Carries every collision found during compilation so authors can fix
    them in one pass.

    Attributes:
        duplicates: Duplicate slug reports, in discovery order
    """

    def __init__(self, duplicates: list[DuplicateSlug]) -> None:
        """Create a duplicate slug error from the collected reports."""
        self.duplicates = list(duplicates)
        lines = [f"  - {dup.describe()}" for dup in self.duplicates]
        super().__init__(
            f"Found {len(self.duplicates)} duplicate slug(s):\n" + "\n".join(lines)
        )


class SlugNotFoundError(MetricDeckError):
    """Exception raised when a required record lookup misses."""

    def __init__(self, kind: str, slug: str) -> None:
        """Create a lookup error for a term or guide slug."""
        self.kind = kind
        self.slug = slug
        super().__init__(f"No {kind} with slug '{slug}'")


class ContentIntegrityError(MetricDeckError):
    """Exception raised when a compiled corpus has content defects.

    Attributes:
        report: The ContentReport describing every defect found
    """

    def __init__(self, report: ContentReport) -> None:
        """Create an integrity error wrapping a content report."""
        self.report = report
        super().__init__(report.summary())

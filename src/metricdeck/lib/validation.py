"""Validation utilities for metricdeck.

This module provides the shared field validators used by the content models:
slug format, calendar date strings, and non-blank text.
"""

from __future__ import annotations

import re
from datetime import date

# Slug validation constants
SLUG_MAX_LENGTH = 96
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def validate_slug(slug: str) -> str:
    """Validate slug format.

    Slugs are permanent public identifiers and must:
    - Not be empty
    - Be 96 characters or less
    - Contain only lowercase letters, digits, and single hyphens
    - Not start or end with a hyphen

    Args:
        slug: The slug to validate

    Returns:
        The validated slug (unchanged if valid)

    Raises:
        ValueError: If slug is invalid
    """
    if not slug:
        raise ValueError("slug cannot be empty")
    if len(slug) > SLUG_MAX_LENGTH:
        raise ValueError(f"slug must be {SLUG_MAX_LENGTH} characters or less")
    if not SLUG_PATTERN.match(slug):
        raise ValueError(
            f"slug '{slug}' must be lowercase and hyphen-separated "
            "(letters, digits, and single hyphens only)"
        )
    return slug


def validate_date_string(value: str) -> str:
    """Validate a YYYY-MM-DD calendar date and return it unchanged."""
    try:
        parsed = date.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"'{value}' is not a valid YYYY-MM-DD date") from e
    if parsed.isoformat() != value:
        raise ValueError(f"'{value}' is not a valid YYYY-MM-DD date")
    return value


def validate_non_blank(value: str, field_name: str) -> str:
    """Reject empty or whitespace-only text."""
    if not value or not value.strip():
        raise ValueError(f"{field_name} must be non-empty")
    return value

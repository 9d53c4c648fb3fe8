"""Pydantic models for content blocks, terms, guides, and the corpus."""

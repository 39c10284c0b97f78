"""Slug pipeline — normalize, transliterate, tokenize, filter, assemble."""

from slugkit.pipeline.runner import slugify, transform

__all__ = ["slugify", "transform"]

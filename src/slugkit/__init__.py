"""slugkit — deterministic text-to-slug transformation.

>>> from slugkit import SlugOptions, transform
>>> transform("A guide to programming", SlugOptions(remove_stopwords=True))
'guide-programming'
"""

# Installs the stderr handler on the "slugkit" logger
from slugkit import logging as _logging  # noqa: F401
from slugkit.errors import ActionableError, ErrorType
from slugkit.options import DEFAULT_OPTIONS, SlugOptions
from slugkit.pipeline.runner import slugify, transform
from slugkit.stopwords import STOPWORDS

__all__ = [
    "DEFAULT_OPTIONS",
    "STOPWORDS",
    "ActionableError",
    "ErrorType",
    "SlugOptions",
    "slugify",
    "transform",
]

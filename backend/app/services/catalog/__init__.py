"""Municipal Draft Engine - Phrase Catalog

Static subject templates and boilerplate clauses, exposed through a
read-only PhraseCatalog.
"""
from .catalog import PhraseCatalog, get_catalog
from .phrases import (
    BLANK_FILL,
    CLOSERS,
    REFERENCE_TEMPLATE,
    SUBJECT_NOT_AVAILABLE,
    SUBJECT_TEMPLATES,
)

__all__ = [
    "PhraseCatalog",
    "get_catalog",
    "BLANK_FILL",
    "CLOSERS",
    "REFERENCE_TEMPLATE",
    "SUBJECT_NOT_AVAILABLE",
    "SUBJECT_TEMPLATES",
]

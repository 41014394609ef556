"""Municipal Draft Engine - Data Models"""
from .draft import (
    # Enums
    DocumentType, DRAFT_TYPES,
    # Catalog entries
    PhraseEntry, SubjectField, SubjectTemplate,
    # Render input
    BillDetails, DraftRecord,
)
from .draft_document import DraftDocument, SectionKind

__all__ = [
    "DocumentType", "DRAFT_TYPES",
    "PhraseEntry", "SubjectField", "SubjectTemplate",
    "BillDetails", "DraftRecord",
    "DraftDocument", "SectionKind",
]

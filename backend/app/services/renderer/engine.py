"""
Municipal Draft Engine - Rendering Engine

Takes a DocumentType and a DraftRecord and renders print-ready HTML.

Rendering is a pure function of its inputs:
- layouts build an ordered DraftDocument of section nodes
- a backend turns the sections into markup
- no clock, no randomness, no I/O

Only two conditions are fatal: an unknown document type, and a
house tax bill without bill_details. Catalog misses degrade to a
fallback string or omission.
"""
from __future__ import annotations
import logging
from typing import Optional, Union

from app.models.draft import DocumentType, DraftRecord
from app.models.draft_document import DraftDocument
from app.services.catalog import PhraseCatalog, get_catalog

from .errors import UnknownDocumentTypeError
from .html_backend import HtmlBackend
from .layouts import LAYOUTS, DraftLayout

logger = logging.getLogger(__name__)


def coerce_document_type(value: Union[DocumentType, str]) -> DocumentType:
    """Accept the enum or its string value; anything else is a construction error."""
    if isinstance(value, DocumentType):
        return value
    try:
        return DocumentType(value)
    except ValueError:
        raise UnknownDocumentTypeError(value) from None


class RenderingEngine:
    """
    Render municipal drafts from DraftRecords.

    Input: DocumentType + DraftRecord
    Output: HTML string

    The catalog and backend are injectable; both default to the
    process-wide read-only instances.
    """

    def __init__(self, catalog: Optional[PhraseCatalog] = None, backend: Optional[HtmlBackend] = None):
        self.catalog = catalog or get_catalog()
        self.backend = backend or HtmlBackend()

    def layout_for(self, document_type: Union[DocumentType, str]) -> DraftLayout:
        doc_type = coerce_document_type(document_type)
        return LAYOUTS[doc_type](self.catalog)

    def build(self, document_type: Union[DocumentType, str], record: DraftRecord) -> DraftDocument:
        """
        Build the section structure without producing markup.

        Raises:
            UnknownDocumentTypeError: document_type outside the enumeration
            MissingBillDetailsError: HOUSE_TAX_BILL without bill_details
        """
        return self.layout_for(document_type).build(record)

    def render(self, document_type: Union[DocumentType, str], record: DraftRecord) -> str:
        """
        Render a draft to HTML.

        Args:
            document_type: DocumentType (or its string value)
            record: validated DraftRecord

        Returns:
            Self-contained HTML fragment for display and printing
        """
        document = self.build(document_type, record)
        markup = self.backend.render(document)
        logger.info(
            f"Rendered {document.document_type.value} draft: "
            f"{len(document.sections)} sections, hash={document.content_hash()}"
        )
        return markup


# Singleton instance
_engine: Optional[RenderingEngine] = None


def get_engine() -> RenderingEngine:
    """Get the default rendering engine instance."""
    global _engine
    if _engine is None:
        _engine = RenderingEngine()
    return _engine


def render_draft(document_type: Union[DocumentType, str], record: DraftRecord) -> str:
    """
    Convenience function to render a draft with the default engine.

    Args:
        document_type: DocumentType (or its string value)
        record: validated DraftRecord

    Returns:
        HTML string
    """
    return get_engine().render(document_type, record)

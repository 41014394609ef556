"""Municipal Draft Engine - Rendering Engine

This layer takes a DocumentType + DraftRecord and renders print-ready HTML.
Layouts build section nodes; the HTML backend styles them.
"""
from .digits import format_amount, to_local_digits
from .engine import RenderingEngine, coerce_document_type, get_engine, render_draft
from .errors import DraftRenderError, MissingBillDetailsError, UnknownDocumentTypeError
from .html_backend import HtmlBackend
from .layouts import LAYOUTS

__all__ = [
    "RenderingEngine",
    "render_draft",
    "get_engine",
    "coerce_document_type",
    "HtmlBackend",
    "LAYOUTS",
    "to_local_digits",
    "format_amount",
    "DraftRenderError",
    "MissingBillDetailsError",
    "UnknownDocumentTypeError",
]

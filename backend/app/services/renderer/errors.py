"""Render-time errors. Only structural problems are fatal; catalog misses never are."""


class DraftRenderError(ValueError):
    """A render call cannot produce a complete document."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class UnknownDocumentTypeError(DraftRenderError):
    def __init__(self, value: object):
        super().__init__("document_type", f"document_type '{value}' is not a supported document type")


class MissingBillDetailsError(DraftRenderError):
    def __init__(self):
        super().__init__("bill_details", "bill_details is required to render a HOUSE_TAX_BILL")

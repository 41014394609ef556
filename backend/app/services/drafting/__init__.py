"""
Drafting Collaborator

Interface to the external generative-AI service plus the pure glue
around it:
- DraftingService: the port callers depend on (no vendor client ships)
- payload converters: collaborator JSON -> DraftRecord / results
- presets: record defaults for tax section drafts

The renderer never imports this package.
"""

from .port import (
    Attachment,
    ChatRole,
    ChatTurn,
    DocumentAnalysis,
    DraftSuggestion,
    DraftingService,
    DraftingServiceError,
    GeneratedDraft,
    RTIAnalysis,
    RTIPointAnalysis,
    RTIRecommendation,
)

from .payload import (
    analysis_from_payload,
    bill_from_payload,
    generated_draft_from_payload,
    record_from_payload,
    record_to_payload,
    rti_analysis_from_payload,
)

from .presets import (
    DEFAULT_OFFICE,
    OfficeProfile,
    demand_notice_record,
    financial_year,
    house_tax_bill_record,
    publication_notice_record,
)

__all__ = [
    # Port
    "Attachment",
    "ChatRole",
    "ChatTurn",
    "DocumentAnalysis",
    "DraftSuggestion",
    "DraftingService",
    "DraftingServiceError",
    "GeneratedDraft",
    "RTIAnalysis",
    "RTIPointAnalysis",
    "RTIRecommendation",
    # Payloads
    "analysis_from_payload",
    "bill_from_payload",
    "generated_draft_from_payload",
    "record_from_payload",
    "record_to_payload",
    "rti_analysis_from_payload",
    # Presets
    "DEFAULT_OFFICE",
    "OfficeProfile",
    "demand_notice_record",
    "financial_year",
    "house_tax_bill_record",
    "publication_notice_record",
]

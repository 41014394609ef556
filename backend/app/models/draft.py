"""
Municipal Draft Engine - Draft Record Models

These models are the ONLY data structures consumed by the renderer.
Form screens and the drafting collaborator produce a DraftRecord;
the renderer reads it once and never mutates it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class DocumentType(str, Enum):
    """Closed set of document variants - selects layout rules."""
    LETTER = "LETTER"  # पत्र
    ORDER = "ORDER"  # आदेश
    MEMO = "MEMO"  # कार्यालय ज्ञापन
    NOTE_SHEET = "NOTE_SHEET"  # नोटशीट
    PROPOSAL = "PROPOSAL"  # प्रस्ताव
    PUBLICATION_NOTICE = "PUBLICATION_NOTICE"  # प्रकाशन सूचना
    HOUSE_TAX_BILL = "HOUSE_TAX_BILL"  # गृहकर बिल
    DEMAND_NOTICE = "DEMAND_NOTICE"  # मांग पत्र


# Selector labels shown to the form layer, in display order
DRAFT_TYPES: List[Dict[str, str]] = [
    {"id": DocumentType.LETTER.value, "label": "शासकीय पत्र", "desc": "Official Letter"},
    {"id": DocumentType.ORDER.value, "label": "कार्यालय आदेश", "desc": "Office Order"},
    {"id": DocumentType.MEMO.value, "label": "कार्यालय ज्ञापन", "desc": "Office Memorandum"},
    {"id": DocumentType.PUBLICATION_NOTICE.value, "label": "प्रकाशन सूचना", "desc": "Publication Notice"},
    {"id": DocumentType.HOUSE_TAX_BILL.value, "label": "गृहकर बिल", "desc": "House Tax Bill"},
    {"id": DocumentType.DEMAND_NOTICE.value, "label": "मांग पत्र", "desc": "Demand Notice"},
    {"id": DocumentType.NOTE_SHEET.value, "label": "नोटशीट", "desc": "Note Sheet"},
    {"id": DocumentType.PROPOSAL.value, "label": "प्रस्ताव", "desc": "Proposal"},
]


# =============================================================================
# CATALOG ENTRIES
# =============================================================================

@dataclass(frozen=True)
class PhraseEntry:
    """A fixed boilerplate sentence keyed by a stable id."""
    id: str
    text: str


@dataclass(frozen=True)
class SubjectField:
    """One placeholder of a subject template, as the form layer shows it."""
    key: str
    label: str
    placeholder: str = ""
    input_type: str = "text"  # text | date | select
    options: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SubjectTemplate:
    """
    Parametrized one-line subject.

    template uses {key} placeholders, one per entry in fields.
    """
    id: str
    label: str
    template: str
    fields: Tuple[SubjectField, ...] = ()

    @property
    def field_keys(self) -> Tuple[str, ...]:
        return tuple(f.key for f in self.fields)


# Optional text left as None reads as empty
def _none_to_empty(instance, names: Tuple[str, ...]) -> None:
    for name in names:
        if getattr(instance, name) is None:
            object.__setattr__(instance, name, "")


_BILL_TEXT_FIELDS = (
    "taxpayer_name", "parent_or_spouse_name", "house_number", "locality",
    "ward_number", "total_in_words", "description",
)

_RECORD_TEXT_FIELDS = (
    "issuing_body", "sub_office", "location", "reference_number", "issue_date",
    "prior_reference_number", "prior_reference_date", "subject_template_id",
    "recipient_name", "recipient_office", "sender_name", "sender_designation",
    "opening_phrase_id", "body_text", "rule_clause_id", "decision_clause_id",
)


# =============================================================================
# BILL DETAILS (HOUSE_TAX_BILL only)
# =============================================================================

@dataclass(frozen=True)
class BillDetails:
    """
    House tax bill figures.

    The four derived amounts and total_in_words are computed upstream
    (see services.billing); the renderer only formats them.
    """
    taxpayer_name: str
    parent_or_spouse_name: str
    house_number: str
    locality: str
    ward_number: str
    annual_valuation: float
    arrears: float
    interest_rate: float
    house_tax: float
    water_tax: float
    interest: float
    total_amount: float
    total_in_words: str = ""
    description: str = ""

    def __post_init__(self):
        _none_to_empty(self, _BILL_TEXT_FIELDS)


# =============================================================================
# DRAFT RECORD
# =============================================================================

@dataclass(frozen=True)
class DraftRecord:
    """
    The single input to rendering.

    Required: issuing_body, subject_template_id, sender_name,
    sender_designation. Everything else is optional and degrades
    to omission when empty.
    """
    issuing_body: str
    subject_template_id: str
    sender_name: str
    sender_designation: str

    sub_office: str = ""
    location: str = ""
    reference_number: str = ""
    issue_date: str = ""

    # Prior reference
    has_prior_reference: bool = False
    prior_reference_number: str = ""
    prior_reference_date: str = ""

    subject_field_values: Mapping[str, str] = field(default_factory=dict)

    # Addressee (LETTER, PROPOSAL, DEMAND_NOTICE only)
    recipient_name: str = ""
    recipient_office: str = ""

    # Body composition
    opening_phrase_id: str = ""
    body_text: str = ""
    rule_clause_id: str = ""
    decision_clause_id: str = ""

    cc_list: Tuple[str, ...] = ()

    bill_details: Optional[BillDetails] = None

    def __post_init__(self):
        """Freeze the mutable inputs so a render call cannot observe changes."""
        _none_to_empty(self, _RECORD_TEXT_FIELDS)
        object.__setattr__(
            self, "subject_field_values",
            MappingProxyType(dict(self.subject_field_values or {})),
        )
        object.__setattr__(self, "cc_list", tuple(self.cc_list or ()))

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        bill = self.bill_details
        return {
            "issuing_body": self.issuing_body,
            "sub_office": self.sub_office,
            "location": self.location,
            "reference_number": self.reference_number,
            "issue_date": self.issue_date,
            "has_prior_reference": self.has_prior_reference,
            "prior_reference_number": self.prior_reference_number,
            "prior_reference_date": self.prior_reference_date,
            "subject_template_id": self.subject_template_id,
            "subject_field_values": dict(self.subject_field_values),
            "recipient_name": self.recipient_name,
            "recipient_office": self.recipient_office,
            "sender_name": self.sender_name,
            "sender_designation": self.sender_designation,
            "opening_phrase_id": self.opening_phrase_id,
            "body_text": self.body_text,
            "rule_clause_id": self.rule_clause_id,
            "decision_clause_id": self.decision_clause_id,
            "cc_list": list(self.cc_list),
            "bill_details": None if bill is None else {
                "taxpayer_name": bill.taxpayer_name,
                "parent_or_spouse_name": bill.parent_or_spouse_name,
                "house_number": bill.house_number,
                "locality": bill.locality,
                "ward_number": bill.ward_number,
                "annual_valuation": bill.annual_valuation,
                "arrears": bill.arrears,
                "interest_rate": bill.interest_rate,
                "house_tax": bill.house_tax,
                "water_tax": bill.water_tax,
                "interest": bill.interest,
                "total_amount": bill.total_amount,
                "total_in_words": bill.total_in_words,
                "description": bill.description,
            },
        }

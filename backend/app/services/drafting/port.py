"""
Drafting Collaborator Port

The generative-AI service is an external collaborator. Callers depend
on this interface; the rendering core does not depend on it at all.

A concrete client (any model vendor) implements DraftingService and is
injected at the application edge (app.state.drafting_service).
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence, runtime_checkable

from app.models.draft import DocumentType, DraftRecord


class DraftingServiceError(RuntimeError):
    """The collaborator failed or returned something unusable."""


class RTIRecommendation(str, Enum):
    DENY = "DENY"
    PROVIDE_LIMITED = "PROVIDE_LIMITED"
    PROVIDE_FULL = "PROVIDE_FULL"


class ChatRole(str, Enum):
    USER = "user"
    ADVISOR = "advisor"


@dataclass(frozen=True)
class Attachment:
    """An uploaded photo or PDF, already decoded to bytes."""
    data: bytes
    mime_type: str = "image/jpeg"


@dataclass(frozen=True)
class DraftSuggestion:
    """One follow-up action proposed after reading a document."""
    label: str
    description: str
    action_type: DocumentType
    intent: str


@dataclass(frozen=True)
class DocumentAnalysis:
    summary: str
    suggestions: List[DraftSuggestion] = field(default_factory=list)


@dataclass(frozen=True)
class GeneratedDraft:
    """A complete record plus the document type it should be rendered as."""
    document_type: DocumentType
    record: DraftRecord


@dataclass(frozen=True)
class RTIPointAnalysis:
    question: str
    recommendation: RTIRecommendation
    exemption_section: str
    reasoning: str
    suggested_response_text: str


@dataclass(frozen=True)
class RTIAnalysis:
    overall_summary: str
    analysis: List[RTIPointAnalysis] = field(default_factory=list)


@dataclass(frozen=True)
class ChatTurn:
    role: ChatRole
    text: str


@runtime_checkable
class DraftingService(Protocol):
    """Everything the application asks of the generative-AI collaborator."""

    def analyze_document(self, attachment: Attachment) -> DocumentAnalysis:
        """Summarize an uploaded letter and suggest follow-up drafts."""
        ...

    def draft_from_instruction(self, instruction: str) -> GeneratedDraft:
        """Produce a complete draft from a free-text instruction."""
        ...

    def draft_from_document(self, attachment: Attachment, instruction: str) -> GeneratedDraft:
        """Produce a complete draft from an uploaded document plus an instruction."""
        ...

    def update_draft(self, record: DraftRecord, instruction: str) -> DraftRecord:
        """Revise an existing record according to an instruction."""
        ...

    def advise(self, history: Sequence[ChatTurn], message: str) -> str:
        """Legal-advisory chat reply for the next user message."""
        ...

    def analyze_rti_query(self, query_text: str, attachment: Optional[Attachment] = None) -> RTIAnalysis:
        """Point-by-point RTI response strategy."""
        ...

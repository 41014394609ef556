"""
Municipal Draft Engine - Drafts API Router

Renders drafts from form data, exposes the phrase catalog to the form
layer, computes house tax bills, and forwards assistant requests to the
injected drafting collaborator.
"""
from __future__ import annotations
import base64
import binascii
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from ..models import DRAFT_TYPES, BillDetails, DocumentType, DraftRecord
from ..services.billing import DEFAULT_INTEREST_RATE, compute_house_tax_bill
from ..services.catalog import CLOSERS, get_catalog
from ..services.drafting import (
    Attachment,
    ChatRole,
    ChatTurn,
    DraftingService,
    DraftingServiceError,
    demand_notice_record,
    house_tax_bill_record,
    publication_notice_record,
)
from ..services.renderer import DraftRenderError, coerce_document_type, get_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/drafts", tags=["drafts"])


# =============================================================================
# PYDANTIC MODELS FOR API
# =============================================================================

class BillDetailsModel(BaseModel):
    taxpayer_name: str
    parent_or_spouse_name: str = ""
    house_number: str = ""
    locality: str = ""
    ward_number: str = ""
    annual_valuation: float = 0
    arrears: float = 0
    interest_rate: float = 0
    house_tax: float = 0
    water_tax: float = 0
    interest: float = 0
    total_amount: float = 0
    total_in_words: str = ""
    description: str = ""

    def to_bill(self) -> BillDetails:
        return BillDetails(**self.model_dump())

    @classmethod
    def from_bill(cls, bill: BillDetails) -> "BillDetailsModel":
        return cls(**{name: getattr(bill, name) for name in cls.model_fields})


class DraftRecordModel(BaseModel):
    issuing_body: str
    subject_template_id: str
    sender_name: str
    sender_designation: str
    sub_office: str = ""
    location: str = ""
    reference_number: str = ""
    issue_date: str = ""
    has_prior_reference: bool = False
    prior_reference_number: str = ""
    prior_reference_date: str = ""
    subject_field_values: Dict[str, str] = Field(default_factory=dict)
    recipient_name: str = ""
    recipient_office: str = ""
    opening_phrase_id: str = ""
    body_text: str = ""
    rule_clause_id: str = ""
    decision_clause_id: str = ""
    cc_list: List[str] = Field(default_factory=list)
    bill_details: Optional[BillDetailsModel] = None

    def to_record(self) -> DraftRecord:
        data = self.model_dump(exclude={"bill_details", "cc_list"})
        return DraftRecord(
            cc_list=tuple(self.cc_list),
            bill_details=self.bill_details.to_bill() if self.bill_details else None,
            **data,
        )

    @classmethod
    def from_record(cls, record: DraftRecord) -> "DraftRecordModel":
        return cls(**record.to_dict())


class RenderRequest(BaseModel):
    document_type: str = Field(..., description="One of the DocumentType values")
    record: DraftRecordModel


class RenderResponse(BaseModel):
    document_type: str
    html: str


class HouseTaxRequest(BaseModel):
    taxpayer_name: str
    parent_or_spouse_name: str = ""
    house_number: str = ""
    locality: str = ""
    ward_number: str = ""
    annual_valuation: float = Field(..., ge=0)
    arrears: float = Field(0, ge=0)
    interest_rate: float = Field(float(DEFAULT_INTEREST_RATE), ge=0)
    description: str = ""


class HouseTaxBillRequest(BaseModel):
    bill: HouseTaxRequest
    bill_number: str = ""
    issue_date: str = ""
    start_year: Optional[int] = Field(None, ge=1900, le=9998)


class PublicationNoticeRequest(BaseModel):
    body_text: str = Field(..., min_length=1)
    applicant_name: str
    applicant_father_name: str
    locality: str
    issue_date: str = ""
    start_year: int = Field(..., ge=1900, le=9998)


class DemandNoticeRequest(BaseModel):
    body_text: str = ""
    taxpayer_name: str
    address: str
    bill_reference_number: str
    bill_reference_date: str
    amount_due: str
    dispatch_number: str = ""
    issue_date: str = ""
    cc_list: Optional[List[str]] = None


class AttachmentModel(BaseModel):
    data_base64: str
    mime_type: str = "image/jpeg"

    def to_attachment(self) -> Attachment:
        try:
            data = base64.b64decode(self.data_base64, validate=True)
        except (binascii.Error, ValueError):
            raise HTTPException(status_code=400, detail="Attachment is not valid base64")
        return Attachment(data=data, mime_type=self.mime_type)


class AnalyzeRequest(BaseModel):
    attachment: AttachmentModel


class InstructionRequest(BaseModel):
    instruction: str = Field(..., min_length=1)
    attachment: Optional[AttachmentModel] = None


class UpdateRequest(BaseModel):
    record: DraftRecordModel
    instruction: str = Field(..., min_length=1)


class ChatTurnModel(BaseModel):
    role: ChatRole
    text: str


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    history: List[ChatTurnModel] = Field(default_factory=list)


class RTIRequest(BaseModel):
    query_text: str = ""
    attachment: Optional[AttachmentModel] = None


class GeneratedDraftResponse(BaseModel):
    document_type: str
    record: DraftRecordModel
    html: str


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_drafting_service(request: Request) -> DraftingService:
    """Dependency - the collaborator injected at startup, or 503."""
    service = getattr(request.app.state, "drafting_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Drafting assistant is not configured")
    return service


def render_or_422(document_type, record: DraftRecord) -> str:
    try:
        return get_engine().render(document_type, record)
    except DraftRenderError as e:
        logger.warning(f"Render rejected ({e.field}): {e}")
        raise HTTPException(status_code=422, detail=str(e))


def generated_response(document_type: DocumentType, record: DraftRecord) -> GeneratedDraftResponse:
    return GeneratedDraftResponse(
        document_type=document_type.value,
        record=DraftRecordModel.from_record(record),
        html=render_or_422(document_type, record),
    )


def collaborator_error(e: DraftingServiceError) -> HTTPException:
    logger.error(f"Drafting collaborator failed: {e}")
    return HTTPException(status_code=502, detail=str(e))


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.get("/types")
async def list_document_types():
    """Document types in selector order."""
    return DRAFT_TYPES


@router.get("/catalog")
async def get_phrase_catalog():
    """Subject templates and clause choices for the form layer."""
    catalog = get_catalog()
    return {
        "subject_templates": [
            {
                "id": t.id,
                "label": t.label,
                "template": t.template,
                "fields": [
                    {
                        "key": f.key,
                        "label": f.label,
                        "placeholder": f.placeholder,
                        "type": f.input_type,
                        "options": list(f.options),
                    }
                    for f in t.fields
                ],
            }
            for t in catalog.list_subject_templates()
        ],
        "openers": {
            dt.value: [{"id": p.id, "text": p.text} for p in catalog.list_openers(dt)]
            for dt in DocumentType
        },
        "closers": {
            dt.value: [{"id": p.id, "text": p.text} for p in CLOSERS.get(dt, ())]
            for dt in DocumentType
        },
        "rules": [{"id": p.id, "text": p.text} for p in catalog.list_rule_clauses()],
        "decisions": [{"id": p.id, "text": p.text} for p in catalog.list_decision_clauses()],
        "ending": {"id": catalog.ending_id, "text": catalog.find_ending()},
    }


@router.post("/render", response_model=RenderResponse)
async def render_draft_endpoint(request: RenderRequest):
    """Render a validated record into print-ready HTML."""
    try:
        document_type = coerce_document_type(request.document_type)
    except DraftRenderError as e:
        raise HTTPException(status_code=422, detail=str(e))
    html = render_or_422(document_type, request.record.to_record())
    return RenderResponse(document_type=document_type.value, html=html)


@router.post("/house-tax/compute", response_model=BillDetailsModel)
async def compute_house_tax(request: HouseTaxRequest):
    """Compute house tax, water tax, interest, total and total-in-words."""
    try:
        bill = compute_house_tax_bill(**request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return BillDetailsModel.from_bill(bill)


@router.post("/house-tax/bill", response_model=GeneratedDraftResponse)
async def issue_house_tax_bill(request: HouseTaxBillRequest):
    """Compute a bill and render it with the tax section's office defaults."""
    try:
        bill = compute_house_tax_bill(**request.bill.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    record = house_tax_bill_record(
        bill,
        bill_number=request.bill_number,
        issue_date=request.issue_date,
        start_year=request.start_year,
    )
    return generated_response(DocumentType.HOUSE_TAX_BILL, record)


@router.post("/notices/publication", response_model=GeneratedDraftResponse)
async def issue_publication_notice(request: PublicationNoticeRequest):
    """Section 147 publication notice around the supplied prose."""
    record = publication_notice_record(**request.model_dump())
    return generated_response(DocumentType.PUBLICATION_NOTICE, record)


@router.post("/notices/demand", response_model=GeneratedDraftResponse)
async def issue_demand_notice(request: DemandNoticeRequest):
    """Demand notice to a taxpayer, referencing the original bill."""
    data = request.model_dump(exclude={"cc_list"})
    cc_list = None if request.cc_list is None else tuple(request.cc_list)
    record = demand_notice_record(cc_list=cc_list, **data)
    return generated_response(DocumentType.DEMAND_NOTICE, record)


@router.post("/assist/analyze")
def analyze_document(
    request: AnalyzeRequest,
    service: DraftingService = Depends(get_drafting_service),
):
    """Summarize an uploaded letter and suggest follow-up drafts."""
    try:
        analysis = service.analyze_document(request.attachment.to_attachment())
    except DraftingServiceError as e:
        raise collaborator_error(e)
    return {
        "summary": analysis.summary,
        "suggestions": [
            {
                "label": s.label,
                "description": s.description,
                "action_type": s.action_type.value,
                "intent": s.intent,
            }
            for s in analysis.suggestions
        ],
    }


@router.post("/assist/generate", response_model=GeneratedDraftResponse)
def generate_draft(
    request: InstructionRequest,
    service: DraftingService = Depends(get_drafting_service),
):
    """Generate a full draft from an instruction, optionally grounded on an upload."""
    try:
        if request.attachment is not None:
            draft = service.draft_from_document(request.attachment.to_attachment(), request.instruction)
        else:
            draft = service.draft_from_instruction(request.instruction)
    except DraftingServiceError as e:
        raise collaborator_error(e)
    return generated_response(draft.document_type, draft.record)


@router.post("/assist/update", response_model=DraftRecordModel)
def update_draft(
    request: UpdateRequest,
    service: DraftingService = Depends(get_drafting_service),
):
    """Revise an existing record according to an instruction."""
    try:
        record = service.update_draft(request.record.to_record(), request.instruction)
    except DraftingServiceError as e:
        raise collaborator_error(e)
    return DraftRecordModel.from_record(record)


@router.post("/assist/chat")
def advisory_chat(
    request: ChatRequest,
    service: DraftingService = Depends(get_drafting_service),
):
    """Legal-advisory chat turn."""
    history = [ChatTurn(role=t.role, text=t.text) for t in request.history]
    try:
        reply = service.advise(history, request.message)
    except DraftingServiceError as e:
        raise collaborator_error(e)
    return {"role": ChatRole.ADVISOR.value, "text": reply}


@router.post("/assist/rti")
def analyze_rti(
    request: RTIRequest,
    service: DraftingService = Depends(get_drafting_service),
):
    """Point-by-point RTI response strategy."""
    if not request.query_text.strip() and request.attachment is None:
        raise HTTPException(status_code=400, detail="Provide query_text or an attachment")
    attachment = request.attachment.to_attachment() if request.attachment else None
    try:
        result = service.analyze_rti_query(request.query_text, attachment)
    except DraftingServiceError as e:
        raise collaborator_error(e)
    return {
        "overall_summary": result.overall_summary,
        "analysis": [
            {
                "question": p.question,
                "recommendation": p.recommendation.value,
                "exemption_section": p.exemption_section,
                "reasoning": p.reasoning,
                "suggested_response_text": p.suggested_response_text,
            }
            for p in result.analysis
        ],
    }

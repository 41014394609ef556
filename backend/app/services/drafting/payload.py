"""
Collaborator Payload Conversion

The drafting collaborator answers in JSON shaped like the form data
(camelCase keys such as departmentName, factText, copyTo). These
helpers turn that JSON into core records. snake_case keys matching
DraftRecord fields are accepted as well.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping

from app.models.draft import BillDetails, DocumentType, DraftRecord

from .port import (
    DocumentAnalysis,
    DraftSuggestion,
    DraftingServiceError,
    GeneratedDraft,
    RTIAnalysis,
    RTIPointAnalysis,
    RTIRecommendation,
)

logger = logging.getLogger(__name__)

# Form-data key -> DraftRecord field
RECORD_KEYS: Dict[str, str] = {
    "departmentName": "issuing_body",
    "officeName": "sub_office",
    "location": "location",
    "dispatchNo": "reference_number",
    "date": "issue_date",
    "hasReference": "has_prior_reference",
    "refLetterNo": "prior_reference_number",
    "refDate": "prior_reference_date",
    "subjectTemplateId": "subject_template_id",
    "subjectData": "subject_field_values",
    "addresseeName": "recipient_name",
    "addresseeDept": "recipient_office",
    "senderName": "sender_name",
    "senderDesignation": "sender_designation",
    "introType": "opening_phrase_id",
    "factText": "body_text",
    "ruleText": "rule_clause_id",
    "decisionType": "decision_clause_id",
    "copyTo": "cc_list",
    "billData": "bill_details",
}

BILL_KEYS: Dict[str, str] = {
    "taxpayerName": "taxpayer_name",
    "fatherHusbandName": "parent_or_spouse_name",
    "houseNo": "house_number",
    "mohalla": "locality",
    "wardNo": "ward_number",
    "annualValuation": "annual_valuation",
    "arrears": "arrears",
    "interestRate": "interest_rate",
    "description": "description",
    "houseTax": "house_tax",
    "waterTax": "water_tax",
    "interest": "interest",
    "totalAmount": "total_amount",
    "totalInWords": "total_in_words",
}

_BILL_NUMBERS = {
    "annual_valuation", "arrears", "interest_rate",
    "house_tax", "water_tax", "interest", "total_amount",
}


def _normalize(payload: Mapping[str, Any], keys: Mapping[str, str]) -> Dict[str, Any]:
    known = set(keys.values())
    normalized: Dict[str, Any] = {}
    for key, value in payload.items():
        target = keys.get(key, key)
        if target in known:
            normalized[target] = value
    return normalized


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


_TRUE_WORDS = {"true", "yes", "1", "y", "on"}
_FALSE_WORDS = {"false", "no", "0", "n", "off", ""}


def _flag(value: Any) -> bool:
    """JSON booleans pass through; "true" / "false" style strings are parsed, not truth-tested."""
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise DraftingServiceError(f"hasReference must be a boolean, got {value!r}")
    return bool(value)


def bill_from_payload(payload: Mapping[str, Any]) -> BillDetails:
    """Build BillDetails from collaborator JSON; numbers may arrive as strings."""
    data = _normalize(payload, BILL_KEYS)
    try:
        numbers = {name: float(data.get(name) or 0) for name in _BILL_NUMBERS}
    except (TypeError, ValueError) as e:
        raise DraftingServiceError(f"Invalid bill amount in payload: {e}") from e
    return BillDetails(
        taxpayer_name=_text(data.get("taxpayer_name")),
        parent_or_spouse_name=_text(data.get("parent_or_spouse_name")),
        house_number=_text(data.get("house_number")),
        locality=_text(data.get("locality")),
        ward_number=_text(data.get("ward_number")),
        total_in_words=_text(data.get("total_in_words")),
        description=_text(data.get("description")),
        **numbers,
    )


def record_from_payload(payload: Mapping[str, Any]) -> DraftRecord:
    """
    Build a DraftRecord from collaborator JSON.

    Unknown keys are ignored. Missing strings become empty; the
    renderer degrades them to omission or blank-fill.
    """
    if not isinstance(payload, Mapping):
        raise DraftingServiceError("Draft payload must be a JSON object")

    data = _normalize(payload, RECORD_KEYS)

    bill = data.pop("bill_details", None)
    subject_values = data.pop("subject_field_values", None) or {}
    cc_list = data.pop("cc_list", None) or []
    has_reference = _flag(data.pop("has_prior_reference", False))

    if not isinstance(subject_values, Mapping):
        raise DraftingServiceError("subjectData must be an object")
    if isinstance(cc_list, str):
        cc_list = [cc_list]

    fields = {name: _text(value) for name, value in data.items()}
    fields.setdefault("issuing_body", "")
    fields.setdefault("subject_template_id", "GENERAL")
    fields.setdefault("sender_name", "")
    fields.setdefault("sender_designation", "")

    return DraftRecord(
        has_prior_reference=has_reference,
        subject_field_values={str(k): _text(v) for k, v in subject_values.items()},
        cc_list=tuple(_text(c) for c in cc_list),
        bill_details=bill_from_payload(bill) if isinstance(bill, Mapping) else None,
        **fields,
    )


def document_type_from_payload(value: Any) -> DocumentType:
    try:
        return DocumentType(value)
    except ValueError:
        # Older collaborator prompts use these names
        legacy = {"PRAKASHAN": DocumentType.PUBLICATION_NOTICE, "HOUSE_TAX": DocumentType.HOUSE_TAX_BILL}
        if value in legacy:
            return legacy[value]
        raise DraftingServiceError(f"Unsupported document type from collaborator: {value!r}") from None


def generated_draft_from_payload(payload: Mapping[str, Any]) -> GeneratedDraft:
    """Parse {"type": ..., "data": {...}} into a GeneratedDraft."""
    if not isinstance(payload, Mapping) or "data" not in payload:
        raise DraftingServiceError("Generated draft payload must contain 'type' and 'data'")
    return GeneratedDraft(
        document_type=document_type_from_payload(payload.get("type")),
        record=record_from_payload(payload["data"]),
    )


def analysis_from_payload(payload: Mapping[str, Any]) -> DocumentAnalysis:
    suggestions: List[DraftSuggestion] = []
    for item in payload.get("suggestions") or []:
        try:
            suggestions.append(DraftSuggestion(
                label=_text(item.get("label")),
                description=_text(item.get("description")),
                action_type=document_type_from_payload(item.get("actionType", item.get("action_type"))),
                intent=_text(item.get("intent")),
            ))
        except DraftingServiceError as e:
            logger.warning(f"Skipping suggestion: {e}")
    return DocumentAnalysis(summary=_text(payload.get("summary")), suggestions=suggestions)


def rti_analysis_from_payload(payload: Mapping[str, Any]) -> RTIAnalysis:
    points: List[RTIPointAnalysis] = []
    for item in payload.get("analysis") or []:
        raw = _text(item.get("recommendation")).upper()
        try:
            recommendation = RTIRecommendation(raw)
        except ValueError:
            raise DraftingServiceError(f"Unknown RTI recommendation: {raw!r}") from None
        points.append(RTIPointAnalysis(
            question=_text(item.get("question")),
            recommendation=recommendation,
            exemption_section=_text(item.get("exemption_section")),
            reasoning=_text(item.get("reasoning")),
            suggested_response_text=_text(item.get("suggested_response_text")),
        ))
    return RTIAnalysis(overall_summary=_text(payload.get("overall_summary")), analysis=points)


def record_to_payload(record: DraftRecord) -> Dict[str, Any]:
    """Inverse of record_from_payload, for sending the current draft back to the collaborator."""
    reverse = {v: k for k, v in RECORD_KEYS.items()}
    bill_reverse = {v: k for k, v in BILL_KEYS.items()}
    data = record.to_dict()
    payload: Dict[str, Any] = {}
    for name, value in data.items():
        if name == "bill_details" and value is not None:
            value = {bill_reverse[k]: v for k, v in value.items()}
        payload[reverse[name]] = value
    return payload

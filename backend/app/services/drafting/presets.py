"""
Draft Presets

Record defaults that the municipal tax section attaches to drafts whose
prose comes from the drafting collaborator: publication notices,
house tax bills and demand notices.

Presets are pure: dates, dispatch numbers and financial years are
arguments, never read from the clock. The /drafts/house-tax/bill and
/drafts/notices/* routes use them directly; collaborator clients use
them to wrap generated prose.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from app.models.draft import BillDetails, DraftRecord


@dataclass(frozen=True)
class OfficeProfile:
    """Issuing office identity printed on tax section drafts."""
    issuing_body: str = "नगर पालिका परिषद, महोबा"
    sub_office: str = "कर विभाग"
    location: str = "महोबा"
    signatory: str = "अधिशासी अधिकारी"
    signatory_designation: str = "नगर पालिका परिषद महोबा"


DEFAULT_OFFICE = OfficeProfile()

# Demand notices always carry the strict-warning decision
DEMAND_NOTICE_OPENER = "REF_BASED"
DEMAND_NOTICE_RULE = "RULE_GEN"
DEMAND_NOTICE_DECISION = "DEC_STRICT"
DEMAND_NOTICE_CC = ("संबंधित वार्ड प्रभारी, वसूली सुनिश्चित करने हेतु।",)

PUBLICATION_NOTICE_BOARD_CC = "पालिका के नोटिस बोर्ड पर चस्पा करने हेतु।"


def financial_year(start_year: int) -> str:
    """'2025-26' style label for the year starting in start_year."""
    return f"{start_year}-{str(start_year + 1)[-2:]}"


def publication_notice_record(
    body_text: str,
    applicant_name: str,
    applicant_father_name: str,
    locality: str,
    issue_date: str,
    start_year: int,
    office: OfficeProfile = DEFAULT_OFFICE,
) -> DraftRecord:
    """
    Publication notice (section 147) around collaborator-composed prose.

    The applicant is asked to publish the notice in a newspaper at their
    own cost; a second copy goes to the notice board.
    """
    applicant = f"{applicant_name} पुत्र श्री {applicant_father_name}"
    town = office.location
    return DraftRecord(
        issuing_body=f"कार्यालय {office.issuing_body.replace(',', '')}",
        sub_office=office.sub_office,
        location=town,
        reference_number=f"मे.मो./{office.sub_office}/न०पा०प०{town}/{financial_year(start_year)}",
        issue_date=issue_date,
        subject_template_id="GENERAL",
        subject_field_values={"subject": "प्रकाशन सूचना"},
        sender_name=office.signatory,
        sender_designation=office.signatory_designation,
        opening_phrase_id="GENERAL",
        body_text=body_text,
        rule_clause_id="RULE_GEN",
        decision_clause_id="DEC_FWD",
        cc_list=(
            f"श्री {applicant}, निवासी-{locality}, {town} इस आशय से कि किसी प्रचलित "
            "समाचार-पत्र में अपने व्यय से प्रकाशित कराते हुए एक प्रति पालिका कार्यालय में उपलब्ध करायें।",
            PUBLICATION_NOTICE_BOARD_CC,
        ),
    )


def house_tax_bill_record(
    bill: BillDetails,
    bill_number: str,
    issue_date: str,
    start_year: Optional[int] = None,
    office: OfficeProfile = DEFAULT_OFFICE,
) -> DraftRecord:
    """
    House tax bill record; figures come from services.billing.

    A bill without a description gets the financial-year line
    ("वित्तीय वर्ष 2025-26") when start_year is given.
    """
    if not bill.description.strip() and start_year is not None:
        bill = replace(bill, description=f"वित्तीय वर्ष {financial_year(start_year)}")
    return DraftRecord(
        issuing_body=office.issuing_body,
        sub_office=office.sub_office,
        location=office.location,
        reference_number=bill_number,
        issue_date=issue_date,
        subject_template_id="GENERAL",
        sender_name=office.signatory,
        sender_designation=office.signatory_designation,
        opening_phrase_id="GENERAL",
        rule_clause_id="RULE_GEN",
        decision_clause_id="DEC_FWD",
        bill_details=bill,
    )


def demand_notice_record(
    body_text: str,
    taxpayer_name: str,
    address: str,
    bill_reference_number: str,
    bill_reference_date: str,
    amount_due: str,
    dispatch_number: str,
    issue_date: str,
    office: OfficeProfile = DEFAULT_OFFICE,
    cc_list: Optional[Tuple[str, ...]] = None,
) -> DraftRecord:
    """Demand notice addressed to the taxpayer, referencing the original bill."""
    return DraftRecord(
        issuing_body=office.issuing_body,
        sub_office=office.sub_office,
        location=office.location,
        reference_number=dispatch_number,
        issue_date=issue_date,
        has_prior_reference=True,
        prior_reference_number=bill_reference_number,
        prior_reference_date=bill_reference_date,
        subject_template_id="GENERAL",
        subject_field_values={"subject": f"बकाया गृहकर धनराशि रु. {amount_due} जमा करने के संबंध में।"},
        recipient_name=taxpayer_name,
        recipient_office=address,
        sender_name=office.signatory,
        sender_designation=office.signatory_designation,
        opening_phrase_id=DEMAND_NOTICE_OPENER,
        body_text=body_text,
        rule_clause_id=DEMAND_NOTICE_RULE,
        decision_clause_id=DEMAND_NOTICE_DECISION,
        cc_list=DEMAND_NOTICE_CC if cc_list is None else cc_list,
    )

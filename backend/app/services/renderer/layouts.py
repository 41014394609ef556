"""
Draft Layouts

One layout per DocumentType. Each layout turns a DraftRecord into a
DraftDocument (ordered section nodes). Shared pieces - banner,
addressee, body, signature, copy block - live on the base class so
every type composes them the same way.

Layouts ONLY decide which sections exist; styling belongs to the backend.
"""
from __future__ import annotations
from typing import Dict, Optional, Tuple, Type

from app.models.draft import DocumentType, DraftRecord
from app.models.draft_document import (
    Addressee,
    Banner,
    BillHeader,
    BillParty,
    BillTable,
    BodyParagraphs,
    CopyDistribution,
    DispatchLine,
    DraftDocument,
    NoteSheetTable,
    Notice,
    OfficeHeader,
    Signature,
    StatutoryLine,
    SubjectBlock,
)
from app.services.catalog import BLANK_FILL, PhraseCatalog

from .composer import (
    assemble_standard_body,
    compose_reference,
    resolve_subject,
    split_paragraphs,
)
from .digits import format_amount, format_rate, to_local_digits
from .errors import MissingBillDetailsError


# =============================================================================
# FIXED CAPTIONS
# =============================================================================

BANNERS: Dict[DocumentType, str] = {
    DocumentType.ORDER: ":: आदेश ::",
    DocumentType.MEMO: ":: कार्यालय ज्ञापन ::",
    DocumentType.DEMAND_NOTICE: ":: मांग सूचना (Demand Notice) ::",
    DocumentType.PUBLICATION_NOTICE: "प्रकाशन सूचना",
}

ADDRESSEE_TYPES = frozenset({
    DocumentType.LETTER,
    DocumentType.PROPOSAL,
    DocumentType.DEMAND_NOTICE,
})

DISPATCH_LABEL = "क्रमांक:"
PUBLICATION_DISPATCH_LABEL = "पत्रांक:"
BILL_NUMBER_LABEL = "बिल संख्या:"
DATE_LABEL = "दिनांक:"

ADDRESSEE_NAME_PLACEHOLDER = "श्रीमान ..."
ADDRESSEE_OFFICE_PLACEHOLDER = "..."

COPY_LABEL = "प्रतिलिपि:-"
NOTE_SHEET_TITLE = "नोटशीट"

PUBLICATION_STATUTE = "(नगर पालिका अधिनियम 1916 की धारा 147 के अर्न्तगत)"

BILL_CAPTION = "गृहकर बिल (House Tax Bill)"
BILL_PARTY_TITLE = "करदाता का विवरण"
BILL_TABLE_TITLE = "कर का विवरण एवं गणना"
BILL_COLUMNS = ("विवरण", "धनराशि (रु.)")
BILL_TOTAL_LABEL = "कुल देय धनराशि"
BILL_WORDS_LABEL = "कुल राशि शब्दों में:"
BILL_PAYMENT_NOTICE = "कृपया बिल प्राप्ति के 15 दिवस के अन्दर भुगतान सुनिश्चित करें।"
BILL_SIGNATORY = "कर अधीक्षक"


class DraftLayout:
    """
    Base layout - the shared "produce sections" contract.

    Subclasses override build(); helpers return None to omit a section.
    """

    document_type: DocumentType

    def __init__(self, catalog: PhraseCatalog):
        self.catalog = catalog

    def build(self, record: DraftRecord) -> DraftDocument:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Shared section helpers
    # ------------------------------------------------------------------

    def office_header(self, record: DraftRecord) -> OfficeHeader:
        return OfficeHeader(
            issuing_body=record.issuing_body,
            sub_office=record.sub_office,
            location=record.location,
        )

    def dispatch_line(self, record: DraftRecord, number_label: str = DISPATCH_LABEL) -> DispatchLine:
        return DispatchLine(
            number_label=number_label,
            number=record.reference_number.strip() or BLANK_FILL,
            date_label=DATE_LABEL,
            date=record.issue_date.strip() or BLANK_FILL,
        )

    def addressee(self, record: DraftRecord) -> Optional[Addressee]:
        if self.document_type not in ADDRESSEE_TYPES:
            return None
        return Addressee(
            name=record.recipient_name.strip() or ADDRESSEE_NAME_PLACEHOLDER,
            office=record.recipient_office.strip() or ADDRESSEE_OFFICE_PLACEHOLDER,
        )

    def banner(self) -> Optional[Banner]:
        caption = BANNERS.get(self.document_type)
        return Banner(caption) if caption else None

    def subject(self, record: DraftRecord) -> SubjectBlock:
        return SubjectBlock(
            subject=resolve_subject(self.catalog, record),
            reference=compose_reference(record),
        )

    def signature(self, record: DraftRecord, secondary: bool = False) -> Signature:
        return Signature(
            name=record.sender_name,
            designation=record.sender_designation,
            office="" if secondary else record.sub_office,
            secondary=secondary,
        )

    def copy_distribution(self, record: DraftRecord, divider: bool = True) -> Optional[CopyDistribution]:
        recipients = tuple(c for c in record.cc_list if c and c.strip())
        if not recipients:
            return None
        return CopyDistribution(
            label=COPY_LABEL,
            recipients=recipients,
            signature=self.signature(record, secondary=True),
            divider=divider,
        )


class StandardLayout(DraftLayout):
    """Letter, Order, Memo, Proposal and Demand Notice."""

    def build(self, record: DraftRecord) -> DraftDocument:
        doc = DraftDocument(document_type=self.document_type)
        doc.add(self.office_header(record))
        doc.add(self.dispatch_line(record))
        doc.add(self.addressee(record))
        doc.add(self.banner())
        doc.add(self.subject(record))
        doc.add(BodyParagraphs(tuple(assemble_standard_body(self.catalog, self.document_type, record))))
        doc.add(self.signature(record))
        doc.add(self.copy_distribution(record))
        return doc


class LetterLayout(StandardLayout):
    document_type = DocumentType.LETTER


class OrderLayout(StandardLayout):
    document_type = DocumentType.ORDER


class MemoLayout(StandardLayout):
    document_type = DocumentType.MEMO


class ProposalLayout(StandardLayout):
    document_type = DocumentType.PROPOSAL


class DemandNoticeLayout(StandardLayout):
    """Title and default clause ids are chosen upstream; the record's ids are honored as-is."""
    document_type = DocumentType.DEMAND_NOTICE


class NoteSheetLayout(DraftLayout):
    """Standard phrase assembly laid out as a numbered two-column note sheet."""

    document_type = DocumentType.NOTE_SHEET

    def build(self, record: DraftRecord) -> DraftDocument:
        pieces = assemble_standard_body(self.catalog, self.document_type, record)
        rows = tuple(
            (to_local_digits(f"{index}."), piece)
            for index, piece in enumerate(pieces, start=1)
        )

        doc = DraftDocument(document_type=self.document_type)
        doc.add(self.office_header(record))
        doc.add(self.dispatch_line(record))
        doc.add(self.subject(record))
        doc.add(NoteSheetTable(title=NOTE_SHEET_TITLE, rows=rows))
        doc.add(self.signature(record))
        doc.add(self.copy_distribution(record))
        return doc


class PublicationNoticeLayout(DraftLayout):
    """Fully composed prose body under the section-147 caption; no divider before copies."""

    document_type = DocumentType.PUBLICATION_NOTICE

    def build(self, record: DraftRecord) -> DraftDocument:
        doc = DraftDocument(document_type=self.document_type)
        doc.add(OfficeHeader(issuing_body=record.issuing_body))
        doc.add(self.dispatch_line(record, PUBLICATION_DISPATCH_LABEL))
        doc.add(StatutoryLine(PUBLICATION_STATUTE))
        doc.add(self.banner())
        doc.add(BodyParagraphs(tuple(split_paragraphs(record.body_text))))
        doc.add(self.signature(record))
        doc.add(self.copy_distribution(record, divider=False))
        return doc


class HouseTaxBillLayout(DraftLayout):
    """
    Fixed tabular bill.

    Figures arrive precomputed in bill_details; this layout only formats
    them to two decimals and transcodes digits.
    """

    document_type = DocumentType.HOUSE_TAX_BILL

    def build(self, record: DraftRecord) -> DraftDocument:
        bill = record.bill_details
        if bill is None:
            raise MissingBillDetailsError()

        party_rows: Tuple[Tuple[str, str], ...] = (
            ("नाम:", bill.taxpayer_name),
            ("पिता/पति का नाम:", bill.parent_or_spouse_name),
            ("भवन संख्या:", to_local_digits(bill.house_number)),
            ("मोहल्ला/वार्ड:", f"{bill.locality}, वार्ड-{to_local_digits(bill.ward_number)}"),
        )
        tax_rows: Tuple[Tuple[str, str], ...] = (
            ("वार्षिक मूल्यांकन (ARV)", format_amount(bill.annual_valuation)),
            (to_local_digits("गृहकर (ARV का 10%)"), format_amount(bill.house_tax)),
            (to_local_digits("जलकर (ARV का 2.5%)"), format_amount(bill.water_tax)),
            ("गत वर्ष का बकाया", format_amount(bill.arrears)),
            (f"बकाया पर ब्याज (@{format_rate(bill.interest_rate)}%)", format_amount(bill.interest)),
        )

        doc = DraftDocument(document_type=self.document_type, framed=True)
        doc.add(BillHeader(
            issuing_body=record.issuing_body,
            caption=BILL_CAPTION,
            description=bill.description.strip(),
        ))
        doc.add(self.dispatch_line(record, BILL_NUMBER_LABEL))
        doc.add(BillParty(title=BILL_PARTY_TITLE, rows=party_rows))
        doc.add(BillTable(
            title=BILL_TABLE_TITLE,
            column_labels=BILL_COLUMNS,
            rows=tax_rows,
            total_label=BILL_TOTAL_LABEL,
            total=f"रु. {format_amount(bill.total_amount)}",
            total_in_words_label=BILL_WORDS_LABEL,
            total_in_words=bill.total_in_words,
        ))
        doc.add(Notice(to_local_digits(BILL_PAYMENT_NOTICE)))
        doc.add(Signature(
            name=BILL_SIGNATORY,
            designation=record.issuing_body,
            office=record.sub_office,
        ))
        doc.add(self.copy_distribution(record))
        return doc


LAYOUTS: Dict[DocumentType, Type[DraftLayout]] = {
    DocumentType.LETTER: LetterLayout,
    DocumentType.ORDER: OrderLayout,
    DocumentType.MEMO: MemoLayout,
    DocumentType.NOTE_SHEET: NoteSheetLayout,
    DocumentType.PROPOSAL: ProposalLayout,
    DocumentType.PUBLICATION_NOTICE: PublicationNoticeLayout,
    DocumentType.HOUSE_TAX_BILL: HouseTaxBillLayout,
    DocumentType.DEMAND_NOTICE: DemandNoticeLayout,
}

"""
Draft Document Models - Section Nodes

A DraftDocument is the structured form of a rendered draft: an ordered
sequence of typed section nodes. Layouts decide WHICH sections exist;
a rendering backend decides HOW they look.

Same record + same document type -> same sections -> same markup.
"""

from dataclasses import dataclass, field
from enum import Enum
from hashlib import sha256
from typing import Any, Dict, List, Optional, Tuple
import json

from .draft import DocumentType


class SectionKind(str, Enum):
    """Section node kinds understood by every backend."""
    OFFICE_HEADER = "OFFICE_HEADER"
    DISPATCH_LINE = "DISPATCH_LINE"
    ADDRESSEE = "ADDRESSEE"
    BANNER = "BANNER"
    STATUTORY_LINE = "STATUTORY_LINE"
    SUBJECT = "SUBJECT"
    BODY = "BODY"
    NOTE_SHEET = "NOTE_SHEET"
    BILL_HEADER = "BILL_HEADER"
    BILL_PARTY = "BILL_PARTY"
    BILL_TABLE = "BILL_TABLE"
    NOTICE = "NOTICE"
    SIGNATURE = "SIGNATURE"
    COPY_DISTRIBUTION = "COPY_DISTRIBUTION"


@dataclass(frozen=True)
class OfficeHeader:
    """Centered issuing-office block at the top of the page."""
    issuing_body: str
    sub_office: str = ""
    location: str = ""
    kind: SectionKind = SectionKind.OFFICE_HEADER


@dataclass(frozen=True)
class DispatchLine:
    """Two-cell row: dispatch number on the left, date on the right."""
    number_label: str
    number: str
    date_label: str
    date: str
    kind: SectionKind = SectionKind.DISPATCH_LINE


@dataclass(frozen=True)
class Addressee:
    """'प्रति,' block naming the recipient."""
    name: str
    office: str
    kind: SectionKind = SectionKind.ADDRESSEE


@dataclass(frozen=True)
class Banner:
    """Centered, underlined type caption (e.g. ':: आदेश ::')."""
    caption: str
    kind: SectionKind = SectionKind.BANNER


@dataclass(frozen=True)
class StatutoryLine:
    """Centered line citing the enabling provision."""
    text: str
    kind: SectionKind = SectionKind.STATUTORY_LINE


@dataclass(frozen=True)
class SubjectBlock:
    """Subject row plus an optional reference row."""
    subject: str
    reference: Optional[str] = None
    kind: SectionKind = SectionKind.SUBJECT


@dataclass(frozen=True)
class BodyParagraphs:
    """Justified, first-line-indented paragraphs."""
    paragraphs: Tuple[str, ...]
    kind: SectionKind = SectionKind.BODY


@dataclass(frozen=True)
class NoteSheetTable:
    """Two-column note sheet: numbering column + content column."""
    title: str
    rows: Tuple[Tuple[str, str], ...]
    kind: SectionKind = SectionKind.NOTE_SHEET


@dataclass(frozen=True)
class BillHeader:
    """Bill title block: office, caption and period/description line."""
    issuing_body: str
    caption: str
    description: str = ""
    kind: SectionKind = SectionKind.BILL_HEADER


@dataclass(frozen=True)
class BillParty:
    """Taxpayer particulars as label/value rows."""
    title: str
    rows: Tuple[Tuple[str, str], ...]
    kind: SectionKind = SectionKind.BILL_PARTY


@dataclass(frozen=True)
class BillTable:
    """Tax computation table; amounts are already formatted strings."""
    title: str
    column_labels: Tuple[str, str]
    rows: Tuple[Tuple[str, str], ...]
    total_label: str
    total: str
    total_in_words_label: str = ""
    total_in_words: str = ""
    kind: SectionKind = SectionKind.BILL_TABLE


@dataclass(frozen=True)
class Notice:
    """Small centered footnote (payment instruction etc.)."""
    text: str
    kind: SectionKind = SectionKind.NOTICE


@dataclass(frozen=True)
class Signature:
    """Right-aligned identity block; secondary copies omit office and spacing."""
    name: str
    designation: str
    office: str = ""
    secondary: bool = False
    kind: SectionKind = SectionKind.SIGNATURE


@dataclass(frozen=True)
class CopyDistribution:
    """'प्रतिलिपि' list followed by a secondary signature."""
    label: str
    recipients: Tuple[str, ...]
    signature: Signature
    divider: bool = True
    kind: SectionKind = SectionKind.COPY_DISTRIBUTION


Section = (
    OfficeHeader | DispatchLine | Addressee | Banner | StatutoryLine
    | SubjectBlock | BodyParagraphs | NoteSheetTable | BillHeader | BillParty
    | BillTable | Notice | Signature | CopyDistribution
)


@dataclass
class DraftDocument:
    """
    Complete draft assembled from section nodes.

    - document_type: the layout that produced the sections
    - sections: ordered; backends render them in this order
    - framed: wrap the whole page in a bordered frame (bills)
    """
    document_type: DocumentType
    sections: List[Section] = field(default_factory=list)
    framed: bool = False

    def add(self, section: Optional[Section]) -> None:
        """Append a section; None means the layout chose to omit it."""
        if section is not None:
            self.sections.append(section)

    def kinds(self) -> List[SectionKind]:
        """Section kinds in render order."""
        return [s.kind for s in self.sections]

    def find(self, kind: SectionKind) -> List[Section]:
        """All sections of one kind, in order."""
        return [s for s in self.sections if s.kind == kind]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "document_type": self.document_type.value,
            "framed": self.framed,
            "sections": [_section_to_dict(s) for s in self.sections],
        }

    def content_hash(self) -> str:
        """Deterministic hash of the section structure."""
        payload = json.dumps(self.to_dict(), sort_keys=True, ensure_ascii=False)
        return sha256(payload.encode("utf-8")).hexdigest()[:16]


def _section_to_dict(section: Section) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for name in section.__dataclass_fields__:
        value = getattr(section, name)
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, Signature):
            value = _section_to_dict(value)
        elif isinstance(value, tuple):
            value = [list(v) if isinstance(v, tuple) else v for v in value]
        data[name] = value
    return data

"""
HTML Backend

Turns a DraftDocument into a self-contained, print-ready HTML fragment
sized for A4 (210mm wide, 20mm padding) in a Devanagari serif face.

All text is escaped. Body paragraphs may carry upstream emphasis; only
the tags in RICH_TAGS survive, without attributes.
"""
from __future__ import annotations
import html
import re
from typing import Callable, Dict, List

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
    Section,
    SectionKind,
    Signature,
    StatutoryLine,
    SubjectBlock,
)

RICH_TAGS = ("b", "u", "i", "strong", "em", "br")

_RICH_TAG = re.compile(
    r"&lt;(/?)(" + "|".join(RICH_TAGS) + r")\s*/?&gt;",
    re.IGNORECASE,
)

CONTAINER_STYLE = (
    "font-family: 'Noto Serif Devanagari', serif; padding: 20mm; color: #000; "
    "background: #fff; line-height: 1.5; font-size: 12pt; width: 210mm; "
    "min-height: 297mm; box-sizing: border-box; margin: 0 auto;"
)
FRAME_STYLE = "border: 2px solid #000; padding: 15px; background: #f9f9f9;"
PARAGRAPH_STYLE = (
    "text-align: justify; text-justify: inter-word; margin-bottom: 15px; "
    "line-height: 1.7; text-indent: 40px;"
)
BANNER_STYLE = (
    "text-align: center; font-weight: bold; font-size: 14pt; "
    "text-decoration: underline; margin-bottom: 25px;"
)
CELL_STYLE = "padding: 8px; border: 1px solid #ddd;"


def escape(text: str) -> str:
    return html.escape(text or "", quote=True)


def rich_text(text: str) -> str:
    """Escape everything, then restore bare emphasis tags."""
    escaped = escape(text)
    return _RICH_TAG.sub(lambda m: f"<{m.group(1)}{m.group(2).lower()}>", escaped)


class HtmlBackend:
    """
    Render section nodes into inline-styled HTML.

    Output is deterministic: same document -> byte-identical markup.
    """

    def __init__(self):
        self._handlers: Dict[SectionKind, Callable[[Section], str]] = {
            SectionKind.OFFICE_HEADER: self._office_header,
            SectionKind.DISPATCH_LINE: self._dispatch_line,
            SectionKind.ADDRESSEE: self._addressee,
            SectionKind.BANNER: self._banner,
            SectionKind.STATUTORY_LINE: self._statutory_line,
            SectionKind.SUBJECT: self._subject,
            SectionKind.BODY: self._body,
            SectionKind.NOTE_SHEET: self._note_sheet,
            SectionKind.BILL_HEADER: self._bill_header,
            SectionKind.BILL_PARTY: self._bill_party,
            SectionKind.BILL_TABLE: self._bill_table,
            SectionKind.NOTICE: self._notice,
            SectionKind.SIGNATURE: self._signature,
            SectionKind.COPY_DISTRIBUTION: self._copy_distribution,
        }

    def render(self, document: DraftDocument) -> str:
        parts: List[str] = [self._handlers[s.kind](s) for s in document.sections]
        inner = "\n".join(parts)
        if document.framed:
            inner = f'<div style="{FRAME_STYLE}">\n{inner}\n</div>'
        return (
            f'<div class="draft draft-{document.document_type.value.lower()}" '
            f'style="{CONTAINER_STYLE}">\n{inner}\n</div>'
        )

    # ------------------------------------------------------------------
    # Section handlers
    # ------------------------------------------------------------------

    def _office_header(self, s: OfficeHeader) -> str:
        lines = [f'<h2 style="margin: 0; font-size: 16pt; font-weight: bold;">{escape(s.issuing_body)}</h2>']
        if s.sub_office:
            lines.append(f'<h3 style="margin: 0; font-size: 14pt; font-weight: bold;">{escape(s.sub_office)}</h3>')
        if s.location:
            lines.append(f'<p style="margin: 5px 0 0 0; font-size: 12pt;">{escape(s.location)}</p>')
        return '<div style="text-align: center; margin-bottom: 30px;">' + "".join(lines) + "</div>"

    def _dispatch_line(self, s: DispatchLine) -> str:
        return (
            '<table style="width: 100%; margin-bottom: 30px; border-collapse: collapse;"><tr>'
            f'<td style="text-align: left; vertical-align: bottom;"><strong>{escape(s.number_label)}</strong> {escape(s.number)}</td>'
            f'<td style="text-align: right; vertical-align: bottom;"><strong>{escape(s.date_label)}</strong> {escape(s.date)}</td>'
            "</tr></table>"
        )

    def _addressee(self, s: Addressee) -> str:
        return (
            '<div style="margin-bottom: 25px;">'
            '<p style="font-weight: bold; margin-bottom: 5px;">प्रति,</p>'
            '<div style="padding-left: 40px;">'
            f'<p style="margin: 0;">{escape(s.name)},</p>'
            f'<p style="margin: 0;">{escape(s.office)}</p>'
            "</div></div>"
        )

    def _banner(self, s: Banner) -> str:
        return f'<div style="{BANNER_STYLE}">{escape(s.caption)}</div>'

    def _statutory_line(self, s: StatutoryLine) -> str:
        return f'<div style="text-align: center; margin-bottom: 20px;"><p style="margin: 0;">{escape(s.text)}</p></div>'

    def _subject(self, s: SubjectBlock) -> str:
        rows = [
            '<tr><td style="width: 60px; font-weight: bold; vertical-align: top;">विषय:</td>'
            '<td style="font-weight: bold; text-decoration: underline; text-underline-offset: 4px;">'
            f"{escape(s.subject)}</td></tr>"
        ]
        if s.reference:
            rows.append(
                '<tr><td style="width: 60px; font-weight: bold; vertical-align: top; padding-top: 5px;">संदर्भ:</td>'
                f'<td style="padding-top: 5px;">{escape(s.reference)}</td></tr>'
            )
        return (
            '<div style="margin-bottom: 35px;"><table style="width: 100%; border-collapse: collapse;">'
            + "".join(rows)
            + "</table></div>"
        )

    def _body(self, s: BodyParagraphs) -> str:
        paragraphs = "".join(f'<p style="{PARAGRAPH_STYLE}">{rich_text(p)}</p>' for p in s.paragraphs)
        return f'<div style="min-height: 100px;">{paragraphs}</div>'

    def _note_sheet(self, s: NoteSheetTable) -> str:
        rows = "".join(
            "<tr>"
            f'<td style="width: 50px; text-align: center; vertical-align: top; border-right: 1px solid #000; padding: 8px;">{escape(number)}</td>'
            f'<td style="text-align: justify; padding: 8px 8px 8px 15px; line-height: 1.7;">{rich_text(text)}</td>'
            "</tr>"
            for number, text in s.rows
        )
        return (
            '<div style="border: 1px solid #000; margin-bottom: 20px;">'
            f'<div style="text-align: center; font-weight: bold; font-size: 14pt; border-bottom: 1px solid #000; padding: 8px;">{escape(s.title)}</div>'
            f'<table style="width: 100%; border-collapse: collapse; min-height: 200px;">{rows}</table>'
            "</div>"
        )

    def _bill_header(self, s: BillHeader) -> str:
        description = f'<p style="margin: 0;">{escape(s.description)}</p>' if s.description else ""
        return (
            '<div style="text-align: center; border-bottom: 2px solid #000; padding-bottom: 10px; margin-bottom: 15px;">'
            f'<h2 style="margin: 0; font-size: 18pt; font-weight: bold;">{escape(s.issuing_body)}</h2>'
            f'<h3 style="margin: 5px 0; font-size: 14pt; font-weight: bold;">{escape(s.caption)}</h3>'
            f"{description}</div>"
        )

    def _bill_party(self, s: BillParty) -> str:
        rows = "".join(
            f'<tr><td style="width: 150px;"><strong>{escape(label)}</strong></td><td>{escape(value)}</td></tr>'
            for label, value in s.rows
        )
        return (
            '<div style="border: 1px solid #ccc; padding: 10px; margin-bottom: 15px; background: #fff;">'
            f'<h4 style="margin: 0 0 10px 0; font-weight: bold; border-bottom: 1px solid #eee; padding-bottom: 5px;">{escape(s.title)}</h4>'
            f'<table style="width: 100%; font-size: 11pt;">{rows}</table>'
            "</div>"
        )

    def _bill_table(self, s: BillTable) -> str:
        head = (
            '<thead style="background: #eee;"><tr>'
            f'<th style="{CELL_STYLE} text-align: left;">{escape(s.column_labels[0])}</th>'
            f'<th style="{CELL_STYLE} text-align: right;">{escape(s.column_labels[1])}</th>'
            "</tr></thead>"
        )
        rows = "".join(
            f'<tr><td style="{CELL_STYLE}">{escape(label)}</td>'
            f'<td style="{CELL_STYLE} text-align: right;">{escape(amount)}</td></tr>'
            for label, amount in s.rows
        )
        total = (
            '<tr style="background: #e6f7ff; font-weight: bold; font-size: 13pt;">'
            f'<td style="padding: 10px; border: 1px solid #91d5ff;">{escape(s.total_label)}</td>'
            f'<td style="padding: 10px; border: 1px solid #91d5ff; text-align: right;">{escape(s.total)}</td>'
            "</tr>"
        )
        words = ""
        if s.total_in_words:
            words = (
                f'<p style="margin-top: 15px;"><strong>{escape(s.total_in_words_label)}</strong> '
                f"{escape(s.total_in_words)}</p>"
            )
        return (
            '<div style="border: 1px solid #ccc; padding: 10px; margin-bottom: 15px; background: #fff;">'
            f'<h4 style="margin: 0 0 10px 0; font-weight: bold; border-bottom: 1px solid #eee; padding-bottom: 5px;">{escape(s.title)}</h4>'
            f'<table style="width: 100%; font-size: 11pt; border-collapse: collapse;">{head}<tbody>{rows}{total}</tbody></table>'
            "</div>"
            f"{words}"
        )

    def _notice(self, s: Notice) -> str:
        return f'<p style="font-size: 10pt; text-align: center; margin-top: 20px;">{escape(s.text)}</p>'

    def _signature(self, s: Signature) -> str:
        spacer = "" if s.secondary else '<div style="margin-bottom: 60px;"></div>'
        office = f'<p style="margin: 0;">{escape(s.office)}</p>' if s.office and not s.secondary else ""
        margin = "0" if s.secondary else "50px"
        return (
            f'<table class="signature" style="width: 100%; margin-top: {margin}; border-collapse: collapse;"><tr>'
            '<td style="width: 60%;"></td>'
            '<td style="width: 40%; text-align: center; vertical-align: top;">'
            f"{spacer}"
            f'<p style="font-weight: bold; margin: 0;">{escape(s.name)}</p>'
            f'<p style="margin: 0;">{escape(s.designation)}</p>'
            f"{office}"
            "</td></tr></table>"
        )

    def _copy_distribution(self, s: CopyDistribution) -> str:
        divider = "border-top: 1px solid #000; " if s.divider else ""
        items = "".join(
            f'<li style="margin-bottom: 8px; padding-left: 5px;">{rich_text(r)}</li>'
            for r in s.recipients
        )
        return (
            f'<div class="copy-distribution" style="margin-top: 40px; {divider}padding-top: 20px;">'
            f'<p style="font-weight: bold; margin-bottom: 10px;">{escape(s.label)}</p>'
            f'<ol style="margin: 0; padding-left: 25px; list-style-type: decimal;">{items}</ol>'
            f"{self._signature(s.signature)}"
            "</div>"
        )

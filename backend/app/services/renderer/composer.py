"""
Draft Composer

Pure text composition shared by every layout:
- subject interpolation with blank-fill for missing values
- the optional prior-reference sentence
- paragraph splitting and ordered body assembly

Nothing here formats markup; layouts wrap the results in section nodes.
"""
from __future__ import annotations
import logging
import re
from typing import List, Mapping, Optional

from app.models.draft import DocumentType, DraftRecord, SubjectTemplate
from app.services.catalog import (
    BLANK_FILL,
    REFERENCE_TEMPLATE,
    SUBJECT_NOT_AVAILABLE,
    PhraseCatalog,
)

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

# Paragraphs are separated by one or more blank lines after line endings
# are normalized to "\n".
_PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n+")


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not str(text).strip()


def fill_subject(template: SubjectTemplate, values: Mapping[str, str]) -> str:
    """
    Substitute every {key} in the template.

    A key with no value (absent, empty or whitespace) prints as the
    blank-fill marker so the page shows a fill-in line.
    """
    def _replace(match: re.Match) -> str:
        value = values.get(match.group(1))
        if _is_blank(value):
            return BLANK_FILL
        return str(value)

    return _PLACEHOLDER.sub(_replace, template.template)


def resolve_subject(catalog: PhraseCatalog, record: DraftRecord) -> str:
    """Subject line for the record, or the fixed fallback for an unknown template id."""
    template = catalog.find_subject_template(record.subject_template_id)
    if template is None:
        logger.debug(f"Subject template '{record.subject_template_id}' not found, using fallback")
        return SUBJECT_NOT_AVAILABLE
    return fill_subject(template, record.subject_field_values)


def compose_reference(record: DraftRecord) -> Optional[str]:
    """Prior-reference sentence; None unless the flag and both fields are set."""
    if not record.has_prior_reference:
        return None
    if _is_blank(record.prior_reference_number) or _is_blank(record.prior_reference_date):
        return None
    return (
        REFERENCE_TEMPLATE
        .replace("{refNo}", record.prior_reference_number.strip())
        .replace("{refDate}", record.prior_reference_date.strip())
    )


def split_paragraphs(text: Optional[str]) -> List[str]:
    """Split free text on blank lines; trimmed, empty paragraphs dropped."""
    if _is_blank(text):
        return []
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return [p.strip() for p in _PARAGRAPH_BREAK.split(normalized) if p.strip()]


def assemble_standard_body(
    catalog: PhraseCatalog,
    document_type: DocumentType,
    record: DraftRecord,
) -> List[str]:
    """
    Ordered body pieces: opener, body text, rule, decision, ending.

    Pieces that resolve to nothing are skipped. Body text contributes
    one piece per paragraph.
    """
    pieces: List[Optional[str]] = [catalog.find_opener(document_type, record.opening_phrase_id)]
    pieces.extend(split_paragraphs(record.body_text))
    pieces.append(catalog.find_rule_clause(record.rule_clause_id))
    pieces.append(catalog.find_decision_clause(record.decision_clause_id))
    pieces.append(catalog.find_ending())

    return [p.strip() for p in pieces if not _is_blank(p)]

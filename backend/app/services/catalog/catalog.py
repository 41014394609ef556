"""
Phrase Catalog

Read-only lookup over the static phrase data. Every finder returns
None for an unknown id; callers decide whether to omit the section
or fall back to a fixed string. Nothing here raises.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from app.models.draft import DocumentType, PhraseEntry, SubjectTemplate
from . import phrases

logger = logging.getLogger(__name__)


def _index(entries: Iterable[PhraseEntry]) -> Dict[str, str]:
    return {entry.id: entry.text for entry in entries}


class PhraseCatalog:
    """
    Immutable registry of subject templates and boilerplate clauses.

    Openers are scoped by document type; rule, decision and ending
    clauses are global. A single ending clause is used per catalog,
    selected by ending_id.
    """

    def __init__(
        self,
        subject_templates: Iterable[SubjectTemplate] = phrases.SUBJECT_TEMPLATES,
        openers: Mapping[DocumentType, Tuple[PhraseEntry, ...]] = phrases.OPENERS,
        rule_clauses: Iterable[PhraseEntry] = phrases.RULE_CLAUSES,
        decision_clauses: Iterable[PhraseEntry] = phrases.DECISION_CLAUSES,
        ending_clauses: Iterable[PhraseEntry] = phrases.ENDING_CLAUSES,
        ending_id: str = phrases.DEFAULT_ENDING_ID,
    ):
        self._subjects = {t.id: t for t in subject_templates}
        self._subject_order = tuple(self._subjects.values())
        self._openers = {dt: tuple(entries) for dt, entries in openers.items()}
        self._opener_index = {dt: _index(entries) for dt, entries in self._openers.items()}
        self._rules = tuple(rule_clauses)
        self._rule_index = _index(self._rules)
        self._decisions = tuple(decision_clauses)
        self._decision_index = _index(self._decisions)
        self._endings = _index(ending_clauses)

        if ending_id not in self._endings:
            logger.warning(f"Unknown ending clause '{ending_id}', using {phrases.DEFAULT_ENDING_ID}")
            ending_id = phrases.DEFAULT_ENDING_ID
        self._ending_id = ending_id

    # ------------------------------------------------------------------
    # Finders
    # ------------------------------------------------------------------

    def find_subject_template(self, template_id: Optional[str]) -> Optional[SubjectTemplate]:
        """Return the subject template for an id, or None."""
        if not template_id:
            return None
        return self._subjects.get(template_id)

    def find_opener(self, document_type: DocumentType, opener_id: Optional[str]) -> Optional[str]:
        """Return the opener text for (type, id); types without openers always give None."""
        if not opener_id:
            return None
        return self._opener_index.get(document_type, {}).get(opener_id)

    def find_rule_clause(self, clause_id: Optional[str]) -> Optional[str]:
        if not clause_id:
            return None
        return self._rule_index.get(clause_id)

    def find_decision_clause(self, clause_id: Optional[str]) -> Optional[str]:
        if not clause_id:
            return None
        return self._decision_index.get(clause_id)

    def find_ending(self) -> str:
        """The ending clause appended to every standard body."""
        return self._endings.get(self._ending_id, "")

    @property
    def ending_id(self) -> str:
        return self._ending_id

    # ------------------------------------------------------------------
    # Listings for form producers
    # ------------------------------------------------------------------

    def list_subject_templates(self) -> List[SubjectTemplate]:
        return list(self._subject_order)

    def list_openers(self, document_type: DocumentType) -> List[PhraseEntry]:
        return list(self._openers.get(document_type, ()))

    def list_rule_clauses(self) -> List[PhraseEntry]:
        return list(self._rules)

    def list_decision_clauses(self) -> List[PhraseEntry]:
        return list(self._decisions)


# Singleton instance
_catalog: Optional[PhraseCatalog] = None


def get_catalog() -> PhraseCatalog:
    """Get the process-wide catalog, built once on first use."""
    global _catalog
    if _catalog is None:
        from app.config import DRAFT_ENDING_ID
        _catalog = PhraseCatalog(ending_id=DRAFT_ENDING_ID)
    return _catalog

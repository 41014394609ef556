"""
Municipal Draft Engine - Phrase Catalog Data

Static boilerplate for municipal drafts: subject templates, per-type
openers and closers, and the global rule / decision / ending clauses.

Loaded once at import and never mutated.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

from app.models.draft import DocumentType, PhraseEntry, SubjectField, SubjectTemplate


# =============================================================================
# FIXED STRINGS
# =============================================================================

SUBJECT_NOT_AVAILABLE = "विषय उपलब्ध नहीं है"

# Printed in place of any value the user left empty
BLANK_FILL = "_______"

REFERENCE_TEMPLATE = "इस कार्यालय का पत्र क्रमांक {refNo} दिनांक {refDate} के क्रम में।"

DEFAULT_ENDING_ID = "END_STD"


# =============================================================================
# SUBJECT TEMPLATES
# =============================================================================

SUBJECT_TEMPLATES: Tuple[SubjectTemplate, ...] = (
    SubjectTemplate(
        id="GENERAL",
        label="सामान्य / अन्य (General)",
        template="{subject}",
        fields=(
            SubjectField("subject", "विषय (Subject)", "विषय यहाँ लिखें..."),
        ),
    ),
    SubjectTemplate(
        id="TRANSFER",
        label="स्थानांतरण के संबंध में",
        template="श्री/श्रीमती {name}, {designation} के स्थानांतरण/पदस्थापना के संबंध में।",
        fields=(
            SubjectField("name", "कर्मचारी का नाम", "उदा. रमेश कुमार"),
            SubjectField("designation", "पदनाम", "उदा. सहायक ग्रेड-3"),
        ),
    ),
    SubjectTemplate(
        id="LEAVE",
        label="अवकाश स्वीकृति हेतु",
        template="श्री/श्रीमती {name}, {designation} के {leaveType} अवकाश आवेदन के संबंध में।",
        fields=(
            SubjectField("name", "आवेदक का नाम", "उदा. सुरेश सिंह"),
            SubjectField("designation", "पदनाम", "उदा. अनुभाग अधिकारी"),
            SubjectField("leaveType", "अवकाश का प्रकार", "उदा. अर्जित/चिकित्सा"),
        ),
    ),
    SubjectTemplate(
        id="EXPLANATION",
        label="स्पष्टीकरण (Show Cause)",
        template="श्री/श्रीमती {name}, {designation} के विरुद्ध अनुशासनात्मक कार्यवाही/स्पष्टीकरण के संबंध में।",
        fields=(
            SubjectField("name", "संबंधित कर्मचारी", "नाम दर्ज करें"),
            SubjectField("designation", "पदनाम", "पदनाम दर्ज करें"),
        ),
    ),
    SubjectTemplate(
        id="SUPPLY",
        label="सामग्री क्रय/आपूर्ति",
        template="कार्यालय हेतु {item} के क्रय/आपूर्ति के संबंध में।",
        fields=(
            SubjectField("item", "सामग्री का नाम", "उदा. स्टेशनरी/कंप्यूटर"),
        ),
    ),
    SubjectTemplate(
        id="MEETING",
        label="बैठक सूचना",
        template="दिनांक {date} को आयोजित {topic} विषयक बैठक के संबंध में।",
        fields=(
            SubjectField("date", "बैठक दिनांक", "DD-MM-YYYY", input_type="date"),
            SubjectField("topic", "बैठक का विषय", "उदा. समीक्षा"),
        ),
    ),
)


# =============================================================================
# OPENERS (scoped by document type)
# =============================================================================

_REF_BASED = PhraseEntry(
    "REF_BASED",
    "कृपया उपर्युक्त विषय एवं संदर्भित पत्र का अवलोकन करने का कष्ट करें। इस संबंध में लेख है कि",
)

OPENERS: Mapping[DocumentType, Tuple[PhraseEntry, ...]] = MappingProxyType({
    DocumentType.LETTER: (
        PhraseEntry("DIRECT_CMD", "उपर्युक्त विषय के संदर्भ में मुझे यह कहने का निदेश हुआ है कि"),
        _REF_BASED,
        PhraseEntry("GENERAL", "उपर्युक्त विषय के संबंध में अवगत कराना है कि"),
    ),
    DocumentType.ORDER: (
        PhraseEntry("ORDER_STD", "एतद्वारा प्रशासनिक दृष्टिकोण से निम्नलिखित आदेश तत्काल प्रभाव से जारी किए जाते हैं:"),
        PhraseEntry("ORDER_SANCTION", "एतद्वारा सक्षम प्राधिकारी की स्वीकृति के अनुक्रम में निम्नलिखित व्यय की स्वीकृति प्रदान की जाती है:"),
    ),
    DocumentType.MEMO: (
        PhraseEntry("MEMO_INFORM", "अधोहस्ताक्षरी को यह सूचित करने का निदेश हुआ है कि"),
        PhraseEntry("MEMO_EXPLAIN", "संबंधित कर्मचारी को निर्देशित किया जाता है कि वे अपना स्पष्टीकरण ३ दिवस के भीतर प्रस्तुत करें।"),
    ),
    DocumentType.PUBLICATION_NOTICE: (),
    DocumentType.HOUSE_TAX_BILL: (),
    DocumentType.DEMAND_NOTICE: (
        _REF_BASED,
        PhraseEntry("GENERAL", "उपर्युक्त विषय के संबंध में आपको सूचित किया जाता है कि"),
    ),
    DocumentType.NOTE_SHEET: (
        PhraseEntry("NOTE_PUTUP", "प्रस्तुत प्रकरण ________ के संबंध में है।"),
        PhraseEntry("NOTE_RULE", "नियमानुसार स्थिति यह है कि"),
    ),
    DocumentType.PROPOSAL: (
        PhraseEntry("PROP_INTRO", "विभागीय कार्यों के सुचारू संचालन हेतु निम्नलिखित प्रस्ताव सक्षम अनुमोदन हेतु प्रस्तुत है।"),
    ),
})


# =============================================================================
# CLOSERS (scoped by document type, offered to the form layer)
# =============================================================================

CLOSERS: Mapping[DocumentType, Tuple[PhraseEntry, ...]] = MappingProxyType({
    DocumentType.LETTER: (PhraseEntry("FAITHFULLY", "भवदीय,"),),
    DocumentType.ORDER: (PhraseEntry("ORDER_BY", "हस्ताक्षर"),),
    DocumentType.MEMO: (PhraseEntry("CMD_BY", "आज्ञा से,"),),
    DocumentType.PUBLICATION_NOTICE: (),
    DocumentType.HOUSE_TAX_BILL: (),
    DocumentType.DEMAND_NOTICE: (),
    DocumentType.NOTE_SHEET: (PhraseEntry("NOTE_SUBMIT", "अवलोकनार्थ एवं अनुमोदनार्थ प्रस्तुत।"),),
    DocumentType.PROPOSAL: (PhraseEntry("PROP_END", "अतः उक्त प्रस्ताव पर प्रशासनिक एवं वित्तीय स्वीकृति अपेक्षित है।"),),
})


# =============================================================================
# GLOBAL CLAUSES
# =============================================================================

RULE_CLAUSES: Tuple[PhraseEntry, ...] = (
    PhraseEntry("RULE_GEN", "उक्त कार्यवाही नियमानुसार एवं निर्धारित प्रक्रिया के तहत की गई है।"),
    PhraseEntry("RULE_FIN", "उक्त व्यय हेतु बजट शीर्ष ____ में पर्याप्त प्रावधान उपलब्ध है।"),
    PhraseEntry("RULE_ABS", "संबंधित कर्मचारी अनाधिकृत रूप से कार्य से अनुपस्थित हैं, जो कि सेवा नियमों के विपरीत है।"),
)

DECISION_CLAUSES: Tuple[PhraseEntry, ...] = (
    PhraseEntry("DEC_APPROVE", "अतः प्रकरण में सक्षम स्वीकृति प्रदान की जाती है।"),
    PhraseEntry("DEC_REJECT", "अतः प्रस्तुत प्रस्ताव को नियमानुसार न होने के कारण अमान्य किया जाता है।"),
    PhraseEntry("DEC_FWD", "आवश्यक कार्यवाही हेतु प्रेषित।"),
    PhraseEntry("DEC_STRICT", "भविष्य के लिए सचेत किया जाता है कि पुनरावृत्ति न हो।"),
)

ENDING_CLAUSES: Tuple[PhraseEntry, ...] = (
    PhraseEntry("END_STD", "अतः उपर्युक्त के आलोक में आवश्यक कार्यवाही सुनिश्चित करें।"),
    PhraseEntry("END_ORDER", "आदेशानुसार, इसे तत्काल प्रभाव से लागू माना जावे।"),
    PhraseEntry("END_REQ", "अनुरोध है कि वांछित जानकारी शीघ्र उपलब्ध कराने का कष्ट करें।"),
)

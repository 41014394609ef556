"""
Drafting Collaborator Tests

Verifies:
1. Collaborator JSON (camelCase form keys) converts to DraftRecord
2. Malformed payloads raise DraftingServiceError
3. Presets produce records that render as the tax section expects
4. A plain class satisfies the DraftingService port
"""
import pytest

from app.models import DocumentType, DraftRecord, SectionKind
from app.services.billing import compute_house_tax_bill
from app.services.drafting import (
    DEFAULT_OFFICE,
    Attachment,
    DocumentAnalysis,
    DraftingService,
    DraftingServiceError,
    GeneratedDraft,
    RTIAnalysis,
    RTIRecommendation,
    analysis_from_payload,
    bill_from_payload,
    demand_notice_record,
    financial_year,
    generated_draft_from_payload,
    house_tax_bill_record,
    publication_notice_record,
    record_from_payload,
    record_to_payload,
    rti_analysis_from_payload,
)
from app.services.renderer import RenderingEngine


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def form_payload():
    """Draft data the way the collaborator returns it."""
    return {
        "departmentName": "नगर पालिका परिषद, महोबा",
        "officeName": "कर विभाग",
        "location": "महोबा",
        "dispatchNo": "77/कर/2025",
        "date": "15-01-2025",
        "hasReference": True,
        "refLetterNo": "12/2024",
        "refDate": "01-12-2024",
        "subjectTemplateId": "SUPPLY",
        "subjectData": {"item": "स्टेशनरी"},
        "addresseeName": "प्रबंधक",
        "addresseeDept": "भंडार",
        "senderName": "अधिशासी अधिकारी",
        "senderDesignation": "नगर पालिका परिषद महोबा",
        "introType": "GENERAL",
        "factText": "अनुच्छेद एक।\n\nअनुच्छेद दो।",
        "ruleText": "RULE_FIN",
        "decisionType": "DEC_APPROVE",
        "copyTo": ["लेखाकार", "भंडार प्रभारी"],
        "somethingElse": "ignored",
    }


@pytest.fixture
def engine():
    return RenderingEngine()


# =============================================================================
# TEST: PAYLOAD CONVERSION
# =============================================================================

class TestRecordFromPayload:

    def test_form_keys_mapped(self, form_payload):
        record = record_from_payload(form_payload)
        assert record.issuing_body == "नगर पालिका परिषद, महोबा"
        assert record.sub_office == "कर विभाग"
        assert record.reference_number == "77/कर/2025"
        assert record.has_prior_reference is True
        assert record.prior_reference_number == "12/2024"
        assert record.subject_template_id == "SUPPLY"
        assert dict(record.subject_field_values) == {"item": "स्टेशनरी"}
        assert record.recipient_office == "भंडार"
        assert record.body_text == "अनुच्छेद एक।\n\nअनुच्छेद दो।"
        assert record.rule_clause_id == "RULE_FIN"
        assert record.decision_clause_id == "DEC_APPROVE"
        assert record.cc_list == ("लेखाकार", "भंडार प्रभारी")
        assert record.bill_details is None

    def test_snake_case_keys_accepted(self):
        record = record_from_payload({"issuing_body": "कार्यालय", "body_text": "पाठ"})
        assert record.issuing_body == "कार्यालय"
        assert record.body_text == "पाठ"

    def test_missing_fields_default(self):
        record = record_from_payload({})
        assert record.subject_template_id == "GENERAL"
        assert record.sender_name == ""
        assert record.cc_list == ()
        assert record.has_prior_reference is False

    @pytest.mark.parametrize("raw,expected", [
        ("false", False),
        ("False", False),
        ("no", False),
        ("", False),
        ("true", True),
        (" TRUE ", True),
        (True, True),
        (False, False),
        (0, False),
    ])
    def test_reference_flag_parsed(self, form_payload, raw, expected):
        record = record_from_payload({**form_payload, "hasReference": raw})
        assert record.has_prior_reference is expected

    def test_reference_flag_string_false_omits_reference(self, engine, form_payload):
        record = record_from_payload({**form_payload, "hasReference": "false"})
        assert "संदर्भ:" not in engine.render(DocumentType.LETTER, record)

    def test_reference_flag_unrecognized_string(self, form_payload):
        with pytest.raises(DraftingServiceError):
            record_from_payload({**form_payload, "hasReference": "शायद"})

    def test_single_copy_recipient_string(self):
        record = record_from_payload({"copyTo": "केवल एक"})
        assert record.cc_list == ("केवल एक",)

    def test_bill_numbers_from_strings(self):
        record = record_from_payload({
            "billData": {
                "taxpayerName": "राम",
                "houseNo": "42",
                "wardNo": 15,
                "annualValuation": "10000",
                "arrears": "500",
                "interestRate": "12",
                "totalAmount": "1810",
            },
        })
        bill = record.bill_details
        assert bill.taxpayer_name == "राम"
        assert bill.ward_number == "15"
        assert bill.annual_valuation == 10000.0
        assert bill.total_amount == 1810.0
        assert bill.house_tax == 0.0

    def test_invalid_bill_amount(self):
        with pytest.raises(DraftingServiceError):
            bill_from_payload({"annualValuation": "दस हज़ार"})

    def test_non_object_payload(self):
        with pytest.raises(DraftingServiceError):
            record_from_payload(["not", "a", "record"])

    def test_subject_data_must_be_object(self):
        with pytest.raises(DraftingServiceError):
            record_from_payload({"subjectData": "विषय"})

    def test_record_to_payload_uses_form_keys(self, form_payload):
        record = record_from_payload(form_payload)
        payload = record_to_payload(record)
        assert payload["departmentName"] == record.issuing_body
        assert payload["copyTo"] == ["लेखाकार", "भंडार प्रभारी"]
        assert "somethingElse" not in payload
        assert record_from_payload(payload) == record


class TestCollaboratorResults:

    def test_generated_draft(self, form_payload):
        draft = generated_draft_from_payload({"type": "LETTER", "data": form_payload})
        assert isinstance(draft, GeneratedDraft)
        assert draft.document_type == DocumentType.LETTER
        assert draft.record.subject_template_id == "SUPPLY"

    @pytest.mark.parametrize("legacy,expected", [
        ("PRAKASHAN", DocumentType.PUBLICATION_NOTICE),
        ("HOUSE_TAX", DocumentType.HOUSE_TAX_BILL),
    ])
    def test_legacy_type_names(self, legacy, expected):
        draft = generated_draft_from_payload({"type": legacy, "data": {}})
        assert draft.document_type == expected

    def test_unsupported_type(self):
        with pytest.raises(DraftingServiceError):
            generated_draft_from_payload({"type": "CIRCULAR", "data": {}})

    def test_missing_data(self):
        with pytest.raises(DraftingServiceError):
            generated_draft_from_payload({"type": "LETTER"})

    def test_analysis_skips_unknown_suggestions(self):
        analysis = analysis_from_payload({
            "summary": "वेतन भुगतान हेतु अनुरोध",
            "suggestions": [
                {"label": "उत्तर", "description": "पत्र द्वारा उत्तर", "actionType": "LETTER", "intent": "reply"},
                {"label": "?", "description": "", "actionType": "CIRCULAR", "intent": ""},
            ],
        })
        assert isinstance(analysis, DocumentAnalysis)
        assert analysis.summary == "वेतन भुगतान हेतु अनुरोध"
        assert [s.action_type for s in analysis.suggestions] == [DocumentType.LETTER]

    def test_rti_analysis(self):
        result = rti_analysis_from_payload({
            "overall_summary": "दो बिंदु",
            "analysis": [
                {"question": "1", "recommendation": "provide_full", "exemption_section": "",
                 "reasoning": "सार्वजनिक", "suggested_response_text": "प्रति संलग्न"},
                {"question": "2", "recommendation": "DENY", "exemption_section": "8(1)(j)",
                 "reasoning": "व्यक्तिगत", "suggested_response_text": "देय नहीं"},
            ],
        })
        assert isinstance(result, RTIAnalysis)
        assert [p.recommendation for p in result.analysis] == [
            RTIRecommendation.PROVIDE_FULL, RTIRecommendation.DENY,
        ]
        assert result.analysis[1].exemption_section == "8(1)(j)"

    def test_rti_unknown_recommendation(self):
        with pytest.raises(DraftingServiceError):
            rti_analysis_from_payload({"analysis": [{"recommendation": "MAYBE"}]})


# =============================================================================
# TEST: PRESETS
# =============================================================================

class TestPresets:

    def test_financial_year(self):
        assert financial_year(2025) == "2025-26"
        assert financial_year(2099) == "2099-00"

    def test_publication_notice(self, engine):
        record = publication_notice_record(
            body_text="आवेदक द्वारा नामांतरण हेतु आवेदन किया गया है।\n\nआपत्ति 30 दिवस में प्रस्तुत करें।",
            applicant_name="राम प्रसाद",
            applicant_father_name="श्याम लाल",
            locality="सुभाष नगर",
            issue_date="15-01-2025",
            start_year=2024,
        )
        assert record.reference_number.endswith("/2024-25")
        assert len(record.cc_list) == 2
        html = engine.render(DocumentType.PUBLICATION_NOTICE, record)
        assert html.count("<li") == 2
        assert "border-top" not in html
        assert "राम प्रसाद पुत्र श्री श्याम लाल" in html

    def test_house_tax_bill(self, engine):
        bill = compute_house_tax_bill("राम", "श्याम", "42", "सुभाष नगर", "15", 10000, 500, 12)
        record = house_tax_bill_record(bill, bill_number="B-77", issue_date="01-04-2025")
        assert record.issuing_body == DEFAULT_OFFICE.issuing_body
        assert record.cc_list == ()
        html = engine.render(DocumentType.HOUSE_TAX_BILL, record)
        assert "रु. १८१०.००" in html
        assert record.bill_details.description == ""

    def test_house_tax_bill_financial_year_line(self, engine):
        bill = compute_house_tax_bill("राम", "श्याम", "42", "सुभाष नगर", "15", 10000, 500, 12)
        record = house_tax_bill_record(bill, bill_number="B-77", issue_date="01-04-2025", start_year=2025)
        assert record.bill_details.description == "वित्तीय वर्ष 2025-26"
        doc = engine.build(DocumentType.HOUSE_TAX_BILL, record)
        assert doc.find(SectionKind.BILL_HEADER)[0].description == "वित्तीय वर्ष 2025-26"
        assert "वित्तीय वर्ष 2025-26" in engine.render(DocumentType.HOUSE_TAX_BILL, record)

    def test_house_tax_bill_keeps_given_description(self):
        bill = compute_house_tax_bill(
            "राम", "श्याम", "42", "सुभाष नगर", "15", 10000, description="अर्द्धवार्षिक बिल",
        )
        record = house_tax_bill_record(bill, bill_number="B-78", issue_date="", start_year=2025)
        assert record.bill_details.description == "अर्द्धवार्षिक बिल"

    def test_demand_notice(self, engine):
        record = demand_notice_record(
            body_text="आपके भवन पर गृहकर बकाया है।",
            taxpayer_name="राम प्रसाद",
            address="सुभाष नगर, महोबा",
            bill_reference_number="B-77",
            bill_reference_date="01-04-2025",
            amount_due="1810.00",
            dispatch_number="D-5",
            issue_date="01-06-2025",
        )
        assert record.decision_clause_id == "DEC_STRICT"
        doc = engine.build(DocumentType.DEMAND_NOTICE, record)
        assert SectionKind.ADDRESSEE in doc.kinds()
        subject = doc.find(SectionKind.SUBJECT)[0]
        assert "B-77" in subject.reference
        assert "1810.00" in subject.subject
        html = engine.render(DocumentType.DEMAND_NOTICE, record)
        assert ":: मांग सूचना (Demand Notice) ::" in html
        assert "भविष्य के लिए सचेत किया जाता है कि पुनरावृत्ति न हो।" in html
        assert html.count("<li") == 1

    def test_demand_notice_without_copies(self, engine):
        record = demand_notice_record(
            body_text="", taxpayer_name="क", address="ख",
            bill_reference_number="1", bill_reference_date="2",
            amount_due="3", dispatch_number="4", issue_date="5",
            cc_list=(),
        )
        assert "copy-distribution" not in engine.render(DocumentType.DEMAND_NOTICE, record)


# =============================================================================
# TEST: PORT
# =============================================================================

class EchoService:
    """Minimal collaborator used to check the port shape."""

    def analyze_document(self, attachment):
        return DocumentAnalysis(summary=f"{len(attachment.data)} bytes")

    def draft_from_instruction(self, instruction):
        return GeneratedDraft(DocumentType.LETTER, record_from_payload({"factText": instruction}))

    def draft_from_document(self, attachment, instruction):
        return self.draft_from_instruction(instruction)

    def update_draft(self, record, instruction):
        return record

    def advise(self, history, message):
        return message

    def analyze_rti_query(self, query_text, attachment=None):
        return RTIAnalysis(overall_summary=query_text)


class TestPort:

    def test_plain_class_satisfies_port(self):
        assert isinstance(EchoService(), DraftingService)

    def test_incomplete_class_rejected(self):
        class HalfService:
            def advise(self, history, message):
                return ""

        assert not isinstance(HalfService(), DraftingService)

    def test_generated_record_renders(self, engine):
        draft = EchoService().draft_from_instruction("बैठक की सूचना दें।")
        assert isinstance(draft.record, DraftRecord)
        html = engine.render(draft.document_type, draft.record)
        assert "बैठक की सूचना दें।" in html

    def test_attachment_bytes(self):
        analysis = EchoService().analyze_document(Attachment(data=b"abc", mime_type="application/pdf"))
        assert analysis.summary == "3 bytes"

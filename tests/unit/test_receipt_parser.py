"""
Receipt Parser Unit Tests
"""

import pytest

from square_connect.models import ReceiptInfo
from square_connect.utils import parse_receipt_html


RECEIPT_PAGE = """
<html>
  <body>
    <div class="receipt">
      <div class="payment-method">
        <span class="card-brand">Visa</span>
        <div class="receipt-line chip-application-id">AID: A123456</div>
        <div class="name_on_card">JOHN Q PUBLIC</div>
      </div>
    </div>
  </body>
</html>
"""


class TestParseReceiptHtml:
    """Tests for parse_receipt_html"""

    def test_extracts_aid_and_name(self):
        info = parse_receipt_html(RECEIPT_PAGE)
        assert info.aid == "A123456"
        assert info.name_on_card == "JOHN Q PUBLIC"

    def test_aid_with_surrounding_text(self):
        """Should find the AID anywhere in the element text"""
        info = parse_receipt_html(
            '<p class="chip-application-id">Chip read. AID: B99 Verified</p>'
        )
        assert info.aid == "B99"

    @pytest.mark.parametrize(
        "text",
        ["no aid here", "AID: 123456", "AID: a123456", "AID:A123456", ""],
    )
    def test_non_matching_aid_is_absent(self, text: str):
        """Should leave AID absent rather than raising"""
        info = parse_receipt_html(f'<div class="chip-application-id">{text}</div>')
        assert info.aid is None

    def test_name_is_not_validated(self):
        info = parse_receipt_html('<div class="name_on_card">  ??? 42 </div>')
        assert info.name_on_card == "  ??? 42 "

    def test_missing_elements(self):
        info = parse_receipt_html("<html><body><p>Thanks!</p></body></html>")
        assert info == ReceiptInfo()

    @pytest.mark.parametrize("html", ["", None, "not even html"])
    def test_degenerate_documents(self, html):
        info = parse_receipt_html(html)
        assert info.aid is None
        assert info.name_on_card is None

    def test_serializes_with_camel_case_aliases(self):
        info = parse_receipt_html(RECEIPT_PAGE)
        assert info.model_dump(by_alias=True) == {
            "AID": "A123456",
            "nameOnCard": "JOHN Q PUBLIC",
        }

"""Unit tests for stored procedure payload decoding."""

import json

import pytest

from docstore.bulkread.core import ResponseDecodeError
from docstore.bulkread.models import ContinuationState
from docstore.bulkread.runtime import decode_page


class TestDecodePage:
    """Test decode_page behavior."""

    @pytest.mark.parametrize("payload", [None, "", "   ", "\n\t"])
    def test_blank_payload_is_empty_sentinel(self, payload):
        """Test blank payloads decode to None."""
        assert decode_page(payload, 3.0) is None

    def test_full_page(self):
        """Test a complete payload decodes every field."""
        payload = json.dumps(
            {
                "readResults": [{"id": "1"}, {"id": "2"}, 3, "four", None],
                "continuationPk": "pk1",
                "continuationToken": "tok1",
                "errorCode": 0,
            }
        )
        page = decode_page(payload, 12.5)

        assert page is not None
        assert page.documents == ({"id": "1"}, {"id": "2"}, 3, "four", None)
        assert page.continuation == ContinuationState(key="pk1", token="tok1")
        assert page.completion_code == 0
        assert page.request_charge == 12.5
        assert not page.is_complete

    def test_zero_document_page_is_not_empty(self):
        """Test a page with no documents is still a page."""
        page = decode_page('{"readResults": [], "errorCode": 1}', 0.0)

        assert page is not None
        assert page.document_count == 0
        assert page.is_complete
        assert page.continuation == ContinuationState()

    def test_anomaly_code(self):
        """Test completion codes above 1 are flagged."""
        page = decode_page('{"readResults": [], "errorCode": 3}', 1.0)
        assert page.has_anomaly
        assert not page.is_complete

    @pytest.mark.parametrize(
        "payload",
        [
            "{not json",
            "[]",
            '"text"',
            "{}",
            '{"readResults": []}',
            '{"errorCode": 1}',
            '{"readResults": {}, "errorCode": 1}',
            '{"readResults": [], "errorCode": "1"}',
            '{"readResults": [], "errorCode": 1, "continuationPk": 5}',
        ],
    )
    def test_malformed_payload_raises(self, payload):
        """Test malformed payloads raise instead of looking empty or complete."""
        with pytest.raises(ResponseDecodeError) as exc_info:
            decode_page(payload, 1.0)
        assert exc_info.value.payload == payload

    def test_negative_charge_raises(self):
        """Test a negative request charge is rejected."""
        with pytest.raises(ResponseDecodeError):
            decode_page('{"readResults": [], "errorCode": 1}', -1.0)

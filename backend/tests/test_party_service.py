import asyncio

import httpx
import pytest

from conflict_scanner.core.errors import ConfigurationError, ScannerError, UpstreamServiceError
from conflict_scanner.services.party_service import PartyExtractionService

URL = "https://hooks.example.test/extract-terms"


def _service(handler):
    return PartyExtractionService(webhook_url=URL, transport=httpx.MockTransport(handler))


def test_forwards_file_as_data_field():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["body"] = request.content
        return httpx.Response(200, json={"success": True, "count": 2, "terms": ["Acme Corp", "Jane Doe"]})

    result = asyncio.run(_service(handler).extract("matter.pdf", b"%PDF-bytes", "application/pdf"))

    assert seen["url"] == URL
    assert b'name="data"; filename="matter.pdf"' in seen["body"]
    assert b"%PDF-bytes" in seen["body"]
    assert result.success is True
    assert result.count == 2
    assert result.terms == ["Acme Corp", "Jane Doe"]


def test_count_defaults_to_number_of_terms():
    handler = lambda request: httpx.Response(200, json={"success": True, "terms": ["A", "B", "C"]})
    assert asyncio.run(_service(handler).extract("f.txt", b"x")).count == 3


def test_upstream_status_is_passed_through():
    handler = lambda request: httpx.Response(404, text="webhook not registered")
    with pytest.raises(ScannerError) as exc:
        asyncio.run(_service(handler).extract("f.txt", b"x"))
    assert exc.value.status_code == 404
    assert exc.value.message == "n8n extraction failed: webhook not registered"


@pytest.mark.parametrize("body", [{"success": False, "terms": []}, {"success": True}, ["Acme"]])
def test_invalid_workflow_response(body):
    handler = lambda request: httpx.Response(200, json=body)
    with pytest.raises(UpstreamServiceError) as exc:
        asyncio.run(_service(handler).extract("f.txt", b"x"))
    assert exc.value.message == "Invalid response from n8n workflow"


def test_webhook_must_be_configured(unconfigured):
    with pytest.raises(ConfigurationError):
        asyncio.run(PartyExtractionService().extract("f.txt", b"x"))

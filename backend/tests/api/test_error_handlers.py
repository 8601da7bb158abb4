"""Tests for the exception handlers, called directly without routing."""

import json

from starlette.requests import Request

from claimcount.api.error_handlers import (
    handle_claim_count_error, handle_unexpected_error,
)
from claimcount.core.errors import ErrorContext, LookupFailure


def _request() -> Request:
    return Request({"type": "http", "method": "POST", "path": "/api/v1/claim-counts",
                    "headers": [], "query_string": b""})


async def test_domain_error_uses_its_status_and_envelope():
    exc = LookupFailure("timeout", ErrorContext(policy_id=5, driver_id=1))
    response = await handle_claim_count_error(_request(), exc)
    assert response.status_code == 503
    body = json.loads(response.body)
    assert body["error"]["code"] == "LOOKUP_FAILURE"
    assert body["error"]["context"] == {"policy_id": 5, "driver_id": 1}


async def test_unexpected_error_hides_details():
    response = await handle_unexpected_error(_request(), RuntimeError("password=hunter2"))
    assert response.status_code == 500
    body = json.loads(response.body)
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "hunter2" not in response.body.decode()

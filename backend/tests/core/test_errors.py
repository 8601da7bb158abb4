"""Tests for the error hierarchy — codes, statuses and the REST envelope."""

from claimcount.core.errors import (
    ClaimCountError, DatabaseError, ErrorCategory, ErrorContext,
    LookupFailure, SourceUnavailable, ValidationError,
)


def test_validation_error_is_400_with_fields():
    err = ValidationError("bad", ["window_years"])
    assert err.http_status == 400
    body = err.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == "validation"
    assert body["fields"] == ["window_years"]


def test_source_unavailable_records_source():
    err = SourceUnavailable("gis", "timeout", ErrorContext(policy_id=1001))
    assert err.http_status == 503
    assert err.source == "gis"
    body = err.to_response()["error"]
    assert body["context"] == {"policy_id": 1001, "source": "gis"}
    assert "gis" in body["message"]


def test_lookup_failure_is_external_source_error():
    err = LookupFailure("connection refused")
    assert err.category is ErrorCategory.EXTERNAL_SOURCE
    assert err.code == "LOOKUP_FAILURE"


def test_all_errors_share_base():
    for err in (
        ValidationError("x", []), LookupFailure("x"),
        SourceUnavailable("gis", "x"), DatabaseError("x", "query"),
    ):
        assert isinstance(err, ClaimCountError)


def test_unset_identifiers_left_out_of_envelope():
    err = LookupFailure("down", ErrorContext(policy_id=7, driver_id=2))
    assert err.to_response()["error"]["context"] == {"policy_id": 7, "driver_id": 2}


def test_log_extra_carries_code_and_identifiers():
    err = SourceUnavailable("non_gis", "x", ErrorContext(policy_id=1001))
    assert err.log_extra() == {
        "error_code": "SOURCE_UNAVAILABLE", "policy_id": 1001, "source": "non_gis",
    }


def test_debug_info_not_exposed():
    err = ValidationError("bad", ["at_fault"], ErrorContext(debug_info={"raw": "secret"}))
    assert "secret" not in str(err.to_response())

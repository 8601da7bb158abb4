"""Tests for build_classification_predicate — at-fault selector over the chargeable code."""

import pytest

from claimcount.core.classification import build_classification_predicate
from claimcount.core.domain_types import AtFault, RecordField
from claimcount.core.predicate import Op

CODES = [0, 1, 50, 99, 100, 101, 250]


def test_only_at_fault_accepts_chargeable_code():
    predicate = build_classification_predicate(AtFault.ONLY_AT_FAULT, 100)
    assert predicate(100)
    assert not predicate(50)


def test_only_not_at_fault_rejects_chargeable_code():
    predicate = build_classification_predicate(AtFault.ONLY_NOT_AT_FAULT, 100)
    assert predicate(50)
    assert not predicate(100)


def test_any_accepts_every_code():
    predicate = build_classification_predicate(AtFault.ANY, 100)
    assert all(predicate(code) for code in CODES)
    assert predicate.op is Op.MATCH_ALL


def test_at_fault_and_not_at_fault_partition_codes():
    at_fault = build_classification_predicate(AtFault.ONLY_AT_FAULT, 100)
    not_at_fault = build_classification_predicate(AtFault.ONLY_NOT_AT_FAULT, 100)
    for code in CODES:
        assert at_fault(code) != not_at_fault(code)


def test_chargeable_code_is_injected():
    predicate = build_classification_predicate(AtFault.ONLY_AT_FAULT, 7)
    assert predicate(7)
    assert not predicate(100)


@pytest.mark.parametrize("at_fault", list(AtFault))
def test_every_selector_targets_classification_code(at_fault):
    predicate = build_classification_predicate(at_fault, 100)
    assert predicate is not None
    assert predicate.field is RecordField.CLASSIFICATION_CODE
